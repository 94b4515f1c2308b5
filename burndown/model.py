"""ChartSettings: the observable project record behind a burndown chart.

All derived values (progress, remaining tasks, chart series) are computed
on demand from the raw fields. Every mutation goes through a slot that
emits the matching change signals, so QML bindings and Python listeners
see edits without any implicit reactivity.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Union

from PySide6.QtCore import Property, QObject, Signal, Slot

from . import series
from .chart import ChartLayout, build_chart_lines
from .constants import DEFAULT_PERIOD_DAYS, REMAINING_LABEL_FORMAT, REMAINING_LIST_LABEL_FORMAT

logger = logging.getLogger(__name__)

DateInput = Union[date, str]


def _coerce_date(value: DateInput) -> Optional[date]:
    """Accept a date or an ISO date/timestamp string; None when unreadable."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


class ChartSettings(QObject):
    """A project: name, total work, date range, and per-period entries."""

    materialNameChanged = Signal()
    totalTaskChanged = Signal()
    datesChanged = Signal()
    periodsChanged = Signal()
    statsChanged = Signal()
    chartChanged = Signal()
    changed = Signal()

    def __init__(
        self,
        material_name: str = "",
        total_task: float = 0.0,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        actuals: Optional[List[str]] = None,
        plans: Optional[List[str]] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._id = str(uuid.uuid4())
        self._material_name = material_name
        self._total_task = max(0.0, float(total_task))
        self._start_date = start_date or date.today()
        self._end_date = end_date or self._start_date + timedelta(days=DEFAULT_PERIOD_DAYS)
        self._actuals: List[str] = list(actuals or [])
        self._plans: List[str] = list(plans or [])

    def __repr__(self) -> str:
        return (
            f"ChartSettings(name={self._material_name!r}, total={self._total_task}, "
            f"progress={self._get_progress():.2f})"
        )

    # --- Notification helpers -------------------------------------------
    def _emit_stats(self) -> None:
        self.statsChanged.emit()
        self.chartChanged.emit()
        self.changed.emit()

    # --- Identity and name ----------------------------------------------
    @Property(str, constant=True)
    def projectId(self) -> str:
        return self._id

    @Property(str, notify=materialNameChanged)
    def materialName(self) -> str:
        return self._material_name

    @materialName.setter  # type: ignore[no-redef]
    def materialName(self, value: str) -> None:
        self.setMaterialName(value)

    @Slot(str)
    def setMaterialName(self, name: str) -> None:
        if name == self._material_name:
            return
        self._material_name = name
        self.materialNameChanged.emit()
        self.changed.emit()

    # --- Total work ------------------------------------------------------
    @Property(float, notify=totalTaskChanged)
    def totalTask(self) -> float:
        return self._total_task

    @totalTask.setter  # type: ignore[no-redef]
    def totalTask(self, value: float) -> None:
        self.setTotalTask(value)

    @Slot(float)
    def setTotalTask(self, total: float) -> None:
        total = max(0.0, float(total))
        if total == self._total_task:
            return
        self._total_task = total
        logger.debug("Project %s total set to %s", self._id, total)
        self.totalTaskChanged.emit()
        self._emit_stats()

    @Slot(str, result=bool)
    def setTotalTaskText(self, text: str) -> bool:
        """Set the total from a text field; unreadable text leaves it untouched."""
        value = series.parse_entry(text)
        if value is None:
            logger.debug("Ignoring non-numeric total %r", text)
            return False
        self.setTotalTask(value)
        return True

    # --- Dates -----------------------------------------------------------
    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> date:
        return self._end_date

    @Property(str, notify=datesChanged)
    def startDate(self) -> str:
        return self._start_date.isoformat()

    @Property(str, notify=datesChanged)
    def endDate(self) -> str:
        return self._end_date.isoformat()

    def _set_date(self, attr: str, value: DateInput) -> bool:
        parsed = _coerce_date(value)
        if parsed is None:
            logger.debug("Ignoring unreadable date %r", value)
            return False
        if getattr(self, attr) == parsed:
            return True
        setattr(self, attr, parsed)
        self.datesChanged.emit()
        self.chartChanged.emit()
        self.changed.emit()
        return True

    @Slot(str, result=bool)
    def setStartDate(self, value: DateInput) -> bool:
        return self._set_date("_start_date", value)

    @Slot(str, result=bool)
    def setEndDate(self, value: DateInput) -> bool:
        return self._set_date("_end_date", value)

    @Property(int, notify=datesChanged)
    def days(self) -> int:
        return series.chart_days(self._start_date, self._end_date)

    # --- Period entries --------------------------------------------------
    @Property("QVariantList", notify=periodsChanged)
    def actuals(self) -> List[str]:
        return list(self._actuals)

    @Property("QVariantList", notify=periodsChanged)
    def plans(self) -> List[str]:
        return list(self._plans)

    @Property(int, notify=periodsChanged)
    def periodCount(self) -> int:
        return max(len(self._actuals), len(self._plans))

    def _periods_edited(self) -> None:
        self.periodsChanged.emit()
        self._emit_stats()

    @Slot()
    def addPeriod(self) -> None:
        """Append an empty plan/actual slot to both lists together."""
        self._actuals.append("")
        self._plans.append("")
        self._periods_edited()

    @Slot(int)
    def removePeriod(self, index: int) -> None:
        if index < 0 or index >= self.periodCount:
            return
        if index < len(self._actuals):
            self._actuals.pop(index)
        if index < len(self._plans):
            self._plans.pop(index)
        self._periods_edited()

    @Slot(int, str)
    def setActual(self, index: int, text: str) -> None:
        if index < 0 or index >= len(self._actuals):
            return
        if self._actuals[index] == text:
            return
        self._actuals[index] = text
        self._periods_edited()

    @Slot(int, str)
    def setPlan(self, index: int, text: str) -> None:
        if index < 0 or index >= len(self._plans):
            return
        if self._plans[index] == text:
            return
        self._plans[index] = text
        self._periods_edited()

    # --- Derived values --------------------------------------------------
    def _get_progress(self) -> float:
        return series.progress_ratio(self._actuals, self._total_task)

    @Property(float, notify=statsChanged)
    def progress(self) -> float:
        """Completed share of the total, in [0, 1]; 0 when there is no total."""
        return self._get_progress()

    @Property(int, notify=statsChanged)
    def progressPercent(self) -> int:
        return int(self._get_progress() * 100)

    @Property(float, notify=statsChanged)
    def remainingTasks(self) -> float:
        return series.remaining_tasks(self._actuals, self._total_task)

    @Property(str, notify=statsChanged)
    def remainingLabel(self) -> str:
        return REMAINING_LABEL_FORMAT.format(remaining=self.remainingTasks)

    @Property(str, notify=statsChanged)
    def remainingListLabel(self) -> str:
        """Remaining work as the project list shows it, truncated to whole tasks."""
        return REMAINING_LIST_LABEL_FORMAT.format(remaining=int(self.remainingTasks))

    @Property("QVariantList", notify=chartChanged)
    def idealSeries(self) -> List[Dict[str, float]]:
        """Ideal trajectory endpoints as {"day", "remaining"} pairs."""
        return [
            {"day": day, "remaining": remaining}
            for day, remaining in series.ideal_series(self._total_task, self.days)
        ]

    @Property("QVariantList", notify=chartChanged)
    def actualSeries(self) -> List[float]:
        return series.cumulative_remaining(self._actuals, self._total_task)

    @Property("QVariantList", notify=chartChanged)
    def planSeries(self) -> List[float]:
        return series.cumulative_remaining(self._plans, self._total_task)

    def chart_layout(self, width: float, height: float) -> ChartLayout:
        return ChartLayout(
            width=float(width),
            height=float(height),
            total_task=self._total_task,
            days=self.days,
        )

    @Slot(float, float, result="QVariantList")
    def chartLines(self, width: float, height: float) -> List[Dict[str, Any]]:
        """Return the chart polylines for a canvas, as dicts for QML."""
        lines = build_chart_lines(
            self.chart_layout(width, height),
            self.actualSeries,
            self.planSeries,
        )
        return [line.to_dict() for line in lines]
