"""Data types for burndown charts.

This module contains the enums and the chart geometry structures shared
by the computation core and the Qt models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class SortOption(Enum):
    """Derived metric used to order the project list."""

    PROGRESS = "progress"
    REMAINING = "remaining"


class SortOrder(Enum):
    """Direction of the project list ordering."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    def toggled(self) -> "SortOrder":
        if self is SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


class LineKind(Enum):
    """The three trajectories drawn on a burndown chart."""

    IDEAL = "ideal"
    ACTUAL = "actual"
    PLAN = "plan"


@dataclass
class ChartPoint:
    """A single point in canvas coordinates."""

    x: float
    y: float


@dataclass
class ChartLine:
    """A polyline on the chart canvas."""

    kind: LineKind
    points: List[ChartPoint] = field(default_factory=list)
    color: str = "#000000"
    width: float = 2.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "color": self.color,
            "width": self.width,
            "points": [{"x": pt.x, "y": pt.y} for pt in self.points],
        }
