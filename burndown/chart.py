"""Mapping of burndown series onto a drawing canvas.

Canvas coordinates follow the usual screen convention: x grows to the
right, y grows downward. Remaining work is drawn against the top edge, so
a full backlog sits at y == 0 and an empty one at y == height.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .constants import LINE_COLORS, LINE_WIDTH
from .types import ChartLine, ChartPoint, LineKind


@dataclass
class ChartLayout:
    """Canvas size plus the scales needed to place series values."""

    width: float
    height: float
    total_task: float
    days: int

    def x_for_index(self, index: float) -> float:
        return self.width * index / max(1, self.days)

    def y_for_value(self, value: float) -> float:
        # Callers guard total_task == 0 before mapping values.
        return self.height - self.height * value / self.total_task

    @property
    def is_degenerate(self) -> bool:
        return self.total_task == 0

    def flat_baseline(self) -> List[ChartPoint]:
        return [ChartPoint(0.0, self.height), ChartPoint(self.width, self.height)]

    def ideal_points(self) -> List[ChartPoint]:
        """Straight segment from the full backlog at day 0 to zero at the last day."""
        return [
            ChartPoint(0.0, 0.0),
            ChartPoint(self.x_for_index(self.days), self.height),
        ]

    def series_points(self, remaining: Sequence[float]) -> List[ChartPoint]:
        """Polyline for a cumulative series, anchored at the top-left corner."""
        points = [ChartPoint(0.0, 0.0)]
        for index, value in enumerate(remaining):
            points.append(ChartPoint(self.x_for_index(index), self.y_for_value(value)))
        return points


def should_draw_actual(actual_remaining: Sequence[float]) -> bool:
    return bool(actual_remaining) and actual_remaining[-1] >= 0


def should_draw_plan(plan_remaining: Sequence[float]) -> bool:
    return sum(plan_remaining) > 0


def _line(kind: LineKind, points: List[ChartPoint], colors: Optional[Dict[LineKind, str]]) -> ChartLine:
    palette = colors or LINE_COLORS
    return ChartLine(kind=kind, points=points, color=palette[kind], width=LINE_WIDTH)


def build_chart_lines(
    layout: ChartLayout,
    actual_remaining: Sequence[float],
    plan_remaining: Sequence[float],
    colors: Optional[Dict[LineKind, str]] = None,
) -> List[ChartLine]:
    """Return the lines to stroke, in drawing order (ideal, actual, plan).

    The ideal line is always present. With a zero total both the actual and
    plan lines collapse to a flat baseline; otherwise each is only drawn
    when its series has something meaningful to show.
    """
    lines = [_line(LineKind.IDEAL, layout.ideal_points(), colors)]

    if layout.is_degenerate:
        lines.append(_line(LineKind.ACTUAL, layout.flat_baseline(), colors))
        lines.append(_line(LineKind.PLAN, layout.flat_baseline(), colors))
        return lines

    if should_draw_actual(actual_remaining):
        lines.append(_line(LineKind.ACTUAL, layout.series_points(actual_remaining), colors))
    if should_draw_plan(plan_remaining):
        lines.append(_line(LineKind.PLAN, layout.series_points(plan_remaining), colors))
    return lines
