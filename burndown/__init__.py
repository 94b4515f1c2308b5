"""Burndown tracker built with PySide6 and QML.

Projects record a total amount of work, a date range and per-period
planned/actual entries; the chart compares the ideal, planned and actual
remaining-work trajectories.
"""

from .chart import ChartLayout, build_chart_lines
from .model import ChartSettings
from .ordering import sort_projects
from .project_list import ProjectList
from .qml import BURNDOWN_QML_PATH
from .series import (
    ParsedSeries,
    chart_days,
    completed_total,
    cumulative_remaining,
    ideal_series,
    parse_entries,
    parse_entry,
    progress_ratio,
    remaining_tasks,
    whole_days_between,
)
from .types import ChartLine, ChartPoint, LineKind, SortOption, SortOrder
from .ui import create_burndown_window, main

__all__ = [
    "BURNDOWN_QML_PATH",
    "ChartLayout",
    "ChartLine",
    "ChartPoint",
    "ChartSettings",
    "LineKind",
    "ParsedSeries",
    "ProjectList",
    "SortOption",
    "SortOrder",
    "build_chart_lines",
    "chart_days",
    "completed_total",
    "create_burndown_window",
    "cumulative_remaining",
    "ideal_series",
    "main",
    "parse_entries",
    "parse_entry",
    "progress_ratio",
    "remaining_tasks",
    "sort_projects",
    "whole_days_between",
]
