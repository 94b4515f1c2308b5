"""Burndown arithmetic over free-text period entries.

Period entries come straight from text fields, so anything that does not
read as a number is skipped rather than reported. Every helper here is a
plain function over Python values; the Qt models call into them whenever
a derived value is requested.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from numbers import Real
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple


def parse_entry(entry: object) -> Optional[float]:
    """Parse a single period entry, returning None when it is not a number."""
    if isinstance(entry, bool):
        return None
    if isinstance(entry, Real):
        value = float(entry)
    elif isinstance(entry, str):
        if "_" in entry:
            return None
        try:
            value = float(entry)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


class ParsedSeries:
    """Lazy, restartable view over the numeric values of some entries.

    Each iteration re-reads the underlying entries, so a series built over
    a live list reflects later edits to that list.
    """

    def __init__(self, entries: Iterable[object]):
        if isinstance(entries, Sequence):
            self._entries: Sequence[object] = entries
        else:
            self._entries = tuple(entries)

    def __iter__(self) -> Iterator[float]:
        for entry in self._entries:
            value = parse_entry(entry)
            if value is not None:
                yield value

    def __repr__(self) -> str:
        return f"ParsedSeries({list(self)!r})"


def parse_entries(entries: Iterable[object]) -> ParsedSeries:
    return ParsedSeries(entries)


def completed_total(entries: Iterable[object]) -> float:
    """Sum of all entries that parse as numbers (0 when there are none)."""
    return sum(parse_entries(entries), 0.0)


def progress_ratio(entries: Iterable[object], total_task: float) -> float:
    """Completed share of total_task, clamped to [0, 1].

    A zero (or negative) total has nothing to track and reports 0.
    """
    if total_task <= 0:
        return 0.0
    ratio = completed_total(entries) / total_task
    return max(0.0, min(ratio, 1.0))


def remaining_tasks(entries: Iterable[object], total_task: float) -> float:
    """Work left after subtracting completed entries, kept within [0, total_task]."""
    remaining = max(0.0, total_task - completed_total(entries))
    return min(remaining, max(0.0, total_task))


def cumulative_remaining(entries: Iterable[object], total_task: float) -> List[float]:
    """Remaining work after each parsed period.

    Unparsable entries are dropped without reserving a slot, so the result
    has one element per numeric entry.
    """
    remaining: List[float] = []
    running = 0.0
    for value in parse_entries(entries):
        running += value
        remaining.append(max(0.0, total_task - running))
    return remaining


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def whole_days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative when end is earlier)."""
    return (_as_date(end) - _as_date(start)).days


def chart_days(start: date, end: date) -> int:
    """Horizontal span of the chart in days, never less than 1."""
    return max(1, whole_days_between(start, end))


def ideal_series(total_task: float, days: int) -> List[Tuple[float, float]]:
    """Endpoints of the ideal trajectory as (day, remaining) pairs."""
    return [(0.0, float(total_task)), (float(max(1, days)), 0.0)]
