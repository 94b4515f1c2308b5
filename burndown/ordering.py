"""Ordering of projects by their derived burndown metrics."""

from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar

from .types import SortOption, SortOrder

T = TypeVar("T")


def _metric(option: SortOption) -> Callable[[object], float]:
    if option is SortOption.PROGRESS:
        return lambda project: project.progress  # type: ignore[attr-defined]
    if option is SortOption.REMAINING:
        return lambda project: project.remainingTasks  # type: ignore[attr-defined]
    raise ValueError(f"Unknown sort option: {option!r}")


def sort_projects(projects: Iterable[T], option: SortOption, order: SortOrder) -> List[T]:
    """Return a new list of projects ordered by progress or remaining tasks.

    Projects with equal keys keep their insertion order in both directions.
    The input collection is left untouched.
    """
    key = _metric(option)
    return sorted(projects, key=key, reverse=order is SortOrder.DESCENDING)
