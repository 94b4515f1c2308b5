"""ProjectList: the sortable collection of burndown projects.

Projects are kept in the order they were saved. The list model's rows
always show the sorted view, which is recomputed whenever a project's
progress or remaining work changes or the sort settings change.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from PySide6.QtCore import (
    QAbstractListModel,
    QModelIndex,
    Property,
    QObject,
    Qt,
    Signal,
    Slot,
)
from PySide6.QtQml import QQmlEngine

from .model import ChartSettings
from .ordering import sort_projects
from .types import SortOption, SortOrder

logger = logging.getLogger(__name__)


class ProjectList(QAbstractListModel):
    """Qt model exposing the sorted project list to QML."""

    ProjectRole = Qt.UserRole + 1
    ProjectIdRole = Qt.UserRole + 2
    MaterialNameRole = Qt.UserRole + 3
    ProgressRole = Qt.UserRole + 4
    ProgressPercentRole = Qt.UserRole + 5
    RemainingTasksRole = Qt.UserRole + 6

    countChanged = Signal()
    sortChanged = Signal()

    def __init__(self, projects: Optional[List[ChartSettings]] = None):
        super().__init__()
        self._projects: List[ChartSettings] = []
        self._sort_option = SortOption.PROGRESS
        self._sort_order = SortOrder.ASCENDING
        self._view: List[ChartSettings] = []
        self._draft: Optional[ChartSettings] = None
        for project in projects or []:
            self._attach(project)
            self._projects.append(project)
        self._view = self.sortedProjects()

    # --- Qt model API ----------------------------------------------------
    def rowCount(self, parent: Optional[QModelIndex] = QModelIndex()) -> int:  # type: ignore[override]
        return len(self._view)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._view)):
            return None

        project = self._view[index.row()]
        if role == self.ProjectRole:
            return project
        elif role in (self.MaterialNameRole, Qt.DisplayRole):
            return project.materialName
        elif role == self.ProjectIdRole:
            return project.projectId
        elif role == self.ProgressRole:
            return project.progress
        elif role == self.ProgressPercentRole:
            return project.progressPercent
        elif role == self.RemainingTasksRole:
            return project.remainingTasks
        return None

    def roleNames(self):  # type: ignore[override]
        return {
            self.ProjectRole: b"project",
            self.ProjectIdRole: b"projectId",
            self.MaterialNameRole: b"materialName",
            self.ProgressRole: b"progress",
            self.ProgressPercentRole: b"progressPercent",
            self.RemainingTasksRole: b"remainingTasks",
        }

    @Property(int, notify=countChanged)
    def count(self) -> int:
        return len(self._projects)

    # --- Sorting ---------------------------------------------------------
    @Property(str, notify=sortChanged)
    def sortOption(self) -> str:
        return self._sort_option.value

    @Property(str, notify=sortChanged)
    def sortOrder(self) -> str:
        return self._sort_order.value

    @property
    def sort_option(self) -> SortOption:
        return self._sort_option

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    def sortedProjects(self) -> List[ChartSettings]:
        """Projects in display order; the stored order is not modified."""
        return sort_projects(self._projects, self._sort_option, self._sort_order)

    def _resort(self) -> None:
        self.beginResetModel()
        self._view = self.sortedProjects()
        self.endResetModel()

    @Slot(str, result=bool)
    def setSortOption(self, option) -> bool:
        try:
            option = SortOption(option)
        except ValueError:
            logger.debug("Ignoring unknown sort option %r", option)
            return False
        if option is not self._sort_option:
            self._sort_option = option
            self.sortChanged.emit()
            self._resort()
        return True

    @Slot(str, result=bool)
    def setSortOrder(self, order) -> bool:
        try:
            order = SortOrder(order)
        except ValueError:
            logger.debug("Ignoring unknown sort order %r", order)
            return False
        if order is not self._sort_order:
            self._sort_order = order
            self.sortChanged.emit()
            self._resort()
        return True

    @Slot()
    def toggleSortOrder(self) -> None:
        self._sort_order = self._sort_order.toggled()
        self.sortChanged.emit()
        self._resort()

    @Slot(str)
    def selectSortOption(self, option) -> None:
        """Handle a sort button press: pick the key and flip the direction."""
        if self.setSortOption(option):
            self.toggleSortOrder()

    # --- Collection edits ------------------------------------------------
    def _attach(self, project: ChartSettings) -> None:
        QQmlEngine.setObjectOwnership(project, QQmlEngine.CppOwnership)
        project.statsChanged.connect(self._onProjectStatsChanged)
        project.materialNameChanged.connect(self._onProjectNameChanged)

    def _detach(self, project: ChartSettings) -> None:
        project.statsChanged.disconnect(self._onProjectStatsChanged)
        project.materialNameChanged.disconnect(self._onProjectNameChanged)
        if project.parent() is self:
            project.setParent(None)

    @Slot()
    def _onProjectStatsChanged(self) -> None:
        self._resort()

    @Slot()
    def _onProjectNameChanged(self) -> None:
        if self._view:
            first = self.index(0, 0)
            last = self.index(len(self._view) - 1, 0)
            self.dataChanged.emit(first, last, [self.MaterialNameRole])

    @Slot(result=QObject)
    def createProject(self) -> ChartSettings:
        """Return a fresh, empty project that is not yet in the list.

        Only the latest unsaved draft is kept alive; starting another one
        abandons the previous draft.
        """
        draft = ChartSettings()
        QQmlEngine.setObjectOwnership(draft, QQmlEngine.CppOwnership)
        self._draft = draft
        return draft

    @Slot(QObject)
    def addProject(self, project: ChartSettings) -> None:
        if project is None or project in self._projects:
            return
        if project is self._draft:
            self._draft = None
        self._attach(project)
        self._projects.append(project)
        logger.debug("Added project %s", project.projectId)
        self._resort()
        self.countChanged.emit()

    def removeProjects(self, indices: Iterable[int]) -> None:
        """Remove projects by their positions in the stored (unsorted) order."""
        rows = sorted({i for i in indices if 0 <= i < len(self._projects)}, reverse=True)
        if not rows:
            return
        for row in rows:
            project = self._projects.pop(row)
            self._detach(project)
            logger.debug("Removed project %s", project.projectId)
        self._resort()
        self.countChanged.emit()

    @Slot(int)
    def removeAt(self, row: int) -> None:
        """Remove the project shown at a row of the sorted view."""
        if row < 0 or row >= len(self._view):
            return
        project = self._view[row]
        self.removeProjects([self._projects.index(project)])

    @Slot(int, result=QObject)
    def projectAt(self, row: int) -> Optional[ChartSettings]:
        if row < 0 or row >= len(self._view):
            return None
        return self._view[row]

    def projects(self) -> List[ChartSettings]:
        return list(self._projects)
