"""Tests for the ProjectList model and project ordering."""

import pytest

from burndown.model import ChartSettings
from burndown.ordering import sort_projects
from burndown.project_list import ProjectList
from burndown.types import SortOption, SortOrder


@pytest.fixture
def projects(make_project):
    """Three projects with distinct progress and remaining work."""
    return [
        make_project(name="Low", total_task=10, actuals=["3"]),      # 0.3, 7 left
        make_project(name="High", total_task=100, actuals=["70"]),   # 0.7, 30 left
        make_project(name="Mid", total_task=50, actuals=["25"]),     # 0.5, 25 left
    ]


@pytest.fixture
def project_list(projects):
    return ProjectList(projects)


def _names(items):
    return [p.materialName for p in items]


def _row_names(model):
    return [model.data(model.index(row, 0), ProjectList.MaterialNameRole) for row in range(model.rowCount())]


class TestSortProjects:
    """Tests for the pure ordering function."""

    def test_progress_descending(self, make_project):
        a = make_project(name="a", total_task=10, actuals=["3"])
        b = make_project(name="b", total_task=10, actuals=["7"])
        result = sort_projects([a, b], SortOption.PROGRESS, SortOrder.DESCENDING)
        assert result == [b, a]

    def test_progress_ascending_adjacent_pairs(self, projects):
        result = sort_projects(projects, SortOption.PROGRESS, SortOrder.ASCENDING)
        assert all(x.progress <= y.progress for x, y in zip(result, result[1:]))

    def test_remaining(self, projects):
        assert _names(sort_projects(projects, SortOption.REMAINING, SortOrder.ASCENDING)) == ["Low", "Mid", "High"]
        assert _names(sort_projects(projects, SortOption.REMAINING, SortOrder.DESCENDING)) == ["High", "Mid", "Low"]

    def test_input_untouched(self, projects):
        before = list(projects)
        sort_projects(projects, SortOption.PROGRESS, SortOrder.DESCENDING)
        assert projects == before

    def test_ties_keep_insertion_order(self, make_project):
        first = make_project(name="first", total_task=10, actuals=["5"])
        second = make_project(name="second", total_task=20, actuals=["10"])
        for order in SortOrder:
            assert sort_projects([first, second], SortOption.PROGRESS, order) == [first, second]

    def test_unknown_option(self, projects):
        with pytest.raises(ValueError):
            sort_projects(projects, "progress", SortOrder.ASCENDING)


class TestProjectListModel:
    """Tests for the Qt list model surface."""

    def test_empty(self, app):
        model = ProjectList()
        assert model.rowCount() == 0
        assert model.count == 0
        assert model.sortOption == "progress"
        assert model.sortOrder == "ascending"

    def test_rows_follow_sorted_view(self, project_list):
        assert _row_names(project_list) == ["Low", "Mid", "High"]

    def test_storage_order_untouched(self, project_list):
        assert _names(project_list.projects()) == ["Low", "High", "Mid"]

    def test_role_names(self, project_list):
        roles = project_list.roleNames()
        assert roles[ProjectList.ProjectRole] == b"project"
        assert roles[ProjectList.MaterialNameRole] == b"materialName"
        assert roles[ProjectList.ProgressRole] == b"progress"
        assert roles[ProjectList.ProgressPercentRole] == b"progressPercent"
        assert roles[ProjectList.RemainingTasksRole] == b"remainingTasks"

    def test_data_roles(self, project_list):
        index = project_list.index(2, 0)
        assert project_list.data(index, ProjectList.ProgressRole) == pytest.approx(0.7)
        assert project_list.data(index, ProjectList.ProgressPercentRole) == 70
        assert project_list.data(index, ProjectList.RemainingTasksRole) == 30.0
        assert project_list.data(index, ProjectList.ProjectRole) is project_list.projectAt(2)

    def test_data_invalid_index(self, project_list):
        assert project_list.data(project_list.index(99, 0), ProjectList.MaterialNameRole) is None

    def test_project_at_out_of_range(self, project_list):
        assert project_list.projectAt(-1) is None
        assert project_list.projectAt(3) is None


class TestSorting:
    """Tests for sort key and direction state."""

    def test_select_option_toggles_order(self, project_list):
        project_list.selectSortOption("progress")
        assert project_list.sort_order is SortOrder.DESCENDING
        assert _row_names(project_list) == ["High", "Mid", "Low"]

        project_list.selectSortOption("progress")
        assert project_list.sort_order is SortOrder.ASCENDING
        assert _row_names(project_list) == ["Low", "Mid", "High"]

    def test_select_other_option_also_toggles(self, project_list):
        project_list.selectSortOption("remaining")
        assert project_list.sort_option is SortOption.REMAINING
        assert project_list.sort_order is SortOrder.DESCENDING
        assert _row_names(project_list) == ["High", "Mid", "Low"]

    def test_set_option_and_order_directly(self, project_list):
        assert project_list.setSortOption(SortOption.REMAINING) is True
        assert project_list.setSortOrder("ascending") is True
        assert _row_names(project_list) == ["Low", "Mid", "High"]

    def test_unknown_values_ignored(self, project_list):
        assert project_list.setSortOption("alphabetical") is False
        assert project_list.setSortOrder("sideways") is False
        project_list.selectSortOption("alphabetical")
        assert project_list.sort_option is SortOption.PROGRESS
        assert project_list.sort_order is SortOrder.ASCENDING

    def test_sort_signal(self, project_list, qtbot):
        with qtbot.waitSignal(project_list.sortChanged, timeout=1000):
            project_list.toggleSortOrder()

    def test_resorts_when_project_changes(self, project_list, projects):
        low = projects[0]
        low.setTotalTask(4)  # 3/4 = 0.75
        assert _row_names(project_list) == ["Mid", "High", "Low"]

    def test_model_reset_on_project_change(self, project_list, projects, qtbot):
        with qtbot.waitSignal(project_list.modelReset, timeout=1000):
            projects[2].addPeriod()


class TestCollectionEdits:
    """Tests for adding and removing projects."""

    def test_create_project_not_added(self, project_list):
        draft = project_list.createProject()
        assert isinstance(draft, ChartSettings)
        assert project_list.count == 3

    def test_add_project(self, project_list, qtbot):
        draft = project_list.createProject()
        draft.setMaterialName("New")
        draft.setTotalTask(10)
        with qtbot.waitSignal(project_list.countChanged, timeout=1000):
            project_list.addProject(draft)
        assert project_list.count == 4
        assert project_list.projects()[-1] is draft
        assert _row_names(project_list)[0] == "New"

    def test_add_same_project_twice_ignored(self, project_list, projects):
        project_list.addProject(projects[0])
        project_list.addProject(None)
        assert project_list.count == 3

    def test_remove_projects_by_storage_offsets(self, project_list):
        project_list.removeProjects([0, 2, 99])
        assert _names(project_list.projects()) == ["High"]
        assert project_list.rowCount() == 1

    def test_remove_at_uses_sorted_row(self, project_list):
        # Sorted view is Low, Mid, High; row 1 is "Mid" even though it is stored last.
        project_list.removeAt(1)
        assert _names(project_list.projects()) == ["Low", "High"]

    def test_remove_at_out_of_range(self, project_list):
        project_list.removeAt(-1)
        project_list.removeAt(3)
        assert project_list.count == 3

    def test_removed_project_no_longer_tracked(self, project_list, projects, qtbot):
        removed = projects[0]
        project_list.removeProjects([0])
        with qtbot.assertNotEmitted(project_list.modelReset):
            removed.setTotalTask(1000)

    def test_rename_emits_data_changed(self, project_list, projects, qtbot):
        with qtbot.waitSignal(project_list.dataChanged, timeout=1000):
            projects[1].setMaterialName("Higher")
        assert "Higher" in _row_names(project_list)

    def test_abandoned_drafts_are_not_kept_by_the_list(self, project_list):
        for _ in range(5):
            project_list.createProject()
        assert project_list.findChildren(ChartSettings) == []

    def test_draft_survives_until_added(self, project_list):
        draft = project_list.createProject()
        draft.setMaterialName("Kept")
        project_list.addProject(draft)
        assert draft.parent() is None
        assert draft in project_list.projects()

    def test_removed_project_is_released(self, project_list):
        draft = project_list.createProject()
        draft.setTotalTask(10)
        project_list.addProject(draft)
        project_list.removeAt(project_list.sortedProjects().index(draft))
        assert draft not in project_list.projects()
        assert draft.parent() is None
        assert project_list.findChildren(ChartSettings) == []

    def test_removing_a_child_project_clears_its_parent(self, make_project):
        child = make_project(name="Child")
        model = ProjectList([child])
        child.setParent(model)
        model.removeAt(0)
        assert child.parent() is None
