"""Tests for pipeline stage navigation."""
import pytest

from studiodesk.core.models import Project, ProjectStatus
from studiodesk.workflow import BOARD_COLUMNS, PIPELINE_SEQUENCE, group_by_column, move_project, next_status


@pytest.mark.parametrize("direction", ["forward", "backward"])
@pytest.mark.parametrize("status", list(ProjectStatus))
def test_next_status_moves_at_most_one_step(status, direction):
    result = next_status(status, direction)

    assert result in ProjectStatus
    if status not in PIPELINE_SEQUENCE:
        assert result == status
    else:
        delta = PIPELINE_SEQUENCE.index(result) - PIPELINE_SEQUENCE.index(status)
        assert delta in (0, 1 if direction == "forward" else -1)


def test_next_status_clamps_at_both_ends():
    assert next_status(ProjectStatus.INQUIRY, "backward") == ProjectStatus.INQUIRY
    assert next_status(ProjectStatus.CLOSED, "forward") == ProjectStatus.CLOSED


def test_side_states_never_move():
    assert next_status(ProjectStatus.ON_HOLD, "forward") == ProjectStatus.ON_HOLD
    assert next_status(ProjectStatus.CANCELLED, "backward") == ProjectStatus.CANCELLED


def test_next_status_accepts_board_aliases_and_raw_values():
    assert next_status("Shot", "next") == ProjectStatus.POST_PRODUCTION
    assert next_status("Shot", "prev") == ProjectStatus.SCHEDULED


def test_next_status_rejects_unknown_direction():
    with pytest.raises(ValueError):
        next_status(ProjectStatus.SHOT, "sideways")


def test_shot_project_walks_to_closed_and_stays():
    projects = [Project(id="p1", title="Wedding", status=ProjectStatus.SHOT)]

    projects = move_project(projects, "p1", "forward")
    assert projects[0].status == ProjectStatus.POST_PRODUCTION

    for _ in range(6):
        projects = move_project(projects, "p1", "forward")
    assert projects[0].status == ProjectStatus.CLOSED

    projects = move_project(projects, "p1", "forward")
    assert projects[0].status == ProjectStatus.CLOSED


def test_move_project_leaves_siblings_untouched():
    first = Project(id="p1", title="One", status=ProjectStatus.QUOTED, budget=100)
    second = Project(id="p2", title="Two", status=ProjectStatus.QUOTED, budget=200)

    moved = move_project([first, second], "p1", "backward")

    assert moved[0].status == ProjectStatus.INQUIRY
    assert moved[0].budget == 100
    assert moved[1] is second


def test_move_project_ignores_unknown_id():
    projects = [Project(id="p1", title="One", status=ProjectStatus.SHOT)]

    moved = move_project(projects, "missing", "forward")

    assert moved == projects


def test_group_by_column_skips_closed_and_side_states():
    projects = [
        Project(id="a", status=ProjectStatus.INQUIRY),
        Project(id="b", status=ProjectStatus.CLOSED),
        Project(id="c", status=ProjectStatus.ON_HOLD),
        Project(id="d", status=ProjectStatus.INQUIRY),
    ]

    columns = group_by_column(projects)

    assert list(columns) == list(BOARD_COLUMNS)
    assert ProjectStatus.CLOSED not in columns
    assert [p.id for p in columns[ProjectStatus.INQUIRY]] == ["a", "d"]
    assert sum(len(items) for items in columns.values()) == 2
