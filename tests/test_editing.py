# tests/test_editing.py

from __future__ import annotations

from pointlist.domain.task import (
    NO_EDIT,
    EditField,
    EditMode,
    EditState,
    Task,
    begin_name_edit,
    begin_points_edit,
    change_name_draft,
    change_points_draft,
    commit_name_edit,
    commit_points_edit,
    discard_edits,
    sort_tasks,
)


def test_initial_state_is_idle() -> None:
    state = EditState()

    assert state.points.index == NO_EDIT
    assert state.name.index == NO_EDIT
    assert state.active_fields == []
    assert state.mode is EditMode.INDEPENDENT


def test_points_edit_lifecycle(tasks) -> None:
    state = begin_points_edit(EditState(), 0, 12)
    assert state.points.active
    assert state.points.value == 12
    assert state.is_editing(EditField.POINTS, 0)

    state = change_points_draft(state, "20")
    assert state.points.value == 20

    state, updated = commit_points_edit(state, tasks)

    assert not state.points.active
    assert state.points.value == 0
    assert sort_tasks(updated)[0] == Task(name="get shorty", points=20)


def test_commit_without_begin_changes_nothing(tasks) -> None:
    state = EditState()

    new_state, updated = commit_points_edit(state, tasks)
    assert new_state == state
    assert updated is tasks

    new_state, updated = commit_name_edit(state, tasks)
    assert new_state == state
    assert updated is tasks


def test_draft_change_without_session_is_ignored() -> None:
    state = EditState()

    assert change_points_draft(state, 5) == state
    assert change_name_draft(state, "x") == state


def test_invalid_points_draft_becomes_zero() -> None:
    state = begin_points_edit(EditState(), 1, 6)
    state = change_points_draft(state, "six")
    assert state.points.value == 0


def test_begin_replaces_previous_session_of_same_kind() -> None:
    state = begin_points_edit(EditState(), 0, 12)
    state = change_points_draft(state, 99)
    state = begin_points_edit(state, 1, 6)

    assert state.points.index == 1
    assert state.points.value == 6


def test_independent_mode_allows_both_editors(tasks) -> None:
    state = begin_points_edit(EditState(), 0, 12)
    state = begin_name_edit(state, 1, "kill bill")

    assert state.active_fields == [EditField.POINTS, EditField.NAME]

    state = change_name_draft(state, "kill bill vol. 2")
    state, updated = commit_name_edit(state, tasks)

    assert state.points.active
    assert not state.name.active
    assert Task(name="kill bill vol. 2", points=6) in updated


def test_single_mode_allows_one_editor() -> None:
    state = EditState(mode=EditMode.SINGLE)

    state = begin_points_edit(state, 0, 12)
    state = begin_name_edit(state, 1, "kill bill")
    assert state.active_fields == [EditField.NAME]

    state = begin_points_edit(state, 1, 6)
    assert state.active_fields == [EditField.POINTS]


def test_single_mode_begin_closes_other_draft_unwritten(tasks) -> None:
    state = begin_name_edit(EditState(mode=EditMode.SINGLE), 0, "get shorty")
    state = change_name_draft(state, "renamed")

    state = begin_points_edit(state, 1, 6)
    assert not state.name.active

    # nothing left to write, so the collection stays as it was
    state, updated = commit_name_edit(state, tasks)
    assert sort_tasks(updated) == sort_tasks(tasks)


def test_single_mode_commit_before_begin_keeps_draft(tasks) -> None:
    state = begin_name_edit(EditState(mode=EditMode.SINGLE), 0, "get shorty")
    state = change_name_draft(state, "renamed")

    state, updated = commit_name_edit(state, tasks)
    state = begin_points_edit(state, 1, 6)

    assert [task.name for task in sort_tasks(updated)] == ["renamed", "kill bill"]
    assert state.active_fields == [EditField.POINTS]


def test_discard_keeps_mode() -> None:
    state = begin_name_edit(EditState(mode=EditMode.SINGLE), 0, "x")

    state = discard_edits(state)

    assert state == EditState(mode=EditMode.SINGLE)


def test_commit_uses_index_against_current_order(tasks) -> None:
    # raising "kill bill" (sorted index 1) to the top moves it to index 0
    state = begin_points_edit(EditState(), 1, 6)
    state = change_points_draft(state, 30)
    state, updated = commit_points_edit(state, tasks)

    assert [t.name for t in sort_tasks(updated)] == ["kill bill", "get shorty"]
