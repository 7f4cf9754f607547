# tests/test_session.py

from __future__ import annotations

import logging

import pytest

from pointlist.application import TaskSession
from pointlist.domain.task import EditField, EditMode


@pytest.fixture()
def session(tasks) -> TaskSession:
    return TaskSession(next_task="eat the frog 20pts", tasks=tasks)


def listing(session: TaskSession) -> list[tuple[str, int]]:
    return [(view.name, view.points) for view in session.tasks]


def test_renders_seeded_tasks_sorted(session: TaskSession) -> None:
    assert listing(session) == [("get shorty", 12), ("kill bill", 6)]


def test_critical_labels(session: TaskSession) -> None:
    assert [view.label for view in session.tasks] == ["critical", "normal"]


def test_submit_add_uses_next_task_field(session: TaskSession) -> None:
    session.submit_add()

    assert len(session.tasks) == 3
    assert session.tasks[0].name == "eat the frog"
    # the field is left as typed
    assert session.next_task == "eat the frog 20pts"


def test_submit_add_with_explicit_text(session: TaskSession) -> None:
    session.set_next_task("ignored")
    session.submit_add("read a book")

    assert listing(session)[-1] == ("read a book", 0)


def test_submit_add_accepts_blank_text() -> None:
    session = TaskSession()
    session.submit_add()

    assert listing(session) == [("", 0)]


def test_click_remove(session: TaskSession) -> None:
    session.click_remove(0)
    assert listing(session) == [("kill bill", 6)]

    session.click_remove(3)
    assert listing(session) == [("kill bill", 6)]


def test_update_points_by_click_change_blur(session: TaskSession) -> None:
    session.click_points(0)
    assert session.edit_state.is_editing(EditField.POINTS, 0)
    assert session.edit_state.points.value == 12

    session.change_points_draft("20")
    # drafts do not touch the list until committed
    assert listing(session)[0] == ("get shorty", 12)

    session.blur_points()

    assert listing(session)[0] == ("get shorty", 20)
    assert not session.edit_state.points.active


def test_update_name_by_click_change_blur(session: TaskSession) -> None:
    session.click_name(1)
    assert session.edit_state.name.value == "kill bill"

    session.change_name_draft("kill bill vol. 2")
    session.blur_name()

    assert listing(session) == [("get shorty", 12), ("kill bill vol. 2", 6)]


def test_blur_without_click_is_noop(session: TaskSession) -> None:
    before = session.snapshot()

    session.blur_points()
    session.blur_name()

    assert session.snapshot() == before
    assert session.edit_state.active_fields == []


def test_click_on_stale_index_opens_nothing(session: TaskSession) -> None:
    session.click_points(7)
    session.click_name(-1)

    assert session.edit_state.active_fields == []


def test_single_mode_commits_other_editor_first(tasks) -> None:
    session = TaskSession(tasks=tasks, mode=EditMode.SINGLE)

    session.click_points(1)
    session.change_points_draft(2)
    session.click_name(0)

    assert session.edit_state.active_fields == [EditField.NAME]
    assert listing(session) == [("get shorty", 12), ("kill bill", 2)]


def test_independent_mode_keeps_both_editors(session: TaskSession) -> None:
    session.click_points(1)
    session.click_name(0)

    assert session.edit_state.active_fields == [EditField.POINTS, EditField.NAME]


def test_snapshot_records(session: TaskSession) -> None:
    assert session.snapshot() == [
        {"name": "get shorty", "points": 12},
        {"name": "kill bill", "points": 6},
    ]


def test_events_are_logged(session: TaskSession, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pointlist"):
        session.click_remove(9)

    assert "Ignored remove of stale index 9" in caplog.text
