# tests/test_tui.py

from __future__ import annotations

import pytest
from textual.widgets import Input

from pointlist.application import TaskSession
from pointlist.domain.task import EditField
from pointlist.tui.app import PointlistApp
from pointlist.tui.widgets import (
    FieldEditor,
    NameClicked,
    NameLabel,
    RemoveClicked,
    TaskList,
    TaskRow,
)


@pytest.fixture()
def app(tasks) -> PointlistApp:
    return PointlistApp(TaskSession(next_task="eat the frog 20pts", tasks=tasks))


@pytest.mark.asyncio
async def test_renders_sorted_rows_with_labels(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.pause()

        labels = list(app.query(NameLabel))
        assert [label.index for label in labels] == [0, 1]
        assert [label.marker for label in labels] == ["critical", "normal"]
        assert app.query_one("#name-0", NameLabel).has_class("critical")


@pytest.mark.asyncio
async def test_add_button_adds_parsed_task(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.click("#btn-add")
        await pilot.pause()

        assert len(app.query(TaskRow)) == 3
        assert app.session.tasks[0].name == "eat the frog"
        assert app.session.tasks[0].points == 20


@pytest.mark.asyncio
async def test_typing_updates_next_task(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        app.query_one("#new-task-input", Input).value = "read 3pts"
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        assert ("read", 3) in [(view.name, view.points) for view in app.session.tasks]


@pytest.mark.asyncio
async def test_click_edit_blur_updates_points(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.click("#points-1")
        await pilot.pause()

        editor = app.query_one("#points-editor", FieldEditor)
        assert editor.field is EditField.POINTS
        assert editor.index == 1

        editor.value = "30"
        await pilot.pause()
        assert app.session.edit_state.points.value == 30

        app.action_focus_new_task()
        await pilot.pause()
        await pilot.pause()

        assert [(v.name, v.points) for v in app.session.tasks] == [
            ("kill bill", 30),
            ("get shorty", 12),
        ]
        assert not app.query(FieldEditor)
        assert app.query_one("#name-0", NameLabel).marker == "critical"


@pytest.mark.asyncio
async def test_remove_button(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.click("TaskRow Button")
        await pilot.pause()

        assert [view.name for view in app.session.tasks] == ["kill bill"]


@pytest.mark.asyncio
async def test_click_after_resort_does_not_open_wrong_task(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.click("#points-1")
        await pilot.pause()
        app.query_one("#points-editor", FieldEditor).value = "30"
        await pilot.pause()

        # pressing on "get shorty" commits 30 to "kill bill", which moves to the top
        await pilot.click("#name-0")
        await pilot.pause()
        await pilot.pause()

        assert [(v.name, v.points) for v in app.session.tasks] == [
            ("kill bill", 30),
            ("get shorty", 12),
        ]
        state = app.session.edit_state
        assert not state.points.active
        assert not state.is_editing(EditField.NAME, 0)
        if state.name.active:
            assert state.name.value == "get shorty"


@pytest.mark.asyncio
async def test_messages_from_old_render_are_dropped(app: PointlistApp) -> None:
    async with app.run_test(size=(80, 24)) as pilot:
        await pilot.pause()
        old_generation = app.query_one("#task-list", TaskList).generation

        await app.refresh_tasks()
        app.post_message(NameClicked(0, old_generation))
        app.post_message(RemoveClicked(0, old_generation))
        await pilot.pause()

        assert not app.session.edit_state.name.active
        assert [view.name for view in app.session.tasks] == ["get shorty", "kill bill"]
