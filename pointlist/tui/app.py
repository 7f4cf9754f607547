"""Main Pointlist TUI Application.

PointlistApp is the presentation shell: it turns widget events into
TaskSession events and redraws the list from the session's outputs.
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Input

from pointlist.application import TaskSession
from pointlist.domain.task import EditField
from pointlist.tui.widgets import (
    EditorBlurred,
    FieldEditor,
    NameClicked,
    PointsClicked,
    RemoveClicked,
    TaskList,
)

logger = logging.getLogger(__name__)


class PointlistApp(App):
    """Pointlist Task List TUI Application.

    Type a task such as "eat the frog 20pts" and press Enter or Add.
    Click a task's points or name to edit it; leaving the field commits.
    """

    TITLE = "Pointlist"
    SUB_TITLE = "Tasks by points"

    CSS = """
    Screen {
        background: $surface;
    }

    #new-task-bar {
        height: auto;
        padding: 1 1;
    }

    #new-task-input {
        width: 1fr;
    }

    #btn-add {
        min-width: 8;
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "focus_new_task", "New Task", show=True),
        Binding("escape", "focus_new_task", "Done Editing", show=False),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, session: TaskSession | None = None):
        """Initialize the Pointlist TUI application.

        Args:
            session: Session to drive. A new empty one is created if omitted.
        """
        super().__init__()
        self.session = session or TaskSession()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="new-task-bar"):
            yield Input(
                value=self.session.next_task,
                placeholder="Name, e.g. eat the frog 20pts",
                id="new-task-input",
            )
            yield Button("Add", variant="primary", id="btn-add")
        yield TaskList(id="task-list")
        yield Footer()

    async def on_mount(self) -> None:
        logger.debug("TUI mounted with %d task(s)", len(self.session.tasks))
        await self.refresh_tasks()
        self.query_one("#new-task-input", Input).focus()

    async def refresh_tasks(self, focus: EditField | None = None) -> None:
        """Redraw the task list from the session.

        Args:
            focus: Field whose editor should take focus after the redraw.
        """
        task_list = self.query_one("#task-list", TaskList)
        await task_list.show_tasks(self.session.tasks, self.session.edit_state)
        if focus is not None:
            editor = task_list.editor(focus)
            if editor is not None:
                editor.focus()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_focus_new_task(self) -> None:
        """Focus the new task field, committing any focused editor."""
        self.query_one("#new-task-input", Input).focus()

    async def _add_task(self) -> None:
        self.session.submit_add()
        await self.refresh_tasks()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-add":
            await self._add_task()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "new-task-input":
            await self._add_task()
        elif isinstance(event.input, FieldEditor):
            # Enter finishes the edit the same way leaving the field does
            self.action_focus_new_task()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "new-task-input":
            self.session.set_next_task(event.value)
        elif isinstance(event.input, FieldEditor):
            if event.input.field is EditField.POINTS:
                self.session.change_points_draft(event.value)
            else:
                self.session.change_name_draft(event.value)

    def _is_stale(self, message: PointsClicked | NameClicked | RemoveClicked) -> bool:
        """Check if a row message was sent from rows that have been redrawn since."""
        current = self.query_one("#task-list", TaskList).generation
        if message.generation == current:
            return False
        logger.debug(
            "Dropped %s for index %d from render %d (now %d)",
            type(message).__name__,
            message.index,
            message.generation,
            current,
        )
        return True

    async def on_points_clicked(self, message: PointsClicked) -> None:
        if self._is_stale(message):
            return
        self.session.click_points(message.index)
        await self.refresh_tasks(focus=EditField.POINTS)

    async def on_name_clicked(self, message: NameClicked) -> None:
        if self._is_stale(message):
            return
        self.session.click_name(message.index)
        await self.refresh_tasks(focus=EditField.NAME)

    async def on_remove_clicked(self, message: RemoveClicked) -> None:
        if self._is_stale(message):
            return
        self.session.click_remove(message.index)
        await self.refresh_tasks()

    async def on_editor_blurred(self, message: EditorBlurred) -> None:
        # Editors removed by a redraw also blur; only the live one commits
        if not self.session.edit_state.is_editing(message.field, message.index):
            return
        if message.field is EditField.POINTS:
            self.session.blur_points()
        else:
            self.session.blur_name()
        await self.refresh_tasks()


__all__ = ["PointlistApp"]
