"""Task list widget for the Pointlist TUI.

Rows are rebuilt from a TaskSession's outputs after every event. Clicks
and editor blurs are reported to the app as messages carrying the
row's sorted index; the widgets never change the session themselves.

Each rebuild bumps the list's generation. Click messages carry the
generation of the rows that sent them, so the app can drop clicks whose
indices were computed against a list that has since been re-sorted.
"""

from typing import Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, Static

from pointlist.domain.task import EditField, EditState, TaskView


class RowMessage(Message):
    """Base for messages that address a task row by sorted index."""

    def __init__(self, index: int, generation: int) -> None:
        super().__init__()
        self.index = index
        self.generation = generation


class PointsClicked(RowMessage):
    """Message posted when a task's points tag is clicked."""


class NameClicked(RowMessage):
    """Message posted when a task's name is clicked."""


class RemoveClicked(RowMessage):
    """Message posted when a task's remove button is pressed."""


class EditorBlurred(Message):
    """Message posted when an inline editor loses focus."""

    def __init__(self, field: EditField, index: int) -> None:
        super().__init__()
        self.field = field
        self.index = index


class ClickTarget(Static):
    """Static that reports a click on its row.

    A click only counts if the mouse was also pressed on this widget. When
    a press commits an editor and the list is rebuilt, the release lands on
    a new widget at the same spot, which must not act on it.
    """

    message_class: type[RowMessage] = RowMessage

    def __init__(self, content: Text, view: TaskView, generation: int, **kwargs) -> None:
        super().__init__(content, **kwargs)
        self.index = view.index
        self.generation = generation
        self._press_started = False

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self._press_started = True

    def on_click(self, event: events.Click) -> None:
        event.stop()
        if not self._press_started:
            return
        self._press_started = False
        self.post_message(self.message_class(self.index, self.generation))


class PointsTag(ClickTarget):
    """Clickable point value of a task."""

    message_class = PointsClicked

    def __init__(self, view: TaskView, generation: int = 0) -> None:
        super().__init__(
            Text(str(view.points)),
            view,
            generation,
            id=f"points-{view.index}",
            classes="points-tag",
        )


class NameLabel(ClickTarget):
    """Clickable task name, classed "critical" or "normal"."""

    message_class = NameClicked

    def __init__(self, view: TaskView, generation: int = 0) -> None:
        # plain Text so brackets in a name are not read as markup
        super().__init__(
            Text(view.name),
            view,
            generation,
            id=f"name-{view.index}",
            classes=f"task-name {view.label}",
        )
        self.marker = view.label


class FieldEditor(Input):
    """Inline editor for one field of one task."""

    def __init__(self, field: EditField, index: int, value: str) -> None:
        super().__init__(
            value=value,
            id=f"{field.value}-editor",
            classes=f"field-editor {field.value}-editor",
            type="integer" if field is EditField.POINTS else "text",
        )
        self.field = field
        self.index = index

    def on_blur(self, event: events.Blur) -> None:
        self.post_message(EditorBlurred(self.field, self.index))


class TaskRow(Horizontal):
    """One task: points, name and a remove button."""

    DEFAULT_CSS = """
    TaskRow {
        height: auto;
        padding: 0 1;
        border-bottom: solid $primary-darken-2;
    }

    TaskRow .points-tag {
        width: 7;
        padding: 0 1;
        background: $boost;
        text-align: center;
    }

    TaskRow .task-name {
        width: 1fr;
        padding: 0 1;
    }

    TaskRow .task-name.critical {
        color: $error;
        text-style: bold;
    }

    TaskRow .field-editor {
        height: 3;
    }

    TaskRow .points-editor {
        width: 12;
    }

    TaskRow .name-editor {
        width: 1fr;
    }

    TaskRow Button.remove {
        min-width: 5;
        width: 5;
    }
    """

    def __init__(self, view: TaskView, edits: EditState, generation: int = 0) -> None:
        super().__init__(classes=f"task-row {view.label}")
        self._view = view
        self._edits = edits
        self.generation = generation

    @property
    def index(self) -> int:
        return self._view.index

    def compose(self) -> ComposeResult:
        view = self._view
        if self._edits.is_editing(EditField.POINTS, view.index):
            draft = self._edits.points.value
            yield FieldEditor(EditField.POINTS, view.index, str(draft))
        else:
            yield PointsTag(view, self.generation)

        if self._edits.is_editing(EditField.NAME, view.index):
            yield FieldEditor(EditField.NAME, view.index, self._edits.name.value)
        else:
            yield NameLabel(view, self.generation)

        yield Button("✕", classes="remove")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(RemoveClicked(self.index, self.generation))


class TaskList(VerticalScroll):
    """Scrolling list of task rows."""

    DEFAULT_CSS = """
    TaskList {
        border-top: solid $primary;
        height: 1fr;
    }

    TaskList .no-tasks {
        color: $text-muted;
        text-align: center;
        margin-top: 2;
    }
    """

    generation = 0

    async def show_tasks(self, views: list[TaskView], edits: EditState) -> None:
        """Replace the rows with the given views.

        Args:
            views: Sorted task views from the session.
            edits: Current edit state, deciding which fields render as editors.
        """
        self.generation += 1
        await self.remove_children()
        if views:
            await self.mount_all(TaskRow(view, edits, self.generation) for view in views)
        else:
            await self.mount(Static("No tasks yet", classes="no-tasks"))

    def editor(self, field: EditField) -> Optional[FieldEditor]:
        """Return the open editor for a field, if any."""
        for editor in self.query(FieldEditor):
            if editor.field is field:
                return editor
        return None
