"""Inline edit sessions for task fields.

An edit session records which task (by sorted index) has an open editor
for a field and the uncommitted draft value. Index -1 means no editor is
open. Committing writes the draft into the task collection through the
store and resets the session.

All functions are pure: they return new state rather than mutating.
When to commit is decided by the caller (typically on blur); this module
only knows how.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from .parsing import coerce_points
from .store import TaskCollection, update_name, update_points

V = TypeVar("V")

NO_EDIT = -1


class EditField(str, Enum):
    """Task fields that can be edited inline."""

    POINTS = "points"
    NAME = "name"


class EditMode(str, Enum):
    """How many editors may be open at once.

    INDEPENDENT allows one points editor and one name editor, possibly on
    different tasks. SINGLE allows one editor across the whole list.
    """

    INDEPENDENT = "independent"
    SINGLE = "single"


class EditSession(BaseModel, Generic[V]):
    """A single-slot editor: the edited index and its draft value."""

    index: int = NO_EDIT
    value: V

    model_config = {"frozen": True}

    @property
    def active(self) -> bool:
        return self.index != NO_EDIT


def _idle_points() -> EditSession[int]:
    return EditSession[int](value=0)


def _idle_name() -> EditSession[str]:
    return EditSession[str](value="")


class EditState(BaseModel):
    """Edit sessions for both editable fields."""

    mode: EditMode = EditMode.INDEPENDENT
    points: EditSession[int] = Field(default_factory=_idle_points)
    name: EditSession[str] = Field(default_factory=_idle_name)

    model_config = {"frozen": True}

    def is_editing(self, field: EditField, index: int) -> bool:
        """Check if the given field of the task at index has an open editor."""
        session = self.points if field is EditField.POINTS else self.name
        return session.active and session.index == index

    @property
    def active_fields(self) -> list[EditField]:
        fields = []
        if self.points.active:
            fields.append(EditField.POINTS)
        if self.name.active:
            fields.append(EditField.NAME)
        return fields


# =============================================================================
# Points
# =============================================================================


def begin_points_edit(state: EditState, index: int, current: int) -> EditState:
    """Open the points editor on a task, replacing any previous points editor.

    In SINGLE mode an open name editor is closed without writing its
    draft. Callers must commit it first with commit_name_edit.
    """
    update: dict[str, Any] = {"points": EditSession[int](index=index, value=current)}
    if state.mode is EditMode.SINGLE:
        update["name"] = _idle_name()
    return state.model_copy(update=update)


def change_points_draft(state: EditState, value: Any) -> EditState:
    """Replace the points draft. Non-numeric drafts are coerced to 0."""
    if not state.points.active:
        return state
    draft = EditSession[int](index=state.points.index, value=coerce_points(value))
    return state.model_copy(update={"points": draft})


def commit_points_edit(
    state: EditState,
    tasks: TaskCollection,
) -> tuple[EditState, TaskCollection]:
    """Write the points draft into the collection and close the editor.

    Without an open points editor both state and tasks are returned as-is.
    """
    if not state.points.active:
        return state, tasks
    session = state.points
    updated = update_points(tasks, session.index, session.value)
    return state.model_copy(update={"points": _idle_points()}), updated


# =============================================================================
# Name
# =============================================================================


def begin_name_edit(state: EditState, index: int, current: str) -> EditState:
    """Open the name editor on a task, replacing any previous name editor.

    In SINGLE mode an open points editor is closed without writing its
    draft. Callers must commit it first with commit_points_edit.
    """
    update: dict[str, Any] = {"name": EditSession[str](index=index, value=current)}
    if state.mode is EditMode.SINGLE:
        update["points"] = _idle_points()
    return state.model_copy(update=update)


def change_name_draft(state: EditState, value: str) -> EditState:
    """Replace the name draft."""
    if not state.name.active:
        return state
    draft = EditSession[str](index=state.name.index, value=value)
    return state.model_copy(update={"name": draft})


def commit_name_edit(
    state: EditState,
    tasks: TaskCollection,
) -> tuple[EditState, TaskCollection]:
    """Write the name draft into the collection and close the editor."""
    if not state.name.active:
        return state, tasks
    session = state.name
    updated = update_name(tasks, session.index, session.value)
    return state.model_copy(update={"name": _idle_name()}), updated


def discard_edits(state: EditState) -> EditState:
    """Close both editors without writing their drafts."""
    return EditState(mode=state.mode)
