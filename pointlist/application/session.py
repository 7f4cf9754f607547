"""Task session application service.

A TaskSession owns one user's task list and edit state for the lifetime
of a UI session. The presentation shell creates it, forwards input
events to it and renders its read-only outputs. Every event runs to
completion synchronously; nothing here raises on bad input.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pointlist.domain.task import (
    EditMode,
    EditState,
    Task,
    TaskCollection,
    TaskView,
    add_task,
    begin_name_edit,
    begin_points_edit,
    change_name_draft,
    change_points_draft,
    commit_name_edit,
    commit_points_edit,
    read_tasks,
    remove_task,
    sort_tasks,
    task_at,
)

logger = logging.getLogger(__name__)


class TaskSession:
    """Owned state for a task list UI.

    Holds the task collection, the points/name edit sessions and the
    draft text of the "next task" field. The domain functions do the
    work; this class only threads state through them.
    """

    def __init__(
        self,
        next_task: str = "",
        tasks: Iterable[Task] = (),
        mode: EditMode = EditMode.INDEPENDENT,
    ) -> None:
        """Initialize a session.

        Args:
            next_task: Initial text of the "next task" field.
            tasks: Tasks to pre-seed the list with, in any order.
            mode: Whether points and name editors may be open together.
        """
        self._next_task = next_task
        self._tasks: TaskCollection = tuple(tasks)
        self._edits = EditState(mode=mode)
        logger.debug("Session started with %d task(s), mode=%s", len(self._tasks), mode.value)

    # =========================================================================
    # Read-only outputs
    # =========================================================================

    @property
    def tasks(self) -> list[TaskView]:
        """The task list sorted by descending points, annotated for display."""
        return read_tasks(self._tasks)

    @property
    def edit_state(self) -> EditState:
        return self._edits

    @property
    def next_task(self) -> str:
        return self._next_task

    @property
    def mode(self) -> EditMode:
        return self._edits.mode

    def snapshot(self) -> list[dict[str, Any]]:
        """Return the sorted tasks as plain ``{name, points}`` records."""
        return [task.model_dump() for task in sort_tasks(self._tasks)]

    # =========================================================================
    # Next task field
    # =========================================================================

    def set_next_task(self, text: str) -> None:
        self._next_task = text

    def submit_add(self, raw: str | None = None) -> None:
        """Add a task parsed from raw, or from the "next task" field.

        The field keeps its text afterwards. Deciding whether to accept
        blank submissions is left to the shell.
        """
        text = self._next_task if raw is None else raw
        self._tasks = add_task(self._tasks, text)
        logger.debug("Added task from %r (%d total)", text, len(self._tasks))

    def click_remove(self, index: int) -> None:
        before = len(self._tasks)
        self._tasks = remove_task(self._tasks, index)
        if len(self._tasks) == before:
            logger.debug("Ignored remove of stale index %d", index)
        else:
            logger.debug("Removed task at index %d", index)

    # =========================================================================
    # Points editing
    # =========================================================================

    def click_points(self, index: int) -> None:
        """Open the points editor on the task at index."""
        if self.mode is EditMode.SINGLE:
            self.blur_name()
        task = task_at(self._tasks, index)
        if task is None:
            logger.debug("Ignored points edit of stale index %d", index)
            return
        self._edits = begin_points_edit(self._edits, index, task.points)
        logger.debug("Editing points of task %d (%s)", index, task.name)

    def change_points_draft(self, value: Any) -> None:
        self._edits = change_points_draft(self._edits, value)

    def blur_points(self) -> None:
        """Commit the points draft, if an editor is open."""
        session = self._edits.points
        self._edits, self._tasks = commit_points_edit(self._edits, self._tasks)
        if session.active:
            logger.debug("Committed points %d to task %d", session.value, session.index)

    # =========================================================================
    # Name editing
    # =========================================================================

    def click_name(self, index: int) -> None:
        """Open the name editor on the task at index."""
        if self.mode is EditMode.SINGLE:
            self.blur_points()
        task = task_at(self._tasks, index)
        if task is None:
            logger.debug("Ignored name edit of stale index %d", index)
            return
        self._edits = begin_name_edit(self._edits, index, task.name)
        logger.debug("Editing name of task %d (%s)", index, task.name)

    def change_name_draft(self, value: str) -> None:
        self._edits = change_name_draft(self._edits, value)

    def blur_name(self) -> None:
        """Commit the name draft, if an editor is open."""
        session = self._edits.name
        self._edits, self._tasks = commit_name_edit(self._edits, self._tasks)
        if session.active:
            logger.debug("Committed name %r to task %d", session.value, session.index)
