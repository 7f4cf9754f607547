"""Pure task collection reducer.

All functions in this module are pure - no I/O, no side effects.
A collection is a tuple of Tasks; every operation returns a new tuple
and leaves its input untouched.

Indices always refer to positions in the collection sorted by
descending points, resolved at the moment of the operation. An index
computed before another task's points changed may therefore address a
different task afterwards.
"""

from collections.abc import Iterable
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .models import Task, TaskView
from .parsing import parse_task

TaskCollection = tuple[Task, ...]


# =============================================================================
# Ordering
# =============================================================================


def sort_tasks(tasks: Iterable[Task]) -> TaskCollection:
    """Sort tasks by descending points.

    The sort is stable: tasks with equal points keep their relative order,
    so a newly added task goes after existing tasks with the same points.
    """
    return tuple(sorted(tasks, key=lambda task: task.points, reverse=True))


def read_tasks(tasks: Iterable[Task]) -> list[TaskView]:
    """Return the sorted collection annotated for display."""
    return [TaskView.from_task(i, task) for i, task in enumerate(sort_tasks(tasks))]


def _in_range(tasks: TaskCollection, index: int) -> bool:
    # negative indices would wrap around in Python; treat them as stale
    return 0 <= index < len(tasks)


def task_at(tasks: Iterable[Task], index: int) -> Task | None:
    """Return the task at index in sorted order, or None if out of range."""
    ordered = sort_tasks(tasks)
    if not _in_range(ordered, index):
        return None
    return ordered[index]


# =============================================================================
# Operations
# =============================================================================


def add_task(tasks: Iterable[Task], raw: str) -> TaskCollection:
    """Parse raw text and append the resulting task."""
    return tuple(tasks) + (parse_task(raw),)


def remove_task(tasks: Iterable[Task], index: int) -> TaskCollection:
    """Remove the task at index in sorted order.

    Out-of-range indices leave the collection as it was.
    """
    ordered = sort_tasks(tasks)
    if not _in_range(ordered, index):
        return tuple(tasks)
    return ordered[:index] + ordered[index + 1 :]


def update_points(tasks: Iterable[Task], index: int, points: int) -> TaskCollection:
    """Replace the points of the task at index in sorted order."""
    ordered = sort_tasks(tasks)
    if not _in_range(ordered, index):
        return tuple(tasks)
    updated = ordered[index].model_copy(update={"points": points})
    return ordered[:index] + (updated,) + ordered[index + 1 :]


def update_name(tasks: Iterable[Task], index: int, name: str) -> TaskCollection:
    """Replace the name of the task at index in sorted order."""
    ordered = sort_tasks(tasks)
    if not _in_range(ordered, index):
        return tuple(tasks)
    updated = ordered[index].model_copy(update={"name": name})
    return ordered[:index] + (updated,) + ordered[index + 1 :]


# =============================================================================
# Actions
# =============================================================================


class AddTask(BaseModel):
    """Append the task parsed from raw text."""

    kind: Literal["add"] = "add"
    raw: str

    model_config = {"frozen": True}


class RemoveTask(BaseModel):
    """Remove the task at a sorted index."""

    kind: Literal["remove"] = "remove"
    index: int

    model_config = {"frozen": True}


class UpdatePoints(BaseModel):
    """Set the points of the task at a sorted index."""

    kind: Literal["update_points"] = "update_points"
    index: int
    points: int

    model_config = {"frozen": True}


class UpdateName(BaseModel):
    """Set the name of the task at a sorted index."""

    kind: Literal["update_name"] = "update_name"
    index: int
    name: str

    model_config = {"frozen": True}


TaskAction = Annotated[
    Union[AddTask, RemoveTask, UpdatePoints, UpdateName],
    Field(discriminator="kind"),
]


def reduce(tasks: Iterable[Task], action: TaskAction) -> TaskCollection:
    """Apply an action to a collection and return the new collection.

    Args:
        tasks: The current collection.
        action: One of AddTask, RemoveTask, UpdatePoints, UpdateName.

    Returns:
        The collection after the action. Unknown actions return the
        collection unchanged.
    """
    if isinstance(action, AddTask):
        return add_task(tasks, action.raw)
    if isinstance(action, RemoveTask):
        return remove_task(tasks, action.index)
    if isinstance(action, UpdatePoints):
        return update_points(tasks, action.index, action.points)
    if isinstance(action, UpdateName):
        return update_name(tasks, action.index, action.name)
    return tuple(tasks)
