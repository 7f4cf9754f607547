"""Task domain - the task list state machine.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - A named task with an integer point value
    TaskView - Sorted, annotated task as handed to renderers
    TaskCollection - Immutable tuple of tasks
    EditSession - Single-slot inline editor state
    EditState - Points and name editors together
    EditField - Which task field an editor is bound to
    EditMode - Independent editors or a single editor for the whole list

Parsing Functions:
    parse_task - Split "<name> <n>pts" input into a Task
    coerce_points - Normalize a points draft to an integer

Store Functions:
    sort_tasks - Order by descending points
    read_tasks - Sorted view with critical flags
    add_task / remove_task / update_points / update_name - Reducer operations
    reduce - Apply an action object

Edit Functions:
    begin_points_edit / change_points_draft / commit_points_edit
    begin_name_edit / change_name_draft / commit_name_edit
    discard_edits
"""

from .editing import (
    NO_EDIT,
    EditField,
    EditMode,
    EditSession,
    EditState,
    begin_name_edit,
    begin_points_edit,
    change_name_draft,
    change_points_draft,
    commit_name_edit,
    commit_points_edit,
    discard_edits,
)
from .models import CRITICAL_THRESHOLD, Task, TaskView, is_critical
from .parsing import POINTS_PATTERN, coerce_points, parse_task
from .store import (
    AddTask,
    RemoveTask,
    TaskAction,
    TaskCollection,
    UpdateName,
    UpdatePoints,
    add_task,
    read_tasks,
    reduce,
    remove_task,
    sort_tasks,
    task_at,
    update_name,
    update_points,
)

__all__ = [
    # Models
    "CRITICAL_THRESHOLD",
    "Task",
    "TaskView",
    "is_critical",
    # Parsing
    "POINTS_PATTERN",
    "parse_task",
    "coerce_points",
    # Store
    "TaskCollection",
    "sort_tasks",
    "read_tasks",
    "task_at",
    "add_task",
    "remove_task",
    "update_points",
    "update_name",
    "reduce",
    # Actions
    "TaskAction",
    "AddTask",
    "RemoveTask",
    "UpdatePoints",
    "UpdateName",
    # Editing
    "NO_EDIT",
    "EditField",
    "EditMode",
    "EditSession",
    "EditState",
    "begin_points_edit",
    "change_points_draft",
    "commit_points_edit",
    "begin_name_edit",
    "change_name_draft",
    "commit_name_edit",
    "discard_edits",
]
