"""TUI widgets for Pointlist."""

from .task_list import (
    EditorBlurred,
    FieldEditor,
    NameClicked,
    NameLabel,
    PointsClicked,
    PointsTag,
    RemoveClicked,
    TaskList,
    TaskRow,
)

__all__ = [
    "TaskList",
    "TaskRow",
    "PointsTag",
    "NameLabel",
    "FieldEditor",
    "PointsClicked",
    "NameClicked",
    "RemoveClicked",
    "EditorBlurred",
]
