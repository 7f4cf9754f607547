"""Task domain models.

Tasks carry no identity: they are addressed by their position in the
collection after it has been sorted by descending points.
"""

from typing import Literal

from pydantic import BaseModel

# Tasks worth at least this many points are flagged for emphasis.
CRITICAL_THRESHOLD = 10


class Task(BaseModel):
    """A named unit of work with an integer point value."""

    name: str
    points: int = 0

    model_config = {"frozen": True}


def is_critical(points: int) -> bool:
    """Check if a point value meets the critical threshold."""
    return points >= CRITICAL_THRESHOLD


class TaskView(BaseModel):
    """A task as handed to a renderer.

    Computed on every read from the sorted collection. The critical
    flag is derived from the points and never stored on the Task.
    """

    index: int
    name: str
    points: int
    critical: bool

    model_config = {"frozen": True}

    @classmethod
    def from_task(cls, index: int, task: Task) -> "TaskView":
        return cls(
            index=index,
            name=task.name,
            points=task.points,
            critical=is_critical(task.points),
        )

    @property
    def label(self) -> Literal["critical", "normal"]:
        """Display label for the task name."""
        return "critical" if self.critical else "normal"
