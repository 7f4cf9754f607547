"""Seed file loading.

A seed file pre-populates a session's task list. It holds either a JSON
list of ``{"name": ..., "points": ...}`` records or an object with such
a list under ``"tasks"``. Points default to 0 when a record omits them.
"""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from pointlist.domain.shared.result import Err, Ok, Result
from pointlist.domain.task import Task, TaskCollection
from pointlist.infrastructure.storage.json_storage import JsonStorage

_TASK_LIST = TypeAdapter(list[Task])


class SeedRepository:
    """Loads task collections from seed files."""

    def __init__(self, storage: JsonStorage | None = None) -> None:
        self._storage = storage or JsonStorage()

    def load(self, path: Path) -> Result[TaskCollection, str]:
        """Load the tasks in a seed file.

        Args:
            path: Path to the seed file.

        Returns:
            Ok(tasks) in file order, or Err(str) if the file is missing,
            unreadable or does not hold task records.
        """
        result = self._storage.load_json(path)
        if isinstance(result, Err):
            return result

        data = result.value
        if isinstance(data, dict):
            data = data.get("tasks")
        if not isinstance(data, list):
            return Err(f"Seed file {path} must hold a list of tasks")

        try:
            return Ok(tuple(_TASK_LIST.validate_python(data)))
        except ValidationError as e:
            return Err(f"Invalid task record in {path}: {e.error_count()} error(s)")
