# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pointlist.domain.task import Task


@pytest.fixture(autouse=True)
def pointlist_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config reads and writes inside a per-test directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("POINTLIST_HOME", str(home))
    for var in ("POINTLIST_SEED", "POINTLIST_EDIT_MODE", "POINTLIST_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture()
def tasks() -> tuple[Task, ...]:
    """The two-task list used throughout: unsorted on purpose."""
    return (
        Task(name="kill bill", points=6),
        Task(name="get shorty", points=12),
    )


@pytest.fixture()
def seed_file(tmp_path: Path) -> Path:
    path = tmp_path / "tasks.json"
    path.write_text(
        '[{"name": "kill bill", "points": 6}, {"name": "get shorty", "points": 12}]',
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() calls made by CLI tests."""
    yield
    logger = logging.getLogger("pointlist")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
