"""Shared utilities for Pointlist CLI commands.

- Seed file and edit mode options
- Session construction from CLI options and the global config
- Formatted output helpers (error, success, info)
- Task line formatting
"""

from pathlib import Path
from typing import Optional

import typer

from pointlist.application import TaskSession
from pointlist.domain.shared import Err
from pointlist.domain.task import EditMode, TaskView
from pointlist.global_config import get_global_config
from pointlist.infrastructure.storage import SeedRepository

# Reusable options for CLI commands
# Usage: def my_command(seed: Optional[Path] = seed_option) -> None:
seed_option = typer.Option(
    None,
    "--seed",
    "-s",
    help="JSON file of {name, points} records to start from (or set POINTLIST_SEED)",
    envvar="POINTLIST_SEED",
)

edit_mode_option = typer.Option(
    None,
    "--edit-mode",
    "-m",
    help="independent: points and name editors open together; single: one editor at a time",
    envvar="POINTLIST_EDIT_MODE",
    case_sensitive=False,
)


def build_session(
    seed: Optional[Path] = None,
    next_task: str = "",
    mode: Optional[EditMode] = None,
) -> TaskSession:
    """Create a session from CLI options, falling back to the global config.

    Args:
        seed: Seed file given on the command line, if any.
        next_task: Initial text of the "next task" field.
        mode: Edit mode given on the command line, if any.

    Returns:
        A new TaskSession.

    Raises:
        typer.Exit: If the seed file cannot be loaded.
    """
    config = get_global_config()
    seed_file = seed if seed is not None else config.seed_file

    tasks = ()
    if seed_file is not None:
        result = SeedRepository().load(seed_file)
        if isinstance(result, Err):
            print_error(result.error)
            raise typer.Exit(1)
        tasks = result.value

    return TaskSession(
        next_task=next_task,
        tasks=tasks,
        mode=mode if mode is not None else config.edit_mode,
    )


def format_task_line(view: TaskView) -> str:
    """Format a task for the list output, highlighting critical tasks."""
    points = f"{view.points:>4} pts"
    line = f"{view.index:>3}. {points}  {view.name}"
    if view.critical:
        return typer.style(line, fg=typer.colors.RED, bold=True)
    return line


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 40) -> None:
    typer.echo(char * width)
