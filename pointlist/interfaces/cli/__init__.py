"""CLI interface for Pointlist using Typer.

Usage:
    pointlist tui                          # Interactive task list
    pointlist list --add "fix bug 5pts"    # Print a sorted task list
    pointlist parse eat the frog 20pts     # Show how text is parsed
    pointlist config show                  # Show configuration

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (task, config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from pointlist import __version__
from pointlist.domain.task import EditMode
from pointlist.global_config import get_config_dir, get_global_config
from pointlist.interfaces.cli.commands import config, task
from pointlist.interfaces.cli.common import build_session, edit_mode_option, seed_option
from pointlist.logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="pointlist",
    help="A task list sorted by points, with inline editing",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pointlist version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (or set POINTLIST_LOG_LEVEL); defaults to the config value",
        envvar="POINTLIST_LOG_LEVEL",
    ),
) -> None:
    """Pointlist - tasks sorted by points.

    Type a task like "eat the frog 20pts" and the points are split off
    the name. Tasks worth 10 points or more are critical.
    """
    level = (log_level or get_global_config().log_level).upper()
    if level not in logging.getLevelNamesMapping():
        typer.echo(typer.style(f"Error: unknown log level: {level}", fg=typer.colors.RED), err=True)
        raise typer.Exit(2)
    setup_logging(level)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(config.app, name="config")


# =============================================================================
# Top-Level Commands
# =============================================================================


@app.command("tui")
def tui(
    seed: Optional[Path] = seed_option,
    next_task: str = typer.Option("", "--task", "-t", help="Initial text of the new task field"),
    edit_mode: Optional[EditMode] = edit_mode_option,
) -> None:
    """Open the interactive task list."""
    session = build_session(seed=seed, next_task=next_task, mode=edit_mode)

    # The TUI owns the terminal, so logs go to a file
    level = logging.getLogger("pointlist").level
    log_file = get_config_dir() / "pointlist.log"
    setup_logging(level, log_file=log_file)
    logger.info("Starting TUI (log file %s)", log_file)

    from pointlist.tui.app import PointlistApp

    PointlistApp(session).run()


@app.command("list")
def list_tasks(
    seed: Optional[Path] = seed_option,
    add: Optional[list[str]] = typer.Option(
        None, "--add", "-a", help="Task text to add (repeatable)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print {name, points} records as JSON"),
) -> None:
    """Print the sorted task list (shortcut for 'task list')."""
    task.list_tasks(seed=seed, add=add, as_json=as_json)


@app.command("parse")
def parse(
    text: list[str] = typer.Argument(..., help="Task text, e.g. 'eat the frog 20pts'"),
) -> None:
    """Show how task text is parsed (shortcut for 'task parse')."""
    task.parse(text)


__all__ = ["app"]
