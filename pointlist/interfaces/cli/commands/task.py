"""Task list CLI commands.

Commands for trying out the parser and printing a point-sorted list
built from a seed file plus tasks given on the command line.
"""

import json
from pathlib import Path
from typing import Optional

import typer

from pointlist.domain.task import parse_task
from pointlist.interfaces.cli.common import (
    build_session,
    format_task_line,
    print_info,
    print_separator,
    seed_option,
)

app = typer.Typer(help="Task list commands")


@app.command("parse")
def parse(
    text: list[str] = typer.Argument(..., help="Task text, e.g. 'eat the frog 20pts'"),
) -> None:
    """Show how task text is split into a name and points.

    Example:
        pointlist task parse eat the frog 20pts
    """
    task = parse_task(" ".join(text))
    typer.echo(f"name:   {task.name!r}")
    typer.echo(f"points: {task.points}")


@app.command("list")
def list_tasks(
    seed: Optional[Path] = seed_option,
    add: Optional[list[str]] = typer.Option(
        None, "--add", "-a", help="Task text to add (repeatable), e.g. 'fix bug 5pts'"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print {name, points} records as JSON"),
) -> None:
    """Print the task list sorted by descending points.

    Tasks worth 10 points or more are marked critical.

    Example:
        pointlist task list --seed tasks.json --add "eat the frog 20pts"
    """
    session = build_session(seed=seed)
    for text in add or []:
        session.submit_add(text)

    if as_json:
        typer.echo(json.dumps(session.snapshot(), indent=2))
        return

    views = session.tasks
    if not views:
        print_info("No tasks.")
        return

    print_separator()
    for view in views:
        typer.echo(format_task_line(view))
    print_separator()

    critical = sum(1 for view in views if view.critical)
    typer.echo(f"{len(views)} task(s), {critical} critical")
