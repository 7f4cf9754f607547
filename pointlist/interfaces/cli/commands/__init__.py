"""CLI command groups for Pointlist.

Command groups:
- task: Parsing and listing tasks
- config: Viewing and changing the global configuration

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from pointlist.interfaces.cli.commands import config, task

__all__ = ["task", "config"]
