"""Interfaces layer for Pointlist.

This layer contains adapters for external interactions:
- CLI: Command-line interface using Typer
- TUI: Terminal UI using Textual (in pointlist/tui/)

The interfaces layer is responsible for:
- Accepting user input and validating it
- Driving a TaskSession
- Formatting output for the user
"""

from pointlist.interfaces.cli import app

__all__ = ["app"]
