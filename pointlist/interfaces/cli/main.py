"""Entry point for the Pointlist CLI.

Usage:
    python -m pointlist.interfaces.cli.main

Or via installed entry point:
    pointlist <command>
"""

from pointlist.interfaces.cli import app


def main() -> None:
    """Run the Pointlist CLI application."""
    app()


if __name__ == "__main__":
    main()
