"""Config CLI commands."""

import json

import typer

from pointlist.domain.shared import Err
from pointlist.global_config import AppConfig, get_config_dir, get_global_config, update_global_config
from pointlist.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Configuration commands")


@app.command("show")
def show() -> None:
    """Print the current configuration."""
    config = get_global_config()
    typer.echo(f"# {get_config_dir() / 'config.json'}")
    typer.echo(json.dumps(config.model_dump(mode="json"), indent=2))


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help=f"One of: {', '.join(AppConfig.model_fields)}"),
    value: str = typer.Argument(..., help="New value; empty string resets to default"),
) -> None:
    """Set a configuration value.

    Example:
        pointlist config set edit_mode single
    """
    result = update_global_config(key, value)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    print_success(f"{key} = {getattr(result.value, key)}")
