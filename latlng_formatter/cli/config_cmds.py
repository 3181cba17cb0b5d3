"""Converter configuration CLI commands."""

from pathlib import Path

import typer
import yaml

from latlng_formatter.cli.main import config_app
from latlng_formatter.cli.output import load_config
from latlng_formatter.config import CONFIG_SECTION, get_default_config


@config_app.command("show")
def show_command(
    config: Path | None = typer.Option(None, "--config", "-c", help="Converter YAML configuration file"),
) -> None:
    """
    Print the effective converter configuration as YAML.

    Without --config the built-in defaults are shown.
    """
    converter_config = load_config(config)
    output = {CONFIG_SECTION: converter_config.to_dict()}
    typer.echo(yaml.safe_dump(output, default_flow_style=False, sort_keys=False).rstrip())


@config_app.command("init")
def init_command(
    path: Path = typer.Argument(..., help="Where to write the configuration file"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """
    Write a configuration file holding the default settings.

    Example:
        latlng config init latlng.yaml
    """
    if path.exists() and not force:
        typer.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(1)

    try:
        get_default_config().save_to_yaml(str(path))
    except IOError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Wrote default configuration to {path}")
