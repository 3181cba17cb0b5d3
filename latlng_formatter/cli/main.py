"""Main Typer CLI application for ordinate conversion."""

import logging

import typer

app = typer.Typer(
    help="Convert latitude/longitude ordinates between decimal, DMS and GPS formats",
    no_args_is_help=True,
)

# Subcommand groups
convert_app = typer.Typer(help="Conversion commands")
validate_app = typer.Typer(help="Validation commands")
config_app = typer.Typer(help="Configuration file commands")

app.add_typer(convert_app, name="convert")
app.add_typer(validate_app, name="validate")
app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Convert latitude/longitude ordinates between decimal, DMS and GPS formats.

    Negative values must follow a `--` separator so they are not read as
    options, e.g. `latlng convert from-decimal --type long -- -0.230194`.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with their respective apps.

    Commands use decorators like @convert_app.command() which register
    themselves when the module is imported.
    """
    from latlng_formatter.cli import config_cmds, convert, validate

    # Avoid "imported but unused" warnings by explicitly using the module
    _ = config_cmds
    _ = convert
    _ = validate


_register_commands()


if __name__ == "__main__":
    app()
