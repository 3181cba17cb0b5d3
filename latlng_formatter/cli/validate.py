"""Ordinate validation CLI commands."""

from pathlib import Path

import typer

from latlng_formatter.cli.main import validate_app
from latlng_formatter.cli.output import load_config
from latlng_formatter.ordinates import DMSOrdinate, GPSOrdinate, OrdinateType
from latlng_formatter.types import ArcMinutes, ArcSeconds, Degrees
from latlng_formatter.validation import ValidationResult, check_decimal, check_dms, check_gps


def _report(result: ValidationResult) -> None:
    """Print the validation outcome, exiting with status 1 when invalid."""
    if result:
        typer.echo("valid")
        return
    typer.echo(f"invalid: {result.message}")
    raise typer.Exit(1)


@validate_app.command("decimal")
def validate_decimal_command(
    value: float = typer.Argument(..., help="Ordinate in decimal degrees"),
    ordinate_type: OrdinateType = typer.Option(OrdinateType.LAT, "--type", "-t", help="Ordinate type"),
) -> None:
    """
    Check a decimal ordinate is within range for its type.

    Example:
        latlng validate decimal 91 --type long
    """
    _report(check_decimal(value, ordinate_type))


@validate_app.command("dms")
def validate_dms_command(
    degrees: int = typer.Argument(..., help="Signed whole degrees"),
    minutes: float = typer.Argument(..., help="Arc-minutes (0-60)"),
    seconds: float = typer.Argument(..., help="Arc-seconds (0-60)"),
    ordinate_type: OrdinateType = typer.Option(OrdinateType.LAT, "--type", "-t", help="Ordinate type"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Converter YAML configuration file"),
    strict_compat: bool = typer.Option(False, "--strict-compat", help="Treat zero minutes/seconds as missing"),
) -> None:
    """
    Check a DMS ordinate is complete and within range for its type.

    Example:
        latlng validate dms 45 30 0 --type lat
    """
    converter_config = load_config(config, strict_compat)
    dms = DMSOrdinate(degrees=Degrees(degrees), minutes=ArcMinutes(minutes), seconds=ArcSeconds(seconds))
    _report(check_dms(dms, ordinate_type, converter_config.strict_compat))


@validate_app.command("gps")
def validate_gps_command(
    degrees: int = typer.Argument(..., help="Signed whole degrees"),
    minutes: float = typer.Argument(..., help="Decimal arc-minutes (0-60)"),
    ordinate_type: OrdinateType = typer.Option(OrdinateType.LAT, "--type", "-t", help="Ordinate type"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Converter YAML configuration file"),
    strict_compat: bool = typer.Option(False, "--strict-compat", help="Treat zero minutes/seconds as missing"),
) -> None:
    """
    Check a GPS ordinate is complete and within range for its type.

    Example:
        latlng validate gps 45 30.5 --type lat
    """
    converter_config = load_config(config, strict_compat)
    gps = GPSOrdinate(degrees=Degrees(degrees), minutes=ArcMinutes(minutes))
    _report(check_gps(gps, ordinate_type, converter_config.strict_compat))
