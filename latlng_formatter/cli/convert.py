"""Ordinate conversion CLI commands."""

from pathlib import Path

import typer

from latlng_formatter.cli.main import convert_app
from latlng_formatter.cli.output import (
    OutputFormat,
    Representation,
    build_converter,
    fail_invalid,
    format_result,
)
from latlng_formatter.ordinates import DMSOrdinate, GPSOrdinate, OrdinateType
from latlng_formatter.types import ArcMinutes, ArcSeconds, Degrees


def _reject_same_representation(source: Representation, target: Representation) -> None:
    if source == target:
        raise typer.BadParameter(
            f"target must differ from the source representation '{source.value}'",
            param_hint="--to",
        )


@convert_app.command("from-decimal")
def from_decimal_command(
    value: float = typer.Argument(..., help="Ordinate in decimal degrees"),
    ordinate_type: OrdinateType = typer.Option(OrdinateType.LAT, "--type", "-t", help="Ordinate type"),
    target: Representation = typer.Option(Representation.DMS, "--to", help="Target representation"),
    output_format: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Converter YAML configuration file"),
    strict_compat: bool = typer.Option(False, "--strict-compat", help="Treat zero minutes/seconds as missing"),
) -> None:
    """
    Convert a decimal ordinate to DMS or GPS.

    Example:
        latlng convert from-decimal 39.640583 --type lat
        latlng convert from-decimal --type long --to gps -- -0.230194
    """
    _reject_same_representation(Representation.DECIMAL, target)
    converter = build_converter(config, strict_compat)

    if target == Representation.DMS:
        result = converter.decimal_to_dms(value, ordinate_type)
    else:
        result = converter.decimal_to_gps(value, ordinate_type)

    if result is None:
        fail_invalid(Representation.DECIMAL, ordinate_type)

    typer.echo(format_result(result, ordinate_type, output_format))


@convert_app.command("from-dms")
def from_dms_command(
    degrees: int = typer.Argument(..., help="Signed whole degrees"),
    minutes: float = typer.Argument(..., help="Arc-minutes (0-60)"),
    seconds: float = typer.Argument(..., help="Arc-seconds (0-60)"),
    ordinate_type: OrdinateType = typer.Option(OrdinateType.LAT, "--type", "-t", help="Ordinate type"),
    target: Representation = typer.Option(Representation.DECIMAL, "--to", help="Target representation"),
    output_format: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Converter YAML configuration file"),
    strict_compat: bool = typer.Option(False, "--strict-compat", help="Treat zero minutes/seconds as missing"),
) -> None:
    """
    Convert a DMS ordinate to decimal or GPS.

    Example:
        latlng convert from-dms 39 38 25.72 --type lat
        latlng convert from-dms --type long --to gps -- -45 13 48.63
    """
    _reject_same_representation(Representation.DMS, target)
    converter = build_converter(config, strict_compat)
    dms = DMSOrdinate(degrees=Degrees(degrees), minutes=ArcMinutes(minutes), seconds=ArcSeconds(seconds))

    if target == Representation.DECIMAL:
        result = converter.dms_to_decimal(dms, ordinate_type)
    else:
        result = converter.dms_to_gps(dms, ordinate_type)

    if result is None:
        fail_invalid(Representation.DMS, ordinate_type)

    typer.echo(format_result(result, ordinate_type, output_format))


@convert_app.command("from-gps")
def from_gps_command(
    degrees: int = typer.Argument(..., help="Signed whole degrees"),
    minutes: float = typer.Argument(..., help="Decimal arc-minutes (0-60)"),
    ordinate_type: OrdinateType = typer.Option(OrdinateType.LAT, "--type", "-t", help="Ordinate type"),
    target: Representation = typer.Option(Representation.DECIMAL, "--to", help="Target representation"),
    output_format: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Converter YAML configuration file"),
    strict_compat: bool = typer.Option(False, "--strict-compat", help="Treat zero minutes/seconds as missing"),
) -> None:
    """
    Convert a GPS (degrees + decimal minutes) ordinate to decimal or DMS.

    Example:
        latlng convert from-gps 45 30 --type lat
        latlng convert from-gps 45 30.5 --type lat --to dms --format json
    """
    _reject_same_representation(Representation.GPS, target)
    converter = build_converter(config, strict_compat)
    gps = GPSOrdinate(degrees=Degrees(degrees), minutes=ArcMinutes(minutes))

    if target == Representation.DECIMAL:
        result = converter.gps_to_decimal(gps, ordinate_type)
    else:
        result = converter.gps_to_dms(gps, ordinate_type)

    if result is None:
        fail_invalid(Representation.GPS, ordinate_type)

    typer.echo(format_result(result, ordinate_type, output_format))
