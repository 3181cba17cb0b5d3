"""Shared option types, converter setup and result formatting for CLI commands."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Union

import typer
import yaml

from latlng_formatter.config import ConverterConfig, get_default_config
from latlng_formatter.converter import OrdinateConverter
from latlng_formatter.ordinates import DMSOrdinate, GPSOrdinate, OrdinateType

logger = logging.getLogger(__name__)

ConversionResult = Union[float, DMSOrdinate, GPSOrdinate]


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"
    YAML = "yaml"


class Representation(str, Enum):
    """Ordinate representations a value can be converted to."""

    DECIMAL = "decimal"
    DMS = "dms"
    GPS = "gps"


def load_config(config_path: Path | None, strict_compat: bool = False) -> ConverterConfig:
    """
    Load converter configuration for a CLI command.

    Exits with status 1 if the configuration file is missing or invalid.

    Args:
        config_path: Optional YAML configuration file
        strict_compat: Force strict compatibility mode on, overriding the file

    Returns:
        ConverterConfig to use for the command
    """
    try:
        config = ConverterConfig.from_yaml(str(config_path)) if config_path else get_default_config()
    except FileNotFoundError:
        typer.echo(f"Error: Configuration file not found: {config_path}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: Invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    if strict_compat and not config.strict_compat:
        logger.debug("Strict compatibility mode enabled from command line")
        config = ConverterConfig(
            strict_compat=True,
            negative_decimal_mode=config.negative_decimal_mode,
            seconds_precision=config.seconds_precision,
        )
    return config


def build_converter(config_path: Path | None, strict_compat: bool = False) -> OrdinateConverter:
    """Create an OrdinateConverter from CLI configuration options."""
    return OrdinateConverter(load_config(config_path, strict_compat))


def _representation_of(result: ConversionResult) -> Representation:
    if isinstance(result, DMSOrdinate):
        return Representation.DMS
    if isinstance(result, GPSOrdinate):
        return Representation.GPS
    return Representation.DECIMAL


def _payload(result: ConversionResult, ordinate_type: OrdinateType) -> dict:
    representation = _representation_of(result)
    value = result if representation is Representation.DECIMAL else result.to_dict()
    return {
        "ordinate_type": ordinate_type.value,
        representation.value: value,
    }


def _format_human_readable(result: ConversionResult) -> str:
    if isinstance(result, DMSOrdinate):
        return f"degrees={result.degrees} minutes={result.minutes} seconds={result.seconds}"
    if isinstance(result, GPSOrdinate):
        return f"degrees={result.degrees} minutes={result.minutes}"
    return str(result)


def format_result(
    result: ConversionResult,
    ordinate_type: OrdinateType,
    output_format: OutputFormat,
) -> str:
    """Format a conversion result for display."""
    if output_format == OutputFormat.HUMAN:
        return _format_human_readable(result)
    if output_format == OutputFormat.JSON:
        return json.dumps(_payload(result, ordinate_type), indent=2)
    return yaml.safe_dump(_payload(result, ordinate_type), default_flow_style=False, sort_keys=False).rstrip()


def fail_invalid(representation: Representation, ordinate_type: OrdinateType) -> None:
    """Report an invalid input ordinate and exit with status 1."""
    typer.echo(
        f"Error: Invalid {representation.value} ordinate for type '{ordinate_type.value}'",
        err=True,
    )
    raise typer.Exit(1)
