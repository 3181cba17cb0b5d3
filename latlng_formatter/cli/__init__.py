"""CLI module for ordinate conversion.

Provides a unified `latlng` command-line interface for converting and
validating latitude/longitude ordinates.
"""

from latlng_formatter.cli.main import app

__all__ = ["app"]
