"""
Ordinate conversion between decimal, DMS and GPS representations.

Every conversion validates its input first and returns ``None`` when the
input is rejected; no exception is raised for bad values. Conversions with
no direct formula pivot through DMS:

    decimal -> DMS -> GPS
    GPS -> DMS -> decimal

Example:
    >>> from latlng_formatter import decimal_to_dms, dms_to_decimal
    >>> dms = decimal_to_dms(39.6405, 'lat')
    >>> dms
    DMSOrdinate(degrees=39, minutes=38, seconds=25.8)
    >>> round(dms_to_decimal(dms, 'lat'), 6)
    39.6405

Use an ``OrdinateConverter`` with a ``ConverterConfig`` to change the
handling of negative decimals, zero fields or seconds rounding.
"""

import logging
import math
from typing import Any, Optional, Tuple

from latlng_formatter.config import ConverterConfig, NegativeDecimalMode, get_default_config
from latlng_formatter.ordinates import DMSOrdinate, GPSOrdinate, OrdinateTypeLike
from latlng_formatter.types import ArcMinutes, ArcSeconds, Degrees
from latlng_formatter.validation import check_decimal, check_dms, check_gps, read_field

logger = logging.getLogger(__name__)

MINUTES_PER_DEGREE = 60.0
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_DEGREE = 3600.0


def _split_floor(value: float, precision: int) -> Tuple[int, int, float]:
    """Split decimal degrees into floored degrees, whole minutes and seconds.

    Exact for non-negative values. For negative values degrees are floored
    toward negative infinity and minutes and seconds count up from there.

    Seconds are rounded to ``precision`` places. A rounded value of 60
    seconds carries into minutes, and 60 minutes into degrees.
    """
    degrees = math.floor(value)
    fractional_minutes = MINUTES_PER_DEGREE * (value - degrees)
    minutes = math.floor(fractional_minutes)
    seconds = round(SECONDS_PER_MINUTE * (fractional_minutes - minutes), precision)

    if seconds >= SECONDS_PER_MINUTE:
        seconds -= SECONDS_PER_MINUTE
        minutes += 1
    if minutes >= MINUTES_PER_DEGREE:
        minutes -= int(MINUTES_PER_DEGREE)
        degrees += 1

    return degrees, minutes, seconds


class OrdinateConverter:
    """
    Converts single ordinates between decimal, DMS and GPS representations.

    The converter holds only an immutable configuration, so one instance can
    be shared freely. Module-level functions in this package use an instance
    with the default configuration.

    Attributes:
        config: ConverterConfig controlling compatibility behaviour
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config if config is not None else get_default_config()

    def __repr__(self) -> str:
        return f"OrdinateConverter(config={self.config!r})"

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    def validate_decimal(self, value: Any, ordinate_type: OrdinateTypeLike) -> bool:
        """Return True if value is a decimal ordinate within range for its type."""
        return check_decimal(value, ordinate_type).is_valid

    def validate_dms(self, ordinate: Any, ordinate_type: OrdinateTypeLike) -> bool:
        """Return True if ordinate is a complete, in-range DMS ordinate."""
        return check_dms(ordinate, ordinate_type, self.config.strict_compat).is_valid

    def validate_gps(self, ordinate: Any, ordinate_type: OrdinateTypeLike) -> bool:
        """Return True if ordinate is a complete, in-range GPS ordinate."""
        return check_gps(ordinate, ordinate_type, self.config.strict_compat).is_valid

    # ------------------------------------------------------------------
    # From decimal
    # ------------------------------------------------------------------

    def decimal_to_dms(self, value: Any, ordinate_type: OrdinateTypeLike) -> Optional[DMSOrdinate]:
        """
        Convert a decimal ordinate to degrees, minutes and seconds.

        Integral values map straight to ``(value, 0, 0)``. Otherwise the
        fractional part is split into whole minutes and seconds, with seconds
        rounded to ``config.seconds_precision`` places.

        Negative values are split according to ``config.negative_decimal_mode``:

        - MAGNITUDE: -45.5 -> (-45, 30, 0). When the whole degrees are zero
          the sign moves onto minutes and seconds: -0.5 -> (0, -30, 0).
        - FLOOR: -45.5 -> (-46, 30, 0), the legacy result.

        Args:
            value: Ordinate in decimal degrees
            ordinate_type: ``lat`` or ``long``

        Returns:
            DMSOrdinate, or None if value is not a valid decimal ordinate
        """
        if not self.validate_decimal(value, ordinate_type):
            return None

        if float(value).is_integer():
            return DMSOrdinate(
                degrees=Degrees(int(value)),
                minutes=ArcMinutes(0),
                seconds=ArcSeconds(0),
            )

        precision = self.config.seconds_precision

        if value >= 0 or self.config.negative_decimal_mode is NegativeDecimalMode.FLOOR:
            degrees, minutes, seconds = _split_floor(value, precision)
        else:
            degrees, minutes, seconds = _split_floor(-value, precision)
            if degrees:
                degrees = -degrees
            else:
                minutes = -minutes
                seconds = -seconds if seconds else 0.0

        return DMSOrdinate(
            degrees=Degrees(degrees),
            minutes=ArcMinutes(minutes),
            seconds=ArcSeconds(seconds),
        )

    def decimal_to_gps(self, value: Any, ordinate_type: OrdinateTypeLike) -> Optional[GPSOrdinate]:
        """
        Convert a decimal ordinate to degrees and decimal minutes.

        Args:
            value: Ordinate in decimal degrees
            ordinate_type: ``lat`` or ``long``

        Returns:
            GPSOrdinate, or None if value is not a valid decimal ordinate
        """
        if not self.validate_decimal(value, ordinate_type):
            return None

        if float(value).is_integer():
            return GPSOrdinate(degrees=Degrees(int(value)), minutes=ArcMinutes(0))

        logger.debug(f"Converting decimal {value} to GPS via DMS")
        dms = self.decimal_to_dms(value, ordinate_type)
        return self.dms_to_gps(dms, ordinate_type)

    # ------------------------------------------------------------------
    # From DMS
    # ------------------------------------------------------------------

    def dms_to_gps(self, ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[GPSOrdinate]:
        """
        Convert a DMS ordinate to degrees and decimal minutes.

        Seconds are folded into minutes as ``minutes + seconds / 60``.

        Returns:
            GPSOrdinate, or None if ordinate is not a valid DMS ordinate
        """
        if not self.validate_dms(ordinate, ordinate_type):
            return None

        minutes = read_field(ordinate, 'minutes') + read_field(ordinate, 'seconds') / SECONDS_PER_MINUTE
        return GPSOrdinate(degrees=Degrees(read_field(ordinate, 'degrees')), minutes=ArcMinutes(minutes))

    def dms_to_decimal(self, ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[float]:
        """
        Convert a DMS ordinate to decimal degrees.

        The sign of ``degrees`` is applied to minutes and seconds, so
        (-45, 30, 0) is -45.5. Degrees are truncated toward zero before the
        minutes and seconds are added.

        Returns:
            Decimal degrees, or None if ordinate is not a valid DMS ordinate
        """
        if not self.validate_dms(ordinate, ordinate_type):
            return None

        degrees = read_field(ordinate, 'degrees')
        sign = -1 if degrees < 0 else 1
        minutes = read_field(ordinate, 'minutes') * sign
        seconds = read_field(ordinate, 'seconds') * sign

        return math.trunc(degrees) + minutes / MINUTES_PER_DEGREE + seconds / SECONDS_PER_DEGREE

    # ------------------------------------------------------------------
    # From GPS
    # ------------------------------------------------------------------

    def gps_to_dms(self, ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[DMSOrdinate]:
        """
        Convert a GPS ordinate to degrees, minutes and seconds.

        The fractional part of the minutes becomes seconds. Negative minutes
        (used when the whole degrees are zero) are split by magnitude and
        both parts keep the sign: (0, -30.5) -> (0, -30, -30).

        Returns:
            DMSOrdinate, or None if ordinate is not a valid GPS ordinate
        """
        if not self.validate_gps(ordinate, ordinate_type):
            return None

        minutes = read_field(ordinate, 'minutes')
        whole_minutes = math.floor(abs(minutes))
        seconds = (abs(minutes) - whole_minutes) * SECONDS_PER_MINUTE
        if minutes < 0:
            whole_minutes = -whole_minutes
            seconds = -seconds if seconds else 0.0

        return DMSOrdinate(
            degrees=Degrees(read_field(ordinate, 'degrees')),
            minutes=ArcMinutes(whole_minutes),
            seconds=ArcSeconds(seconds),
        )

    def gps_to_decimal(self, ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[float]:
        """
        Convert a GPS ordinate to decimal degrees via DMS.

        Returns:
            Decimal degrees, or None if ordinate is not a valid GPS ordinate
            (or, in strict compatibility mode, if the intermediate DMS
            ordinate has a zero field)
        """
        if not self.validate_gps(ordinate, ordinate_type):
            return None

        logger.debug("Converting GPS ordinate to decimal via DMS")
        dms = self.gps_to_dms(ordinate, ordinate_type)
        return self.dms_to_decimal(dms, ordinate_type)


_default_converter = OrdinateConverter()


def decimal_to_dms(value: Any, ordinate_type: OrdinateTypeLike) -> Optional[DMSOrdinate]:
    """Convert a decimal ordinate to DMS using the default configuration."""
    return _default_converter.decimal_to_dms(value, ordinate_type)


def decimal_to_gps(value: Any, ordinate_type: OrdinateTypeLike) -> Optional[GPSOrdinate]:
    """Convert a decimal ordinate to GPS using the default configuration."""
    return _default_converter.decimal_to_gps(value, ordinate_type)


def dms_to_decimal(ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[float]:
    """Convert a DMS ordinate to decimal using the default configuration."""
    return _default_converter.dms_to_decimal(ordinate, ordinate_type)


def dms_to_gps(ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[GPSOrdinate]:
    """Convert a DMS ordinate to GPS using the default configuration."""
    return _default_converter.dms_to_gps(ordinate, ordinate_type)


def gps_to_decimal(ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[float]:
    """Convert a GPS ordinate to decimal using the default configuration."""
    return _default_converter.gps_to_decimal(ordinate, ordinate_type)


def gps_to_dms(ordinate: Any, ordinate_type: OrdinateTypeLike) -> Optional[DMSOrdinate]:
    """Convert a GPS ordinate to DMS using the default configuration."""
    return _default_converter.gps_to_dms(ordinate, ordinate_type)
