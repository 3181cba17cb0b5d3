"""Immutable ordinate value types.

An ordinate is a single latitude or longitude value. It can be written as a
decimal number of degrees, as degrees-minutes-seconds (DMS), or as degrees
plus decimal minutes (GPS). Decimal ordinates are plain floats; the other two
shapes are frozen dataclasses defined here.

The sign of a DMS or GPS ordinate is carried on ``degrees``. Minutes and
seconds are conventionally non-negative.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Union

from latlng_formatter.types import ArcMinutes, ArcSeconds, Degrees

# Degree limits for each ordinate type (inclusive, symmetric around zero)
MAX_LATITUDE_DEG = 90
MAX_LONGITUDE_DEG = 180

# Upper bound on minutes and seconds components (inclusive)
MAX_MINUTES = 60
MAX_SECONDS = 60


class OrdinateType(str, Enum):
    """Which axis an ordinate belongs to."""

    LAT = "lat"
    """Latitude, valid range [-90, 90]"""

    LONG = "long"
    """Longitude, valid range [-180, 180]"""

    @property
    def degree_limit(self) -> int:
        """Largest absolute number of degrees allowed for this ordinate type."""
        return MAX_LATITUDE_DEG if self is OrdinateType.LAT else MAX_LONGITUDE_DEG


OrdinateTypeLike = Union[OrdinateType, str]


def parse_ordinate_type(ordinate_type: OrdinateTypeLike) -> OrdinateType:
    """Parse an ordinate type given as an enum member or its string value.

    Args:
        ordinate_type: ``OrdinateType`` member, or ``"lat"`` / ``"long"``

    Returns:
        OrdinateType enum value

    Raises:
        ValueError: If ordinate_type is not a recognised ordinate type
    """
    if isinstance(ordinate_type, OrdinateType):
        return ordinate_type
    try:
        return OrdinateType(ordinate_type)
    except ValueError:
        valid_types = [t.value for t in OrdinateType]
        raise ValueError(
            f"Invalid ordinate type {ordinate_type!r}. "
            f"Must be one of: {', '.join(valid_types)}"
        ) from None


@dataclass(frozen=True)
class DMSOrdinate:
    """Ordinate in degrees, minutes and seconds.

    Attributes:
        degrees: Signed whole degrees (carries the sign of the ordinate).
        minutes: Whole arc-minutes, 0-60.
        seconds: Arc-seconds, 0-60, may be fractional.
    """

    degrees: Degrees
    minutes: ArcMinutes
    seconds: ArcSeconds

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary with keys degrees, minutes, seconds."""
        return asdict(self)


@dataclass(frozen=True)
class GPSOrdinate:
    """Ordinate in degrees and decimal minutes.

    Attributes:
        degrees: Signed whole degrees (carries the sign of the ordinate).
        minutes: Arc-minutes, 0-60, with seconds folded in as a fraction.
    """

    degrees: Degrees
    minutes: ArcMinutes

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary with keys degrees, minutes."""
        return asdict(self)
