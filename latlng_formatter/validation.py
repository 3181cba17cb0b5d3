"""
Ordinate validation module.

Provides range and shape checks for the three ordinate representations:
decimal degrees, DMS and GPS. Each ``check_*`` function returns a
``ValidationResult`` that records why an ordinate was rejected; the
``validate_*`` functions collapse that to a plain bool.

DMS and GPS ordinates may be given as ``DMSOrdinate``/``GPSOrdinate``
instances or as mappings with the same field names.

Two presence rules are supported for the minutes/seconds fields:

- Default: a field is present when it exists and holds a finite number,
  so a zero minutes or seconds value is accepted.
- ``strict_compat=True``: a field also counts as missing when it is zero
  (or otherwise falsy), reproducing legacy latlng-formatter
  behaviour. This rejects ordinates such as 45°30'0".
"""

import logging
import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from latlng_formatter.ordinates import (
    MAX_MINUTES,
    MAX_SECONDS,
    OrdinateType,
    OrdinateTypeLike,
    parse_ordinate_type,
)

logger = logging.getLogger(__name__)

DMS_FIELDS = ('degrees', 'minutes', 'seconds')
GPS_FIELDS = ('degrees', 'minutes')

_MISSING = object()


class InvalidReason(Enum):
    """Why an ordinate failed validation."""

    MISSING_FIELD = "missing_field"
    NOT_NUMERIC = "not_numeric"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one ordinate.

    Truthy when the ordinate is valid, so it can be used directly in an
    ``if`` statement.

    Attributes:
        reason: None when valid, otherwise the rejection category
        field: Name of the offending field (``"value"`` for decimals)
        message: Human readable description of the rejection
    """

    reason: Optional[InvalidReason] = None
    field: Optional[str] = None
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def invalid(cls, reason: InvalidReason, field: str, message: str) -> 'ValidationResult':
        logger.debug(f"Rejected ordinate ({reason.value}): {message}")
        return cls(reason=reason, field=field, message=message)


VALID = ValidationResult()


def _is_valid_finite_number(value: Any) -> bool:
    """Check if a value is a finite real number.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        value: Value to check

    Returns:
        True if value is a finite real number, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except (TypeError, ValueError):
        return False


def read_field(ordinate: Any, name: str) -> Any:
    """Read a field from an ordinate dataclass or mapping, or ``_MISSING``."""
    if isinstance(ordinate, Mapping):
        return ordinate.get(name, _MISSING)
    return getattr(ordinate, name, _MISSING)


def _check_fields_present(
    ordinate: Any,
    fields: Sequence[str],
    strict_compat: bool,
) -> ValidationResult:
    """Check that every named field is present and holds a finite number."""
    for name in fields:
        value = read_field(ordinate, name)
        if value is _MISSING or value is None:
            return ValidationResult.invalid(
                InvalidReason.MISSING_FIELD, name, f"missing required '{name}' field"
            )
        if strict_compat and not value:
            return ValidationResult.invalid(
                InvalidReason.MISSING_FIELD,
                name,
                f"'{name}' is {value!r}, treated as missing in strict compatibility mode",
            )
        if not _is_valid_finite_number(value):
            return ValidationResult.invalid(
                InvalidReason.NOT_NUMERIC,
                name,
                f"'{name}' must be a finite number, got {value!r}",
            )
    return VALID


def _check_degrees_range(degrees: float, ordinate_type: OrdinateType) -> ValidationResult:
    limit = ordinate_type.degree_limit
    if degrees < -limit or degrees > limit:
        return ValidationResult.invalid(
            InvalidReason.OUT_OF_RANGE,
            'degrees',
            f"degrees {degrees} outside valid range [{-limit}, {limit}]",
        )
    return VALID


def _check_upper_bound(ordinate: Any, name: str, maximum: float) -> ValidationResult:
    value = read_field(ordinate, name)
    if value > maximum:
        return ValidationResult.invalid(
            InvalidReason.OUT_OF_RANGE, name, f"{name} {value} exceeds {maximum}"
        )
    return VALID


def check_decimal(value: Any, ordinate_type: OrdinateTypeLike) -> ValidationResult:
    """Validate a decimal ordinate.

    Args:
        value: Ordinate in decimal degrees
        ordinate_type: ``lat`` (range ±90) or ``long`` (range ±180)

    Returns:
        ValidationResult, truthy when valid

    Raises:
        ValueError: If ordinate_type is not a recognised ordinate type
    """
    limit = parse_ordinate_type(ordinate_type).degree_limit
    if not _is_valid_finite_number(value):
        return ValidationResult.invalid(
            InvalidReason.NOT_NUMERIC, 'value', f"value must be a finite number, got {value!r}"
        )
    if value < -limit or value > limit:
        return ValidationResult.invalid(
            InvalidReason.OUT_OF_RANGE,
            'value',
            f"value {value} outside valid range [{-limit}, {limit}]",
        )
    return VALID


def check_dms(
    ordinate: Any,
    ordinate_type: OrdinateTypeLike,
    strict_compat: bool = False,
) -> ValidationResult:
    """Validate a DMS ordinate.

    Degrees must be within the range of the ordinate type; minutes and
    seconds must not exceed 60. Lower bounds of minutes and seconds are not
    checked.

    Args:
        ordinate: ``DMSOrdinate`` or mapping with degrees, minutes, seconds
        ordinate_type: ``lat`` or ``long``
        strict_compat: Treat zero fields as missing

    Returns:
        ValidationResult, truthy when valid

    Raises:
        ValueError: If ordinate_type is not a recognised ordinate type
    """
    ordinate_type = parse_ordinate_type(ordinate_type)

    result = _check_fields_present(ordinate, DMS_FIELDS, strict_compat)
    if not result:
        return result

    result = _check_degrees_range(read_field(ordinate, 'degrees'), ordinate_type)
    if not result:
        return result

    result = _check_upper_bound(ordinate, 'minutes', MAX_MINUTES)
    if not result:
        return result

    return _check_upper_bound(ordinate, 'seconds', MAX_SECONDS)


def check_gps(
    ordinate: Any,
    ordinate_type: OrdinateTypeLike,
    strict_compat: bool = False,
) -> ValidationResult:
    """Validate a GPS (degrees + decimal minutes) ordinate.

    Same rules as ``check_dms`` without the seconds field.
    """
    ordinate_type = parse_ordinate_type(ordinate_type)

    result = _check_fields_present(ordinate, GPS_FIELDS, strict_compat)
    if not result:
        return result

    result = _check_degrees_range(read_field(ordinate, 'degrees'), ordinate_type)
    if not result:
        return result

    return _check_upper_bound(ordinate, 'minutes', MAX_MINUTES)


def validate_decimal(value: Any, ordinate_type: OrdinateTypeLike) -> bool:
    """Return True if value is a decimal ordinate within range for its type."""
    return check_decimal(value, ordinate_type).is_valid


def validate_dms(ordinate: Any, ordinate_type: OrdinateTypeLike, strict_compat: bool = False) -> bool:
    """Return True if ordinate is a complete, in-range DMS ordinate."""
    return check_dms(ordinate, ordinate_type, strict_compat).is_valid


def validate_gps(ordinate: Any, ordinate_type: OrdinateTypeLike, strict_compat: bool = False) -> bool:
    """Return True if ordinate is a complete, in-range GPS ordinate."""
    return check_gps(ordinate, ordinate_type, strict_compat).is_valid
