"""
Latitude/Longitude Ordinate Formatter Package.

This package converts a single geographic ordinate (one latitude or one
longitude) between three representations:

    - Decimal: signed decimal degrees, e.g. -0.230194
    - DMS: degrees, minutes, seconds, e.g. (39, 38, 25.72)
    - GPS: degrees and decimal minutes, e.g. (39, 38.4287)

Every conversion validates its input against the range of the ordinate type
(latitude ±90°, longitude ±180°) and returns None instead of raising when
the input is invalid.

Example Usage:
    >>> from latlng_formatter import decimal_to_gps, gps_to_decimal, GPSOrdinate
    >>>
    >>> decimal_to_gps(45.5, 'lat')
    GPSOrdinate(degrees=45, minutes=30.0)
    >>> gps_to_decimal(GPSOrdinate(degrees=45, minutes=30), 'lat')
    45.5
    >>> decimal_to_gps(200, 'lat') is None
    True

Available Classes:
    Values:
        - OrdinateType: lat or long
        - DMSOrdinate: degrees, minutes, seconds
        - GPSOrdinate: degrees, decimal minutes

    Conversion:
        - OrdinateConverter: all conversions for a given ConverterConfig
        - ConverterConfig: compatibility and rounding settings

    Validation:
        - ValidationResult: tagged outcome of check_decimal/check_dms/check_gps
        - InvalidReason: why an ordinate was rejected
"""

# Value types
from latlng_formatter.ordinates import (
    OrdinateType,
    DMSOrdinate,
    GPSOrdinate,
)

# Validation
from latlng_formatter.validation import (
    InvalidReason,
    ValidationResult,
    check_decimal,
    check_dms,
    check_gps,
    validate_decimal,
    validate_dms,
    validate_gps,
)

# Configuration and conversion
from latlng_formatter.config import ConverterConfig, NegativeDecimalMode, get_default_config
from latlng_formatter.converter import (
    OrdinateConverter,
    decimal_to_dms,
    decimal_to_gps,
    dms_to_decimal,
    dms_to_gps,
    gps_to_decimal,
    gps_to_dms,
)

# Define public API
__all__ = [
    # Values
    'OrdinateType',
    'DMSOrdinate',
    'GPSOrdinate',

    # Validation
    'InvalidReason',
    'ValidationResult',
    'check_decimal',
    'check_dms',
    'check_gps',
    'validate_decimal',
    'validate_dms',
    'validate_gps',

    # Configuration and conversion
    'ConverterConfig',
    'NegativeDecimalMode',
    'OrdinateConverter',
    'get_default_config',
    'decimal_to_dms',
    'decimal_to_gps',
    'dms_to_decimal',
    'dms_to_gps',
    'gps_to_decimal',
    'gps_to_dms',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'Convert latitude/longitude ordinates between decimal, DMS and GPS formats'
