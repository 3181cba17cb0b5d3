"""
Unit type annotations for angular ordinate components.

This module defines NewType aliases for the angular units an ordinate is
split into. They document which part of an ordinate a parameter carries
(whole degrees, arc-minutes, arc-seconds) and let static type checkers catch
a minutes value passed where seconds are expected, while remaining plain
floats at runtime.

Usage Example:
    >>> from latlng_formatter.types import ArcMinutes, ArcSeconds, Degrees
    >>>
    >>> def seconds_fraction(minutes: ArcMinutes) -> ArcSeconds:
    ...     return ArcSeconds((minutes - int(minutes)) * 60.0)
"""

from typing import NewType

Degrees = NewType('Degrees', float)
"""Angle in degrees (a decimal ordinate, or the degrees part of DMS/GPS)"""

ArcMinutes = NewType('ArcMinutes', float)
"""Sixtieths of a degree (whole in DMS, fractional in GPS)"""

ArcSeconds = NewType('ArcSeconds', float)
"""Sixtieths of an arc-minute"""
