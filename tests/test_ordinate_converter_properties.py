#!/usr/bin/env python3
"""
Property-based tests for ordinate conversion using Hypothesis.

This test module verifies properties of the decimal/DMS/GPS conversions that
must hold across all valid inputs, rather than for a handful of examples.

Properties Verified:
1. Integral Decimals: an integral decimal converts to (d, 0, 0)
2. Decimal Round-Trip: decimal -> DMS -> decimal recovers the value within
   1e-6 for non-negative values, and for negative values in magnitude mode
3. Floor Decomposition: in floor mode, degrees + minutes/60 + seconds/3600
   equals the input for every sign
4. DMS/GPS Round-Trip: DMS -> GPS -> DMS is stable for whole minutes
5. Range Consistency: validate_decimal agrees with the ordinate type limits
"""

import math
import os
import sys
from typing import Optional

from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from latlng_formatter import (
    ConverterConfig,
    DMSOrdinate,
    GPSOrdinate,
    NegativeDecimalMode,
    OrdinateConverter,
    OrdinateType,
    decimal_to_dms,
    decimal_to_gps,
    dms_to_decimal,
    dms_to_gps,
    gps_to_decimal,
    gps_to_dms,
    validate_decimal,
)

ROUND_TRIP_TOLERANCE = 1e-6


# ============================================================================
# Hypothesis Strategies for Test Data Generation
# ============================================================================

ordinate_types = st.sampled_from([OrdinateType.LAT, OrdinateType.LONG])


@composite
def valid_decimal(
    draw,
    ordinate_type: OrdinateType,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """
    Generate a decimal ordinate within range for the ordinate type.

    Args:
        draw: Hypothesis draw function
        ordinate_type: Ordinate type selecting the ±90 / ±180 limit
        min_value: Optional lower bound (default: -limit)
        max_value: Optional upper bound (default: +limit)

    Returns:
        Decimal degrees within the requested range
    """
    limit = ordinate_type.degree_limit
    low = -limit if min_value is None else min_value
    high = limit if max_value is None else max_value
    return draw(st.floats(min_value=low, max_value=high, allow_nan=False, allow_infinity=False))


@composite
def dms_with_whole_minutes(draw, ordinate_type: OrdinateType) -> DMSOrdinate:
    """Generate a valid DMS ordinate with whole minutes and seconds below 60.

    Some draws are sub-degree negatives: zero degrees with the sign carried
    on minutes and seconds.
    """
    limit = ordinate_type.degree_limit
    degrees = draw(st.integers(min_value=-limit, max_value=limit))
    minutes = draw(st.integers(min_value=0, max_value=59))
    seconds = draw(st.floats(min_value=0.0, max_value=59.999, allow_nan=False, allow_infinity=False))
    if draw(st.booleans()):
        return DMSOrdinate(0, -minutes, -seconds)
    return DMSOrdinate(degrees, minutes, seconds)


# ============================================================================
# Property Tests
# ============================================================================


class TestIntegralDecimalProperties:
    """Integral decimals convert to whole degrees with zero minutes and seconds."""

    @given(data=st.data(), ordinate_type=ordinate_types)
    def test_integral_decimal_to_dms(self, data, ordinate_type):
        limit = ordinate_type.degree_limit
        degrees = data.draw(st.integers(min_value=-limit, max_value=limit))

        assert decimal_to_dms(degrees, ordinate_type) == DMSOrdinate(degrees, 0, 0)
        assert decimal_to_dms(float(degrees), ordinate_type) == DMSOrdinate(degrees, 0, 0)


class TestDecimalRoundTripProperties:
    """decimal -> DMS -> decimal recovers the input."""

    @given(data=st.data(), ordinate_type=ordinate_types)
    @settings(max_examples=300)
    def test_non_negative_round_trip(self, data, ordinate_type):
        value = data.draw(valid_decimal(ordinate_type, min_value=0.0))

        dms = decimal_to_dms(value, ordinate_type)
        assert dms is not None
        recovered = dms_to_decimal(dms, ordinate_type)

        assert recovered is not None
        assert abs(recovered - value) < ROUND_TRIP_TOLERANCE, (
            f"{value} -> {dms} -> {recovered}"
        )

    @given(data=st.data(), ordinate_type=ordinate_types)
    @settings(max_examples=300)
    def test_negative_round_trip_in_magnitude_mode(self, data, ordinate_type):
        converter = OrdinateConverter(ConverterConfig(negative_decimal_mode=NegativeDecimalMode.MAGNITUDE))
        value = data.draw(valid_decimal(ordinate_type, max_value=0.0))

        dms = converter.decimal_to_dms(value, ordinate_type)
        recovered = converter.dms_to_decimal(dms, ordinate_type)

        assert recovered is not None
        assert abs(recovered - value) < ROUND_TRIP_TOLERANCE, (
            f"{value} -> {dms} -> {recovered}"
        )

    @given(data=st.data(), ordinate_type=ordinate_types)
    def test_decimal_gps_round_trip(self, data, ordinate_type):
        value = data.draw(valid_decimal(ordinate_type))
        converter = OrdinateConverter()

        gps = converter.decimal_to_gps(value, ordinate_type)
        recovered = converter.gps_to_decimal(gps, ordinate_type)

        assert recovered is not None
        assert abs(recovered - value) < ROUND_TRIP_TOLERANCE


class TestFloorModeProperties:
    """Floor mode splits any decimal into parts that sum back to it."""

    @given(data=st.data(), ordinate_type=ordinate_types)
    def test_parts_sum_to_input(self, data, ordinate_type):
        converter = OrdinateConverter(ConverterConfig(negative_decimal_mode=NegativeDecimalMode.FLOOR))
        value = data.draw(valid_decimal(ordinate_type))

        dms = converter.decimal_to_dms(value, ordinate_type)
        total = dms.degrees + dms.minutes / 60.0 + dms.seconds / 3600.0

        assert abs(total - value) < ROUND_TRIP_TOLERANCE
        assert 0 <= dms.minutes < 60
        assert 0 <= dms.seconds < 60


class TestDMSGPSProperties:
    """DMS and GPS conversions agree with each other."""

    @given(data=st.data(), ordinate_type=ordinate_types)
    def test_dms_gps_dms_round_trip(self, data, ordinate_type):
        dms = data.draw(dms_with_whole_minutes(ordinate_type))

        recovered = gps_to_dms(dms_to_gps(dms, ordinate_type), ordinate_type)

        assert recovered.degrees == dms.degrees
        assert recovered.minutes == dms.minutes
        assert math.isclose(recovered.seconds, dms.seconds, abs_tol=1e-6)

    @given(data=st.data(), ordinate_type=ordinate_types)
    @settings(max_examples=300)
    def test_negative_gps_to_dms_matches_decimal_to_dms(self, data, ordinate_type):
        value = data.draw(
            st.one_of(
                valid_decimal(ordinate_type, max_value=0.0),
                valid_decimal(ordinate_type, min_value=-1.0, max_value=0.0),
            )
        )

        expected = decimal_to_dms(value, ordinate_type)
        recovered = gps_to_dms(decimal_to_gps(value, ordinate_type), ordinate_type)

        assert recovered.degrees == expected.degrees
        if recovered.degrees == 0:
            assert recovered.minutes <= 0 and recovered.seconds <= 0, f"{value} -> {recovered}"
        else:
            assert recovered.minutes >= 0 and recovered.seconds >= 0, f"{value} -> {recovered}"
        assert abs(recovered.seconds) < 60
        expected_seconds = expected.minutes * 60 + expected.seconds
        recovered_seconds = recovered.minutes * 60 + recovered.seconds
        assert math.isclose(recovered_seconds, expected_seconds, abs_tol=1e-3)


    @given(data=st.data(), ordinate_type=ordinate_types)
    def test_gps_to_decimal_applies_degree_sign(self, data, ordinate_type):
        limit = ordinate_type.degree_limit
        degrees = data.draw(st.integers(min_value=-limit, max_value=limit))
        minutes = data.draw(st.floats(min_value=0.0, max_value=59.999, allow_nan=False))
        sign = -1 if degrees < 0 else 1

        result = gps_to_decimal(GPSOrdinate(degrees, minutes), ordinate_type)

        assert result is not None
        assert math.isclose(result, degrees + sign * minutes / 60.0, abs_tol=1e-9)


class TestRangeProperties:
    """validate_decimal accepts exactly the closed range of the ordinate type."""

    @given(
        value=st.floats(min_value=-400.0, max_value=400.0, allow_nan=False),
        ordinate_type=ordinate_types,
    )
    def test_validate_decimal_matches_limits(self, value, ordinate_type):
        limit = ordinate_type.degree_limit
        assert validate_decimal(value, ordinate_type) == (-limit <= value <= limit)

    @given(
        value=st.floats(min_value=-400.0, max_value=400.0, allow_nan=False),
        ordinate_type=ordinate_types,
    )
    def test_out_of_range_conversions_return_none(self, value, ordinate_type):
        limit = ordinate_type.degree_limit
        if -limit <= value <= limit:
            return
        assert decimal_to_dms(value, ordinate_type) is None
