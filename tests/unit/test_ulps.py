import math
import sys

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from approxcmp.exceptions import InvalidToleranceError
from approxcmp.modes import Precision
from approxcmp.ulps import nearly_equal_ulp, round_to_precision, to_ordered_int, ulp_distance

finite_floats = st.floats(allow_nan=False, allow_infinity=False)


def test_to_ordered_int_double_layout():
    assert to_ordered_int(1.0) == 0x3FF0000000000000
    assert to_ordered_int(-1.0) == -0x3FF0000000000000
    assert to_ordered_int(math.inf) == 0x7FF0000000000000


def test_to_ordered_int_single_layout():
    assert to_ordered_int(1.0, Precision.SINGLE) == 0x3F800000
    assert to_ordered_int(-2.0, Precision.SINGLE) == -0x40000000


def test_signed_zeros_share_a_point():
    assert to_ordered_int(0.0) == 0
    assert to_ordered_int(-0.0) == 0
    assert ulp_distance(0.0, -0.0) == 0


def test_ulp_distance_adjacent_values():
    assert ulp_distance(1.0, math.nextafter(1.0, 2.0)) == 1
    assert ulp_distance(1.0, 1.0 + 2.0**-23, Precision.SINGLE) == 1


def test_ulp_distance_crosses_zero():
    smallest_subnormal = math.ulp(0.0)
    assert ulp_distance(-smallest_subnormal, smallest_subnormal) == 2


def test_largest_finite_is_one_step_from_infinity():
    assert ulp_distance(sys.float_info.max, math.inf) == 1
    assert nearly_equal_ulp(sys.float_info.max, math.inf, 1)


def test_ulp_distance_rejects_nan():
    with pytest.raises(ValueError, match="NaN"):
        ulp_distance(math.nan, 1.0)


def test_nearly_equal_ulp_threshold():
    after_one = math.nextafter(1.0, 2.0)
    assert nearly_equal_ulp(1.0, after_one, 1)
    assert nearly_equal_ulp(1.0, after_one, 0) is False
    assert nearly_equal_ulp(1.0, 1.0, 0)


def test_nearly_equal_ulp_sum_of_tenths():
    assert nearly_equal_ulp(0.15 + 0.15, 0.1 + 0.2, 4)


def test_nearly_equal_ulp_nan():
    assert nearly_equal_ulp(math.nan, math.nan, 1000) is False
    assert nearly_equal_ulp(1.0, math.nan, 1000) is False


def test_nearly_equal_ulp_negative_max_raises():
    with pytest.raises(InvalidToleranceError, match="non-negative"):
        nearly_equal_ulp(1.0, 1.0, -1)


def test_round_to_precision():
    assert round_to_precision(0.1) == 0.1
    assert round_to_precision(0.1, Precision.SINGLE) != 0.1
    assert round_to_precision(1e39, Precision.SINGLE) == math.inf
    assert round_to_precision(-1e39, Precision.SINGLE) == -math.inf
    assert math.isnan(round_to_precision(math.nan, Precision.SINGLE))


@given(finite_floats, finite_floats)
def test_ordered_int_is_monotonic(a, b):
    assume(a < b)
    assert to_ordered_int(a) < to_ordered_int(b)


@given(finite_floats)
def test_next_value_is_one_step_away(f):
    assume(abs(f) < sys.float_info.max)
    assert ulp_distance(f, math.nextafter(f, math.inf)) == 1


@given(finite_floats, finite_floats)
def test_ulp_distance_is_symmetric(a, b):
    assert ulp_distance(a, b) == ulp_distance(b, a)
