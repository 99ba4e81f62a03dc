"""
ULP (unit in the last place) based comparison.

IEEE-754 bit patterns keep their ordering when read as sign-magnitude
integers. Folding the sign bit into a signed integer puts every float on a
single monotonic line where adjacent representable values differ by one, and
``+0.0``/``-0.0`` share the point 0.
"""

from __future__ import annotations

import math
import struct

from approxcmp.checks import numeric_beartype
from approxcmp.exceptions import InvalidToleranceError
from approxcmp.modes import Precision


@numeric_beartype
def round_to_precision(x: float, precision: Precision = Precision.DOUBLE) -> float:
    """Round a Python float to the given binary format, overflowing to a signed infinity."""
    if precision is Precision.DOUBLE:
        return float(x)
    try:
        return float(struct.unpack(precision.float_format, struct.pack(precision.float_format, x))[0])
    except OverflowError:
        return math.copysign(math.inf, x)


@numeric_beartype
def to_ordered_int(x: float, precision: Precision = Precision.DOUBLE) -> int:
    """
    Reinterpret the bits of ``x`` as an integer that orders like the float does.

    Negative values map to the negated magnitude bits, so the integer line runs
    from -inf through -0.0 == 0 == +0.0 up to +inf.
    """
    rounded = round_to_precision(x, precision)
    raw: int = struct.unpack(precision.uint_format, struct.pack(precision.float_format, rounded))[0]
    sign_bit = 1 << (precision.bits - 1)
    if raw & sign_bit:
        return -(raw & (sign_bit - 1))
    return raw


@numeric_beartype
def ulp_distance(a: float, b: float, precision: Precision = Precision.DOUBLE) -> int:
    """Number of representable steps between ``a`` and ``b``."""
    if math.isnan(a) or math.isnan(b):
        raise ValueError("ULP distance is undefined for NaN operands")
    return abs(to_ordered_int(a, precision) - to_ordered_int(b, precision))


@numeric_beartype
def nearly_equal_ulp(
    a: float,
    b: float,
    max_ulps: int,
    precision: Precision = Precision.DOUBLE,
) -> bool:
    """
    Check whether ``a`` and ``b`` are at most ``max_ulps`` representable values apart.

    Args:
        a: First value.
        b: Second value.
        max_ulps: Largest accepted distance, zero meaning exact equality.
        precision: Binary format the operands are compared in.

    Returns:
        False when either operand is NaN, otherwise whether the distance fits.

    Raises:
        InvalidToleranceError: If ``max_ulps`` is negative.
    """
    if max_ulps < 0:
        raise InvalidToleranceError(max_ulps, "ULP distance must be non-negative")
    if math.isnan(a) or math.isnan(b):
        return False
    a = round_to_precision(a, precision)
    b = round_to_precision(b, precision)
    if a == b:
        return True
    return ulp_distance(a, b, precision) <= max_ulps
