import math
from typing import Final

from approxcmp.checks import numeric_beartype
from approxcmp.exceptions import InvalidToleranceError
from approxcmp.modes import ComparisonMode, Precision
from approxcmp.ulps import nearly_equal_ulp, round_to_precision

FLOAT_TOLERANCE: Final[float] = 1e-5


@numeric_beartype
def validate_tolerance(epsilon: float) -> float:
    """Return ``epsilon`` unchanged if it is a positive finite tolerance."""
    if math.isnan(epsilon):
        raise InvalidToleranceError(epsilon, "tolerance must not be NaN")
    if math.isinf(epsilon):
        raise InvalidToleranceError(epsilon, "tolerance must be finite")
    if epsilon <= 0.0:
        raise InvalidToleranceError(epsilon, "tolerance must be positive")
    return epsilon


@numeric_beartype
def nearly_equal(
    a: float,
    b: float,
    epsilon: float = FLOAT_TOLERANCE,
    mode: ComparisonMode = ComparisonMode.RELATIVE,
    precision: Precision = Precision.DOUBLE,
) -> bool:
    """
    Decide whether two floats are equal enough under ``mode``.

    RELATIVE is the hybrid check: relative error scaled by ``|a| + |b|``,
    falling back to an absolute bound of ``epsilon * smallest_normal`` when
    either operand is zero or the difference is subnormal. Tiny values of
    opposite sign (``1e-300`` vs ``-1e-300``) therefore compare unequal.

    ABSOLUTE is the naive ``|a - b| <= epsilon`` check, which accepts
    ``0.00001`` and ``0.00002`` as equal at ``epsilon=1e-5``.

    ULP truncates ``epsilon`` to an integer count of representable values.

    Args:
        a: First value, any IEEE-754 double including NaN and infinities.
        b: Second value.
        epsilon: Positive finite tolerance, interpreted per mode.
        mode: Comparison strategy.
        precision: Binary format the operands are rounded to before comparing.

    Returns:
        Whether the values are nearly equal. NaN never compares equal.

    Raises:
        InvalidToleranceError: If ``epsilon`` is zero, negative, NaN or infinite.
    """
    validate_tolerance(epsilon)

    if mode is ComparisonMode.ULP:
        return nearly_equal_ulp(a, b, int(epsilon), precision)

    a = round_to_precision(a, precision)
    b = round_to_precision(b, precision)

    # Also covers +0.0 == -0.0 and equal infinities, avoiding inf - inf
    if a == b:
        return True

    diff = abs(a - b)
    if mode is ComparisonMode.ABSOLUTE:
        return diff <= epsilon

    smallest_normal = precision.smallest_normal
    if a == 0.0 or b == 0.0 or diff < smallest_normal:
        return diff < epsilon * smallest_normal

    return diff / min(abs(a) + abs(b), precision.largest_finite) < epsilon


@numeric_beartype
def relative_error(a: float, b: float) -> float:
    """
    ``|a - b| / (|a| + |b|)`` without the clamp applied by ``nearly_equal``.

    Equal inputs give 0.0, exactly one zero operand gives 1.0 and an infinite
    operand that differs from the other gives ``inf``. NaN propagates.
    """
    a = float(a)
    b = float(b)
    if a == b:
        return 0.0
    if math.isinf(a) or math.isinf(b):
        return math.inf
    diff = abs(a - b)
    total = abs(a) + abs(b)
    if math.isinf(total):
        # Halving is exact at this magnitude and keeps both sums finite
        diff = abs(a / 2 - b / 2)
        total = abs(a / 2) + abs(b / 2)
    return diff / total


@numeric_beartype
def floats_equal(a: float, b: float, tol: float | None = None) -> bool:
    """``math.isclose`` with ``tol`` used as both the relative and the absolute bound."""
    tol = validate_tolerance(FLOAT_TOLERANCE if tol is None else tol)
    return math.isclose(a, b, rel_tol=tol, abs_tol=tol)


@numeric_beartype
def float_is_zero(a: float, tol: float | None = None) -> bool:
    tol = FLOAT_TOLERANCE if tol is None else tol
    return nearly_equal(a, 0.0, tol, ComparisonMode.ABSOLUTE)
