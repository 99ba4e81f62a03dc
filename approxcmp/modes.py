import sys
from enum import Enum


class ComparisonMode(str, Enum):
    ABSOLUTE = "absolute"  # Fixed |a - b| bound, wrong near zero
    RELATIVE = "relative"  # Hybrid relative error with a near-zero fallback
    ULP = "ulp"  # Count of representable values between a and b


class Precision(str, Enum):
    """IEEE-754 binary interchange format the operands are compared in."""

    SINGLE = "single"
    DOUBLE = "double"

    @property
    def smallest_normal(self) -> float:
        if self is Precision.SINGLE:
            return 2.0**-126
        return sys.float_info.min

    @property
    def largest_finite(self) -> float:
        if self is Precision.SINGLE:
            return (2.0 - 2.0**-23) * 2.0**127
        return sys.float_info.max

    @property
    def bits(self) -> int:
        return 32 if self is Precision.SINGLE else 64

    @property
    def float_format(self) -> str:
        return "<f" if self is Precision.SINGLE else "<d"

    @property
    def uint_format(self) -> str:
        return "<I" if self is Precision.SINGLE else "<Q"
