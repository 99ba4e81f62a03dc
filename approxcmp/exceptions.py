"""
Exception hierarchy for approximate comparisons.

Only tolerance problems are reported as errors. Every floating-point operand,
including NaN, infinities and subnormals, yields a boolean instead.
"""

from __future__ import annotations


class ApproxCompareError(Exception):
    """Base exception for all approximate comparison errors."""

    pass


class InvalidToleranceError(ApproxCompareError):
    """Raised when a tolerance is non-positive, NaN, infinite or otherwise unusable."""

    def __init__(self, tolerance: float, reason: str) -> None:
        self.tolerance = tolerance
        self.reason = reason
        super().__init__(f"Invalid tolerance {tolerance!r}: {reason}")
