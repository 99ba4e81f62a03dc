from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from beartype import beartype

from approxcmp.checks import numeric_beartype
from approxcmp.config.comparison import ComparisonConfig, load_comparison_config
from approxcmp.floats import nearly_equal, validate_tolerance
from approxcmp.logs.structlog import get_logger


class Comparator:
    """Reusable comparison policy bound to a single ComparisonConfig."""

    @beartype
    def __init__(self, config: ComparisonConfig | None = None) -> None:
        self.config = config or ComparisonConfig()
        validate_tolerance(self.config.epsilon)
        self.logger = get_logger(
            "comparator",
            mode=self.config.mode.value,
            epsilon=self.config.epsilon,
            precision=self.config.precision.value,
        )
        self.logger.debug("Comparator configured")

    @classmethod
    @beartype
    def from_yaml(cls, path: str | Path, section: str = "comparison") -> Comparator:
        return cls(load_comparison_config(path, section))

    @numeric_beartype
    def equal(self, a: float, b: float) -> bool:
        return nearly_equal(a, b, self.config.epsilon, self.config.mode, self.config.precision)

    def all_equal(self, pairs: Iterable[tuple[float, float]]) -> bool:
        return all(self.equal(a, b) for a, b in pairs)

    def mismatches(self, pairs: Iterable[tuple[float, float]]) -> list[int]:
        """Indices of the pairs that do not compare nearly equal."""
        indices = [idx for idx, (a, b) in enumerate(pairs) if not self.equal(a, b)]
        if indices:
            self.logger.debug("Pairs not nearly equal", indices=indices)
        return indices
