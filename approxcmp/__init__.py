from approxcmp import floats, ulps
from approxcmp.comparator import Comparator
from approxcmp.config import ConfigError, load_from_yaml
from approxcmp.config.comparison import ComparisonConfig, load_comparison_config
from approxcmp.exceptions import ApproxCompareError, InvalidToleranceError
from approxcmp.floats import (
    FLOAT_TOLERANCE,
    float_is_zero,
    floats_equal,
    nearly_equal,
    relative_error,
    validate_tolerance,
)
from approxcmp.modes import ComparisonMode, Precision
from approxcmp.ulps import nearly_equal_ulp, to_ordered_int, ulp_distance

__all__ = [
    "FLOAT_TOLERANCE",
    "ApproxCompareError",
    "Comparator",
    "ComparisonConfig",
    "ComparisonMode",
    "ConfigError",
    "InvalidToleranceError",
    "Precision",
    "float_is_zero",
    "floats",
    "floats_equal",
    "load_comparison_config",
    "load_from_yaml",
    "nearly_equal",
    "nearly_equal_ulp",
    "relative_error",
    "to_ordered_int",
    "ulp_distance",
    "ulps",
    "validate_tolerance",
]
