from __future__ import annotations

from pathlib import Path

from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field

from approxcmp.config import ConfigError, load_from_yaml
from approxcmp.floats import FLOAT_TOLERANCE
from approxcmp.modes import ComparisonMode, Precision


@beartype
class ComparisonConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    mode: ComparisonMode = ComparisonMode.RELATIVE
    epsilon: float = Field(default=FLOAT_TOLERANCE, gt=0.0, allow_inf_nan=False)
    precision: Precision = Precision.DOUBLE


@beartype
def load_comparison_config(path: str | Path, section: str = "comparison") -> ComparisonConfig:
    """
    Load a ComparisonConfig from YAML.

    The ``section`` key is used when present, otherwise the whole document is
    treated as the comparison settings.
    """
    data = load_from_yaml(path)
    settings = data.get(section, data)
    if not isinstance(settings, dict):
        raise ConfigError(f"Config section '{section}' must be a mapping (dict).")
    return ComparisonConfig(**settings)
