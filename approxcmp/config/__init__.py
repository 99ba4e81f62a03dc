from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from beartype import beartype
from yaml import MappingNode, ScalarNode
from yaml.loader import SafeLoader

from approxcmp.logs.structlog import get_logger

ENV_VAR_PATTERN = re.compile(r"\$\{([^}^{]+)\}")

logger = get_logger("config")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class EnvVarLoader(SafeLoader):
    """SafeLoader expanding ``${NAME}`` in scalars; unset variables expand to ''."""

    def construct_scalar(self, node: ScalarNode | MappingNode) -> str:
        value = super().construct_scalar(node)
        if not isinstance(value, str):
            return value
        return ENV_VAR_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), value)


@beartype
def load_from_yaml(path: str | Path) -> dict[str, object]:
    """
    Read a YAML mapping, expanding environment variables in its scalars.

    Raises:
        ConfigError: If the file is missing, the YAML is malformed or the root
            is not a mapping.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=EnvVarLoader)
    except yaml.YAMLError as err:
        raise ConfigError(f"YAML parsing error: {err}") from err
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping (dict).")
    logger.debug("Loaded config", path=str(config_path), keys=list(data))
    return data
