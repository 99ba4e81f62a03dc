from __future__ import annotations

import logging
from typing import Any

import structlog
from beartype import beartype

timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")


@beartype
def configure(log_level: str = "INFO", json_output: bool = False, colors: bool = True) -> None:
    """
    Configure structlog output for approxcmp loggers.

    The library never calls this itself; applications opt in to see the
    comparator and config debug events.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render one JSON object per line instead of console text
        colors: Colorize console output, ignored with ``json_output``

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=colors)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str, **context: Any) -> Any:
    """Lazy logger bound to an approxcmp component; honours a later ``configure``."""
    return structlog.get_logger(component=component, **context)
