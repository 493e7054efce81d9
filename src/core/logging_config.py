"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr,
so command output written to stdout stays machine readable.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL
from core.errors import UidIndexConfigError

_CONFIGURED_LEVEL: int | None = None


def configure_logging(level_name: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level_name: Standard level name such as INFO or DEBUG.

    Raises:
        UidIndexConfigError: If the level name is unknown.
    """
    global _CONFIGURED_LEVEL
    level = _resolve_level(level_name)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
    _CONFIGURED_LEVEL = level


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if _CONFIGURED_LEVEL is None:
        configure_logging()
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)


def _resolve_level(level_name: str) -> int:
    """Map a level name onto its numeric logging level."""
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise UidIndexConfigError(
            f"Invalid log level: '{level_name}'. Use DEBUG, INFO, WARNING, or ERROR."
        )
    return level
