"""Structured logging configuration.

This module initializes structlog with a stable JSON format.
Events go to stderr so command output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL

_CONFIGURED = False


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install the structlog pipeline with a minimum level.

    Args:
        level: Lower-case level name, e.g. "info".
    """
    global _CONFIGURED
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
    _CONFIGURED = True


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not _CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    """Create a print logger bound to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)


def _level_number(level: str) -> int:
    """Map a level name onto its stdlib numeric value."""
    return logging.getLevelName(level.upper())
