"""Structured logging configuration.

This module initializes structlog with a stable structured format.
Events are written to standard error so stdout stays reserved for results.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_CONFIGURED = False


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured JSON output.
    """
    configure_logging()
    return structlog.get_logger(name)


def configure_logging(level: int = logging.INFO, force: bool = False) -> None:
    """Configure structlog processors once per process.

    Args:
        level: Minimum log level to emit.
        force: Reconfigure even when already configured.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
    _CONFIGURED = True


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    """Bind to the current stderr so redirected streams are honored."""
    return structlog.PrintLogger(sys.stderr)
