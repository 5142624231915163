"""Logging helpers shared by the library and the command line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "quoted_table"
LOG_FORMAT = "%(levelname)s: %(message)s"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, nested under the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """Route package log records to ``stream`` (stderr by default).

    Calling it again replaces the handler installed by the previous call, so
    repeated CLI invocations in one process never duplicate output.

    Raises:
        ValueError: If ``level`` is not a standard logging level name.
    """
    global _handler

    level = level.upper()
    if level not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level} (must be one of: {', '.join(VALID_LEVELS)})"
        )

    root = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(getattr(logging, level))


__all__ = ["get_logger", "setup_logging", "PACKAGE_LOGGER"]
