"""Configuration for controlling table formatting."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVEL_ENV = "QUOTED_TABLE_LOG_LEVEL"


@dataclass(slots=True)
class FormatConfig:
    """Runtime configuration for the table formatter.

    Attributes:
        keep_single_row: Render a lone body row instead of dropping it
            after the header line.
        verbose: Enable verbose logging for debugging.
        log_level: Optional explicit log level name. If None, the level is
            read from ``QUOTED_TABLE_LOG_LEVEL``.
    """

    keep_single_row: bool = False
    verbose: bool = False
    log_level: Optional[str] = None

    def resolve_log_level(self) -> str:
        """Return the effective log level name."""
        if self.log_level:
            return self.log_level.upper()
        if self.verbose:
            return "DEBUG"
        return os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()


__all__ = ["FormatConfig", "LOG_LEVEL_ENV"]
