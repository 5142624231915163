#!/usr/bin/env python3
"""Command line entry point: read quoted cells, print the aligned table."""

from __future__ import annotations

import sys
from pathlib import Path

from .api import format_table, read_input
from .config import FormatConfig
from .errors import MalformedInputError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

FLAGS = {"-v", "--verbose", "--keep-single-row"}


def _usage() -> str:
    script = Path(sys.argv[0]).name
    return f"Usage: {script} [-v|--verbose] [--keep-single-row] [input|-]"


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)

    flags = {arg for arg in argv if arg in FLAGS}
    positional = [arg for arg in argv if arg not in FLAGS]

    config = FormatConfig(
        keep_single_row="--keep-single-row" in flags,
        verbose=bool(flags & {"-v", "--verbose"}),
    )
    try:
        setup_logging(config.resolve_log_level())
    except ValueError as exc:
        setup_logging()
        logger.warning(f"{exc}; falling back to WARNING")

    unknown = [arg for arg in positional if arg.startswith("-") and arg != "-"]
    if unknown or len(positional) > 1:
        logger.error(_usage())
        return 1

    source = positional[0] if positional else None
    try:
        text = read_input(source)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"error: {exc}")
        return 1

    try:
        rendered = format_table(text, config)
    except MalformedInputError as exc:
        # Reported whatever the configured log level.
        sys.stderr.write(f"{exc}\n")
        return 1

    sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
