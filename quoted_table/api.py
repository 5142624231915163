"""Public facing helpers that run the whole formatting pipeline."""

from __future__ import annotations

import sys
from pathlib import Path

from .config import FormatConfig
from .logging_config import get_logger
from .rows import RowSplitter
from .table import Table
from .tokenizer import tokenize

logger = get_logger(__name__)


def build_table(text: str) -> Table:
    """Tokenize ``text`` and accumulate its rows into a ``Table``.

    Raises:
        MalformedInputError: If ``text`` is not a valid quoted cell stream.
    """
    header, tail = RowSplitter(tokenize(text)).split()
    table = Table().with_header(header)
    header.close()

    for row in tail.rows():
        table.append_row(row)

    logger.debug(
        "built table with %d column(s) and %d body row(s)",
        table.column_count,
        table.body_row_count,
    )
    return table


def format_table(text: str, config: FormatConfig | None = None) -> str:
    """Return the bordered table rendering of ``text``."""
    config = config or FormatConfig()
    return build_table(text).render(keep_single_row=config.keep_single_row)


def read_input(source: str | Path | None = None) -> str:
    """Read all UTF-8 text from ``source``, or from stdin when it is None or ``-``."""
    if source is None or str(source) == "-":
        return sys.stdin.buffer.read().decode("utf-8")

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


__all__ = ["build_table", "format_table", "read_input"]
