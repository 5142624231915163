"""Render streams of quoted text cells as column-aligned tables."""

from __future__ import annotations

from importlib import metadata

from .api import build_table, format_table, read_input
from .config import FormatConfig
from .errors import ContractViolation, MalformedInputError, TableError
from .rows import RowSplitter
from .table import Table
from .tokenizer import tokenize
from .tokens import Cell, NewLine

__all__ = [
    "Cell",
    "ContractViolation",
    "FormatConfig",
    "MalformedInputError",
    "NewLine",
    "RowSplitter",
    "Table",
    "TableError",
    "build_table",
    "format_table",
    "read_input",
    "tokenize",
    "__version__",
]

try:  # pragma: no cover - metadata only available when installed
    __version__ = metadata.version("quoted-table")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for local dev
    __version__ = "1.0.0"
