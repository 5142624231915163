"""Token types produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Cell:
    """A quoted cell; ``text`` is everything between the two quotes."""

    text: str


@dataclass(frozen=True, slots=True)
class NewLine:
    """End of a physical input line."""


NEW_LINE = NewLine()

Token = Union[Cell, NewLine]

__all__ = ["Cell", "NewLine", "NEW_LINE", "Token"]
