"""Character-level tokenizer for quoted cell streams."""

from __future__ import annotations

from typing import Iterator

from .errors import MalformedInputError
from .logging_config import get_logger
from .tokens import NEW_LINE, Cell, Token

logger = get_logger(__name__)

QUOTE = '"'

# Unicode White_Space property.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _byte_len(text: str) -> int:
    """Return the UTF-8 encoded size of ``text``."""
    return len(text.encode("utf-8", "surrogatepass"))


def tokenize(text: str) -> Iterator[Token]:
    """Yield the ``Cell`` and ``NewLine`` tokens of ``text`` in input order.

    Whitespace outside cells is skipped, a line feed is reported as
    ``NewLine`` and everything between a pair of double quotes becomes a
    ``Cell``. Malformed input raises ``MalformedInputError`` carrying the
    byte offset of the offending character (the opening quote for an
    unterminated cell); the iterator is exhausted afterwards.
    """
    index = 0
    offset = 0
    length = len(text)

    while index < length:
        ch = text[index]
        start = offset
        index += 1
        offset += _byte_len(ch)

        if ch == "\n":
            yield NEW_LINE
        elif ch == QUOTE:
            end = text.find(QUOTE, index)
            if end == -1:
                logger.debug("unterminated cell opened at byte %d", start)
                raise MalformedInputError(start)
            cell = text[index:end]
            index = end + 1
            offset += _byte_len(cell) + 1
            yield Cell(cell)
        elif ch not in WHITESPACE:
            logger.debug("unexpected %r at byte %d", ch, start)
            raise MalformedInputError(start)


__all__ = ["tokenize", "QUOTE", "WHITESPACE"]
