"""Split a token stream into a header row and fixed-width body rows.

One token cursor is shared by two views. The header view owns it first and
hands it back once it has been drained; the tail view then claims it for the
rest of the input. Ownership lives in a ``CursorSlot`` so every hand-off is
checked, and driving the views out of order raises ``ContractViolation``.
"""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, Optional, Tuple

from .errors import ContractViolation
from .logging_config import get_logger
from .tokens import Cell, Token

logger = get_logger(__name__)

_EMPTY = object()


class SlotState(enum.Enum):
    """Which view currently owns the shared cursor."""

    UNCLAIMED = "unclaimed"
    HEADER = "header"
    TAIL = "tail"


class TokenCursor:
    """Single-pass token source with one token of lookahead.

    Also records the header's column count so the tail view can pick it up
    together with the cursor.
    """

    __slots__ = ("_tokens", "_pending", "column_count")

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._pending: object = _EMPTY
        self.column_count = 0

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, ``None`` at the end."""
        if self._pending is _EMPTY:
            self._pending = next(self._tokens, None)
        return self._pending  # type: ignore[return-value]

    def next(self) -> Optional[Token]:
        """Consume and return the next token, ``None`` at the end."""
        if self._pending is not _EMPTY:
            token, self._pending = self._pending, _EMPTY
            return token  # type: ignore[return-value]
        return next(self._tokens, None)


class CursorSlot:
    """Holds the shared cursor and tracks which view owns it."""

    def __init__(self, cursor: TokenCursor) -> None:
        self._cursor = cursor
        self.state = SlotState.UNCLAIMED

    def claim(self, owner: SlotState) -> TokenCursor:
        if self.state is SlotState.HEADER and owner is SlotState.TAIL:
            raise ContractViolation("Drain the header view before requesting rows")
        if self.state is not SlotState.UNCLAIMED:
            raise ContractViolation(f"Cursor is already claimed by the {self.state.value} view")
        self.state = owner
        return self._cursor

    def release(self, owner: SlotState) -> None:
        if self.state is not owner:
            raise ContractViolation(
                f"The {owner.value} view cannot release a cursor it does not own"
            )
        self.state = SlotState.UNCLAIMED


class HeaderView:
    """Iterator over the header cells, up to the first ``NewLine``."""

    def __init__(self, slot: CursorSlot) -> None:
        self._slot = slot
        self._cursor: Optional[TokenCursor] = slot.claim(SlotState.HEADER)

    def __iter__(self) -> "HeaderView":
        return self

    def __next__(self) -> str:
        cursor = self._cursor
        if cursor is None:
            raise StopIteration

        token = cursor.next()
        if isinstance(token, Cell):
            cursor.column_count += 1
            return token.text

        # NewLine or end of input: hand the cursor back for the tail view.
        self._cursor = None
        self._slot.release(SlotState.HEADER)
        logger.debug("header has %d column(s)", cursor.column_count)
        raise StopIteration

    @property
    def drained(self) -> bool:
        return self._cursor is None

    def close(self) -> None:
        """Check that the header was read to its end."""
        if self._cursor is not None:
            raise ContractViolation("The header view must be fully drained")


class RowCursor:
    """Iterator over exactly ``column_count`` cells of one body row.

    Short lines are padded with empty cells; cells beyond the last column
    are read and discarded up to the end of the line. ``len()`` is the
    number of values still to be pulled.
    """

    def __init__(self, cursor: TokenCursor) -> None:
        self._cursor = cursor
        self._left = cursor.column_count
        self._padding = False

    def __iter__(self) -> "RowCursor":
        return self

    def __len__(self) -> int:
        return self._left

    def __next__(self) -> str:
        if self._left == 0:
            raise StopIteration
        value = self._pull()
        self._left -= 1
        return value

    def _pull(self) -> str:
        if self._padding:
            return ""

        token = self._cursor.next()
        if isinstance(token, Cell):
            if self._left == 1:
                self._skip_rest_of_line()
            return token.text

        # NewLine or end of input before the last column.
        self._padding = True
        return ""

    def _skip_rest_of_line(self) -> None:
        skipped = 0
        while isinstance(self._cursor.next(), Cell):
            skipped += 1
        if skipped:
            logger.debug("discarded %d surplus cell(s)", skipped)

    def close(self) -> None:
        """Check that every cell of the row was pulled."""
        if self._left:
            raise ContractViolation(
                f"The row must be fully drained ({self._left} cell(s) left)"
            )

    def __enter__(self) -> "RowCursor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()


class TailView:
    """Hands out body rows one at a time through ``row()``."""

    def __init__(self, slot: CursorSlot) -> None:
        self._slot = slot
        self._cursor: Optional[TokenCursor] = None
        self._current: Optional[RowCursor] = None

    def row(self) -> Optional[RowCursor]:
        """Return the next body row, or ``None`` once the input is exhausted."""
        if self._current is not None:
            self._current.close()
            self._current = None

        if self._cursor is None:
            self._cursor = self._slot.claim(SlotState.TAIL)
        cursor = self._cursor

        if cursor.column_count == 0:
            # Nothing to fill; read the rest so malformed input still surfaces.
            while cursor.next() is not None:
                pass
            return None

        if cursor.peek() is None:
            return None

        self._current = RowCursor(cursor)
        return self._current

    def rows(self) -> Iterator[RowCursor]:
        """Yield successive ``row()`` results until the input is exhausted."""
        while (row := self.row()) is not None:
            yield row


class RowSplitter:
    """Wraps a token stream and splits it into header and tail views."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._slot = CursorSlot(TokenCursor(tokens))
        self._split = False

    def split(self) -> Tuple[HeaderView, TailView]:
        if self._split:
            raise ContractViolation("split() may only be called once")
        self._split = True
        return HeaderView(self._slot), TailView(self._slot)


__all__ = [
    "CursorSlot",
    "HeaderView",
    "RowCursor",
    "RowSplitter",
    "SlotState",
    "TailView",
    "TokenCursor",
]
