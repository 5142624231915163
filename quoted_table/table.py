"""Table model that accumulates rows and renders the bordered text."""

from __future__ import annotations

from collections.abc import Sized
from typing import Iterable, Iterator, List, Tuple

from .errors import ContractViolation


class Table:
    """Column-aligned table built from a header and zero or more body rows.

    Cells are kept in one row-major list, header first, so that
    ``len(cells) == column_count * (1 + body_row_count)`` always holds.
    Column widths are measured in code points and only ever grow.
    """

    def __init__(self) -> None:
        self._widths: List[int] = []
        self._cells: List[str] = []
        self._body_rows = 0

    def with_header(self, cells: Iterable[str]) -> "Table":
        """Set the header row, which fixes the column count.

        Args:
            cells: Header cell texts.

        Returns:
            The table itself, so calls can be chained.

        Raises:
            ContractViolation: If the table already holds cells.
        """
        if self._cells:
            raise ContractViolation("The header can only be set on an empty table")
        self._cells = list(cells)
        self._widths = [len(cell) for cell in self._cells]
        return self

    def append_row(self, cells: Iterable[str]) -> "Table":
        """Append one body row and widen columns as needed.

        Args:
            cells: Exactly ``column_count`` cell texts.

        Returns:
            The table itself, so calls can be chained.

        Raises:
            ContractViolation: If the row length differs from the column count.
        """
        if isinstance(cells, Sized) and len(cells) != self.column_count:
            raise ContractViolation(
                f"Row has {len(cells)} cell(s), expected {self.column_count}"
            )
        row = list(cells)
        if len(row) != self.column_count:
            raise ContractViolation(
                f"Row has {len(row)} cell(s), expected {self.column_count}"
            )

        for idx, cell in enumerate(row):
            self._widths[idx] = max(self._widths[idx], len(cell))
        self._cells.extend(row)
        self._body_rows += 1
        return self

    @property
    def column_count(self) -> int:
        return len(self._widths)

    @property
    def body_row_count(self) -> int:
        return self._body_rows

    @property
    def widths(self) -> Tuple[int, ...]:
        return tuple(self._widths)

    @property
    def cells(self) -> Tuple[str, ...]:
        return tuple(self._cells)

    @property
    def header(self) -> Tuple[str, ...]:
        return tuple(self._cells[: self.column_count])

    def body_rows(self) -> Iterator[Tuple[str, ...]]:
        """Yield the body rows in insertion order."""
        n_cols = self.column_count
        if not n_cols:
            return
        for start in range(n_cols, len(self._cells), n_cols):
            yield tuple(self._cells[start : start + n_cols])

    def _format_row(self, row: Iterable[str]) -> str:
        parts = [f"| {cell:<{width}} " for cell, width in zip(row, self._widths)]
        return "".join(parts) + "|\n"

    def render(self, keep_single_row: bool = False) -> str:
        """Render the table as markdown-style bordered text.

        A table holding exactly one body row renders its header line only,
        unless ``keep_single_row`` is set.
        """
        if not self._cells:
            return ""

        lines = [self._format_row(self.header)]
        if self._body_rows == 1 and not keep_single_row:
            return "".join(lines)

        lines.append("".join("|" + "-" * (width + 2) for width in self._widths) + "|\n")
        lines.extend(self._format_row(row) for row in self.body_rows())
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Table(columns={self.column_count}, body_rows={self._body_rows}, "
            f"widths={self._widths!r})"
        )


__all__ = ["Table"]
