"""Exception types raised by the quoted table pipeline."""

from __future__ import annotations


class TableError(RuntimeError):
    """Base class for every error raised by ``quoted_table``."""


class MalformedInputError(TableError):
    """Raised when the input holds an unquoted character or an unterminated cell.

    Attributes:
        offset: UTF-8 byte offset of the offending character, or of the
            opening quote for an unterminated cell.
    """

    def __init__(self, offset: int) -> None:
        super().__init__(f"parse error at {offset}")
        self.offset = offset


class ContractViolation(TableError):
    """Raised when pipeline components are driven out of order.

    This signals a wiring bug, never bad input.
    """


__all__ = ["TableError", "MalformedInputError", "ContractViolation"]
