"""Tests for splitting token streams into header and body rows."""

from __future__ import annotations

import pytest

from quoted_table.errors import ContractViolation, MalformedInputError
from quoted_table.rows import RowSplitter, SlotState
from quoted_table.tokenizer import tokenize
from quoted_table.tokens import NEW_LINE, Cell


def cells(*texts):
    return [Cell(text) for text in texts]


def split(tokens):
    header, tail = RowSplitter(tokens).split()
    return list(header), tail


@pytest.mark.smoke
class TestRowSplitter:
    """Normalization of body rows to the header's column count."""

    def test_rows_are_normalized(self):
        tokens = [
            *cells("a", "b", "c"),
            NEW_LINE,
            *cells("0", "1"),
            NEW_LINE,
            *cells("2", "3", "4", "5"),
            NEW_LINE,
            NEW_LINE,
        ]
        head, tail = split(tokens)
        assert head == ["a", "b", "c"]

        assert list(tail.row()) == ["0", "1", ""]
        assert list(tail.row()) == ["2", "3", "4"]
        assert list(tail.row()) == ["", "", ""]
        assert tail.row() is None

    def test_full_row_consumes_its_newline(self):
        head, tail = split(tokenize('"a" "b"\n"1" "2"\n"3" "4"\n'))
        assert head == ["a", "b"]
        assert [list(row) for row in tail.rows()] == [["1", "2"], ["3", "4"]]

    def test_end_of_input_mid_row_pads_with_empty_cells(self):
        head, tail = split(tokenize('"a" "b" "c"\n"1"'))
        assert head == ["a", "b", "c"]
        assert list(tail.row()) == ["1", "", ""]
        assert tail.row() is None

    def test_surplus_cells_are_discarded(self):
        head, tail = split(tokenize('"a"\n"1" "x" "y"\n"2"\n'))
        assert [list(row) for row in tail.rows()] == [["1"], ["2"]]

    def test_header_only(self):
        head, tail = split(tokenize('"a" "b"'))
        assert head == ["a", "b"]
        assert tail.row() is None

    def test_empty_input(self):
        head, tail = split([])
        assert head == []
        assert tail.row() is None

    def test_row_length_tracks_pulled_values(self):
        _, tail = split(tokenize('"a" "b" "c"\n"1"\n'))
        row = tail.row()
        assert len(row) == 3
        assert next(row) == "1"
        assert len(row) == 2
        assert list(row) == ["", ""]
        assert len(row) == 0

    def test_zero_column_header_yields_no_rows(self):
        head, tail = split(tokenize('\n"a" "b"\n'))
        assert head == []
        assert tail.row() is None

    def test_zero_column_header_still_reports_malformed_input(self):
        _, tail = split(tokenize('\n"a" x'))
        with pytest.raises(MalformedInputError) as excinfo:
            tail.row()
        assert excinfo.value.offset == 5

    def test_malformed_input_surfaces_mid_row(self):
        _, tail = split(tokenize('"a" "b"\n"1" ?'))
        row = tail.row()
        assert next(row) == "1"
        with pytest.raises(MalformedInputError):
            next(row)

    def test_with_block_checks_drained_row(self):
        _, tail = split(tokenize('"a" "b"\n"1" "2"\n'))
        with tail.row() as row:
            assert list(row) == ["1", "2"]
        assert tail.row() is None


@pytest.mark.smoke
class TestCursorOwnership:
    """Out-of-order use of the views is a hard failure."""

    def test_tail_before_header(self):
        _, tail = RowSplitter(tokenize('"a"\n"1"\n')).split()
        with pytest.raises(ContractViolation):
            tail.row()

    def test_tail_before_header_is_drained(self):
        header, tail = RowSplitter(tokenize('"a" "b"\n"1"\n')).split()
        assert next(header) == "a"
        with pytest.raises(ContractViolation):
            tail.row()

    def test_header_releases_cursor_when_drained(self):
        splitter = RowSplitter(tokenize('"a"\n'))
        header, _ = splitter.split()
        assert splitter._slot.state is SlotState.HEADER
        assert list(header) == ["a"]
        assert header.drained
        assert splitter._slot.state is SlotState.UNCLAIMED

    def test_header_close_before_drained(self):
        header, _ = RowSplitter(tokenize('"a" "b"\n')).split()
        next(header)
        with pytest.raises(ContractViolation):
            header.close()

    def test_split_twice(self):
        splitter = RowSplitter([])
        splitter.split()
        with pytest.raises(ContractViolation):
            splitter.split()

    def test_next_row_before_previous_is_drained(self):
        _, tail = split(tokenize('"a" "b"\n"1" "2"\n"3" "4"\n'))
        row = tail.row()
        next(row)
        with pytest.raises(ContractViolation):
            tail.row()

    def test_close_undrained_row(self):
        _, tail = split(tokenize('"a" "b"\n"1" "2"\n'))
        row = tail.row()
        with pytest.raises(ContractViolation):
            row.close()

    def test_with_block_on_undrained_row(self):
        _, tail = split(tokenize('"a" "b"\n"1" "2"\n'))
        with pytest.raises(ContractViolation):
            with tail.row() as row:
                next(row)
