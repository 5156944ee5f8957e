"""Tests for whitespace leaves."""

from __future__ import annotations

from hypothesis import given

from noam.syntax.cursor import Cursor
from noam.syntax.parser.whitespace import (
    parse_spaces,
    parse_tabs,
    skip_whitespace,
    whitespace,
)
from tests.strategies import whitespace_runs


class TestWhitespace:
    """Whitespace parsers count what they skip."""

    def test_skips_all_whitespace_kinds(self) -> None:
        """Space, tab, newline and carriage return are all skipped."""
        result = whitespace(" \t\r\n x")
        assert result.value == 5
        assert result.cursor.text == "x"

    def test_zero_length_run(self) -> None:
        """No whitespace is still a match."""
        cursor = Cursor("x")
        result = whitespace.parse(cursor)
        assert result.good
        assert result.value == 0
        assert result.cursor is cursor

    def test_other_unicode_spaces_not_skipped(self) -> None:
        """Only the four ASCII whitespace characters count."""
        assert whitespace("\u00a0\u2003x").value == 0

    def test_parse_spaces_stops_at_tab(self) -> None:
        """parse_spaces skips U+0020 only."""
        result = parse_spaces("  \tx")
        assert result.value == 2
        assert result.cursor.text == "\tx"

    def test_parse_tabs(self) -> None:
        """parse_tabs skips tabs only."""
        result = parse_tabs("\t\t x")
        assert result.value == 2
        assert result.cursor.text == " x"

    def test_all_are_always_good(self) -> None:
        """Every whitespace parser carries the always-good tag."""
        assert whitespace.always_good
        assert parse_spaces.always_good
        assert parse_tabs.always_good

    def test_skip_whitespace_helper(self) -> None:
        """skip_whitespace returns the advanced cursor."""
        assert skip_whitespace(Cursor("\n\n  ab")).text == "ab"
        assert skip_whitespace(Cursor("")).is_eof

    @given(run=whitespace_runs)
    def test_counts_generated_runs(self, run: str) -> None:
        """PROPERTY: the value is the length of the leading run."""
        result = whitespace(run + "x")
        assert result.value == len(run)
        assert result.cursor.text == "x"
