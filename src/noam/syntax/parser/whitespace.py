"""Whitespace leaves.

All of these are always-good: a run of zero characters is still a match.
The value of each parser is the number of characters skipped.

Whitespace is space, tab, newline and carriage return (WHITESPACE_CHARS).
"""

from noam.constants import WHITESPACE_CHARS
from noam.syntax.cursor import Cursor
from noam.syntax.parser.base import pure_parser
from noam.syntax.results import PureResult

__all__ = ["parse_spaces", "parse_tabs", "skip_whitespace", "whitespace"]


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip space, tab, newline and carriage return.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)
    """
    return cursor.skip_chars(WHITESPACE_CHARS)


@pure_parser
def whitespace(cursor: Cursor) -> PureResult[int]:
    """Skip whitespace; the value is how many characters were skipped."""
    rest = cursor.skip_chars(WHITESPACE_CHARS)
    return PureResult(rest.begin - cursor.begin, rest)


@pure_parser
def parse_spaces(cursor: Cursor) -> PureResult[int]:
    """Skip spaces (U+0020 only)."""
    rest = cursor.skip_spaces()
    return PureResult(rest.begin - cursor.begin, rest)


@pure_parser
def parse_tabs(cursor: Cursor) -> PureResult[int]:
    """Skip tabs."""
    rest = cursor.skip_chars("\t")
    return PureResult(rest.begin - cursor.begin, rest)
