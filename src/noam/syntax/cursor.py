"""Immutable cursor over a source string.

A Cursor is a view: the caller's string plus a [begin, end) window into it.
Parsers never copy the source; they hand each other new cursors with a moved
``begin``. Only ``text`` (and the slicing helpers) materialise characters.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every advance() returns a NEW cursor (backtracking needs no undo)
    - Out-of-range arguments clamp instead of raising
    - EOF is a state (is_eof), not a return value
    - Line:column computed on-demand (O(n) only for errors)

Equality and Ordering:
    Two cursors are equal iff they denote the same characters, regardless of
    source identity or offsets. Ordering is lexicographic with a shorter
    prefix first. The null cursor denotes no characters, so it equals (and
    sorts with) any empty cursor. Code that needs to know whether a parser
    consumed input compares ``begin`` offsets, never cursors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from noam.diagnostics import ErrorTemplate

__all__ = ["NULL_CURSOR", "Cursor"]

# Longest text shown by Cursor.__repr__.
_REPR_TEXT_LEN: int = 40


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Cursor:
    """Immutable [begin, end) view into a source string.

    Attributes:
        source: The full input string (never copied)
        begin: Offset of the first character in view
        end: Offset one past the last character in view. Negative means
            "to the end of source".
        null: True only for the "not yet run" cursor (see Cursor.null_cursor())

    Example:
        >>> cursor = Cursor("hello world")
        >>> cursor.starts_with("hello")
        True
        >>> cursor.substr(6).text
        'world'
        >>> cursor.advance(100).is_eof  # Clamped, never raises
        True
        >>> Cursor("xxabc", 2) == Cursor("abc")
        True
    """

    source: str
    begin: int = 0
    end: int = -1
    null: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        """Clamp begin and end into 0 <= begin <= end <= len(source)."""
        size = len(self.source)
        end = size if self.end < 0 or self.end > size else self.end
        begin = min(max(self.begin, 0), end)
        if begin != self.begin:
            object.__setattr__(self, "begin", begin)
        if end != self.end:
            object.__setattr__(self, "end", end)

    @classmethod
    def null_cursor(cls) -> Cursor:
        """Return the null cursor ("parser not yet run").

        Distinguished from an empty cursor only by ``is_null``.
        """
        return NULL_CURSOR

    # ------------------------------------------------------------------
    # Size and content
    # ------------------------------------------------------------------

    @property
    def is_null(self) -> bool:
        """True for the null cursor only."""
        return self.null

    @property
    def size(self) -> int:
        """Number of characters in view."""
        return self.end - self.begin

    def __len__(self) -> int:
        return self.end - self.begin

    @property
    def empty(self) -> bool:
        """True when no characters are in view (null cursors are empty)."""
        return self.begin >= self.end

    @property
    def text(self) -> str:
        """Characters in view, as a new string."""
        return self.source[self.begin : self.end]

    @property
    def pos(self) -> int:
        """Offset of the current character in source (alias for begin)."""
        return self.begin

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if no characters remain in view

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.begin >= self.end

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.begin >= self.end:
            raise EOFError(ErrorTemplate.unexpected_eof(self.begin))
        return self.source[self.begin]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if outside the view
        """
        target = self.begin + offset
        if target < self.begin or target >= self.end:
            return None
        return self.source[target]

    def starts_with(self, prefix: str | Cursor) -> bool:
        """Check whether the view starts with prefix.

        Never reads past ``end``: a prefix longer than the view is False.
        """
        if isinstance(prefix, Cursor):
            prefix = prefix.text
        return self.source.startswith(prefix, self.begin, self.end)

    # ------------------------------------------------------------------
    # Derived cursors
    # ------------------------------------------------------------------

    def advance(self, count: int = 1) -> Cursor:
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance, clamped to end (original unchanged)

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos  # New cursor advanced
            1
        """
        return Cursor(self.source, min(self.begin + max(count, 0), self.end), self.end)

    def substr(self, offset: int, count: int | None = None) -> Cursor:
        """Return the sub-view starting offset characters in.

        Args:
            offset: Characters to skip (clamped to size)
            count: Characters to keep (None or past the end keeps the rest)

        Returns:
            New Cursor over the same source
        """
        begin = min(self.begin + max(offset, 0), self.end)
        if count is None:
            return Cursor(self.source, begin, self.end)
        return Cursor(self.source, begin, min(begin + max(count, 0), self.end))

    def until(self, other: Cursor) -> Cursor:
        """Return the view from this cursor up to where other begins.

        Used to recover the span a parser consumed:
        ``start.until(result.cursor)``.
        """
        return Cursor(self.source, self.begin, max(self.begin, min(other.begin, self.end)))

    def expect(self, token: str) -> Cursor | None:
        """Consume token if the view starts with it.

        Args:
            token: Expected text (one or more characters)

        Returns:
            New cursor advanced past token, or None if no match or at EOF

        Example:
            >>> Cursor("hello").expect("he").pos
            2
            >>> Cursor("hello").expect("x") is None
            True
        """
        if token and self.source.startswith(token, self.begin, self.end):
            return Cursor(self.source, self.begin + len(token), self.end)
        return None

    def skip_chars(self, chars: str) -> Cursor:
        """Skip consecutive characters that belong to chars.

        Returns:
            New cursor at the first character not in chars (or EOF)
        """
        source, pos, end = self.source, self.begin, self.end
        while pos < end and source[pos] in chars:
            pos += 1
        if pos == self.begin:
            return self
        return Cursor(source, pos, end)

    def skip_spaces(self) -> Cursor:
        """Skip space characters (U+0020 only)."""
        return self.skip_chars(" ")

    # ------------------------------------------------------------------
    # Slicing helpers
    # ------------------------------------------------------------------

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (clamped)."""
        return self.source[self.begin : min(end_pos, self.end)]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.
        """
        return self.source[self.begin : min(self.begin + n, self.end)]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!
        """
        line = self.source.count("\n", 0, self.begin) + 1
        last_newline = self.source.rfind("\n", 0, self.begin)
        col = self.begin - last_newline if last_newline >= 0 else self.begin + 1
        return (line, col)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        if self.end - self.begin != other.end - other.begin:
            return False
        return self.text == other.text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.text < other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self) -> str:
        if self.null:
            return "Cursor.null_cursor()"
        text = self.text
        if len(text) > _REPR_TEXT_LEN:
            text = text[:_REPR_TEXT_LEN] + "..."
        return f"Cursor({text!r}, begin={self.begin}, end={self.end})"


NULL_CURSOR: Cursor = Cursor("", 0, 0, null=True)
