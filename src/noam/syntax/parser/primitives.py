"""Leaf parsers for primitive tokens.

Each leaf satisfies the parser contract: it returns a Result or PureResult
and never consumes input on failure. Numeric leaves match with compiled
patterns against the cursor's window (``pattern.match(source, begin, end)``)
so no slice of the input is copied until the token is converted.

Number syntax follows C++ ``from_chars``: an optional leading minus, no
leading plus, and for floats an optional fraction and exponent.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from noam.constants import HEX_DIGITS
from noam.syntax.cursor import Cursor
from noam.syntax.parser.base import FnParser, PureFnParser, parser, pure_parser
from noam.syntax.results import PureResult, Result

__all__ = [
    "any_char",
    "count_chars",
    "delimited",
    "end_of_input",
    "literal",
    "literal_constant",
    "one_of",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_line",
    "parse_string",
    "regex",
    "zero_or_more_chars",
]

_INT_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

# Single-character escapes recognised inside quoted strings.
_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


# ============================================================================
# LITERALS
# ============================================================================


def literal(text: str) -> FnParser[str]:
    """Match text exactly; the value is the matched text.

    Example:
        >>> literal("null")("null, x").cursor.text
        ', x'
    """

    def parse_literal(cursor: Cursor) -> Result[str]:
        rest = cursor.expect(text) if text else cursor
        if rest is None:
            return Result.failure(cursor)
        return Result.success(text, rest)

    return FnParser(parse_literal, repr(text))


def literal_constant[T](value: T, text: str) -> FnParser[T]:
    """Match text exactly and produce value (e.g. ``"null"`` -> None)."""

    def parse_constant(cursor: Cursor) -> Result[T]:
        rest = cursor.expect(text)
        if rest is None:
            return Result.failure(cursor)
        return Result.success(value, rest)

    return FnParser(parse_constant, f"{text!r}->{value!r}")


def one_of(chars: str) -> FnParser[str]:
    """Match one character from chars; the value is that character."""

    def parse_one_of(cursor: Cursor) -> Result[str]:
        ch = cursor.peek()
        if ch is None or ch not in chars:
            return Result.failure(cursor)
        return Result.success(ch, cursor.advance())

    return FnParser(parse_one_of, f"one_of({chars!r})")


@parser
def any_char(cursor: Cursor) -> Result[str]:
    """Match any single character."""
    if cursor.is_eof:
        return Result.failure(cursor)
    return Result.success(cursor.current, cursor.advance())


@parser
def end_of_input(cursor: Cursor) -> Result[None]:
    """Succeed (consuming nothing) only at end of input."""
    if cursor.is_eof:
        return Result.success(None, cursor)
    return Result.failure(cursor)


def zero_or_more_chars(char: str) -> PureFnParser[int]:
    """Skip a run of char; the value is the run length (possibly 0)."""
    return count_chars(char)


def count_chars(chars: str) -> PureFnParser[int]:
    """Skip a run of characters from chars; the value is the run length."""

    def parse_run(cursor: Cursor) -> PureResult[int]:
        rest = cursor.skip_chars(chars)
        return PureResult(rest.begin - cursor.begin, rest)

    return PureFnParser(parse_run, f"count_chars({chars!r})")


def regex(pattern: str | re.Pattern[str], flags: int = 0) -> FnParser[Cursor]:
    """Match a regular expression anchored at the cursor.

    The value is a Cursor over the matched span. A pattern that can match
    the empty string succeeds without consuming input.
    """
    compiled = re.compile(pattern, flags) if isinstance(pattern, str) else pattern

    def parse_regex(cursor: Cursor) -> Result[Cursor]:
        m = compiled.match(cursor.source, cursor.begin, cursor.end)
        if m is None:
            return Result.failure(cursor)
        width = m.end() - cursor.begin
        return Result.success(cursor.substr(0, width), cursor.advance(width))

    return FnParser(parse_regex, f"regex({compiled.pattern!r})")


# ============================================================================
# NUMBERS AND BOOLEANS
# ============================================================================


@parser
def parse_int(cursor: Cursor) -> Result[int]:
    """Parse a decimal integer: optional '-', then ASCII digits.

    Example:
        >>> r = parse_int("-42abc")
        >>> r.value, r.cursor.text
        (-42, 'abc')
    """
    m = _INT_PATTERN.match(cursor.source, cursor.begin, cursor.end)
    if m is None:
        return Result.failure(cursor)
    try:
        value = int(m.group())
    except ValueError:
        # Digit run longer than sys.get_int_max_str_digits()
        return Result.failure(cursor)
    return Result.success(value, cursor.advance(m.end() - cursor.begin))


@parser
def parse_float(cursor: Cursor) -> Result[float]:
    """Parse a floating point number.

    Accepts an optional '-', digits with an optional fraction, an optional
    exponent, and the special values inf, infinity and nan.
    """
    m = _FLOAT_PATTERN.match(cursor.source, cursor.begin, cursor.end)
    if m is None:
        return Result.failure(cursor)
    return Result.success(float(m.group()), cursor.advance(m.end() - cursor.begin))


@parser
def parse_bool(cursor: Cursor) -> Result[bool]:
    """Parse ``true`` or ``false``."""
    if (rest := cursor.expect("true")) is not None:
        return Result.success(True, rest)
    if (rest := cursor.expect("false")) is not None:
        return Result.success(False, rest)
    return Result.failure(cursor)


# ============================================================================
# STRINGS, VIEWS AND LINES
# ============================================================================


def _unicode_escape(source: str, pos: int, end: int) -> tuple[str, int] | None:
    """Decode the 4 hex digits of a \\u escape starting at pos.

    A high surrogate followed by a \\u low surrogate is combined into one
    code point. Returns (character, position after escape) or None.
    """
    digits = source[pos : pos + 4]
    if pos + 4 > end or len(digits) != 4 or any(d not in HEX_DIGITS for d in digits):
        return None
    code = int(digits, 16)
    pos += 4
    if 0xD800 <= code <= 0xDBFF and source.startswith("\\u", pos, end):
        low_digits = source[pos + 2 : pos + 6]
        if pos + 6 <= end and all(d in HEX_DIGITS for d in low_digits):
            low = int(low_digits, 16)
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)), pos + 6
    return chr(code), pos


@parser
def parse_string(cursor: Cursor) -> Result[str]:
    """Parse a double-quoted string and decode its escapes.

    Recognised escapes: \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX.
    An unknown escape or a missing closing quote fails the parse.

    Example:
        >>> parse_string('"a\\\\tb" rest').value
        'a\\tb'
    """
    source, end = cursor.source, cursor.end
    if not cursor.starts_with('"'):
        return Result.failure(cursor)
    pos = cursor.begin + 1
    chunks: list[str] = []
    chunk_start = pos
    while pos < end:
        ch = source[pos]
        if ch == '"':
            chunks.append(source[chunk_start:pos])
            rest = Cursor(source, pos + 1, end)
            return Result.success("".join(chunks), rest)
        if ch != "\\":
            pos += 1
            continue
        chunks.append(source[chunk_start:pos])
        if pos + 1 >= end:
            return Result.failure(cursor)
        esc = source[pos + 1]
        if esc == "u":
            decoded = _unicode_escape(source, pos + 2, end)
            if decoded is None:
                return Result.failure(cursor)
            text, pos = decoded
            chunks.append(text)
        elif esc in _ESCAPES:
            chunks.append(_ESCAPES[esc])
            pos += 2
        else:
            return Result.failure(cursor)
        chunk_start = pos
    return Result.failure(cursor)


def delimited(begin: str, end: str, escape: str | None = "\\") -> FnParser[Cursor]:
    """Match begin ... end and produce a view of the raw text in between.

    Nothing is decoded: an escape character only stops the following
    character from closing the view.

    Args:
        begin: Opening delimiter
        end: Closing delimiter
        escape: Escape character, or None for no escaping

    Example:
        >>> delimited("'", "'")("'it\\\\'s' x").value.text
        "it\\\\'s"
    """

    def parse_delimited(cursor: Cursor) -> Result[Cursor]:
        start = cursor.expect(begin)
        if start is None:
            return Result.failure(cursor)
        source, pos, stop = cursor.source, start.begin, cursor.end
        while pos < stop:
            if escape and source.startswith(escape, pos, stop):
                pos += len(escape) + 1
                continue
            if source.startswith(end, pos, stop):
                content = Cursor(source, start.begin, pos)
                return Result.success(content, Cursor(source, pos + len(end), stop))
            pos += 1
        return Result.failure(cursor)

    return FnParser(parse_delimited, f"delimited({begin!r}, {end!r})")


@pure_parser
def parse_line(cursor: Cursor) -> PureResult[Cursor]:
    """Consume one line; the value is a view of it without the line ending.

    The cursor moves past the ``\\n``. A ``\\r`` before it is excluded from
    the view. At end of input the line is whatever remains (possibly empty).
    """
    source, end = cursor.source, cursor.end
    newline = source.find("\n", cursor.begin, end)
    if newline < 0:
        return PureResult(cursor, Cursor(source, end, end))
    line_end = newline
    if line_end > cursor.begin and source[line_end - 1] == "\r":
        line_end -= 1
    line = Cursor(source, cursor.begin, line_end)
    return PureResult(line, Cursor(source, newline + 1, end))

