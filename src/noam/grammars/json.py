"""JSON grammar built from noam combinators.

    value  := "null" | bool | number | string | array | object
    array  := "[" (value ("," value)*)? "]"
    object := "{" (string ":" value ("," string ":" value)*)? "}"
    json   := ws value ws

Whitespace is allowed around every punctuation token. Numbers are read as
float, whatever their spelling. Duplicate object keys keep the last value.

Module-level ``json_value`` and ``parse_json`` are plain grammars with no
nesting limit. ``JsonParser`` adds the input limits (source size and
nesting depth) an application needs for untrusted documents.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any

from noam.constants import JSON_MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from noam.core.depth_guard import DepthGuard
from noam.diagnostics import ErrorTemplate
from noam.syntax.cursor import Cursor
from noam.syntax.parser.base import Parser, make_parser, parse_all
from noam.syntax.parser.combinators import (
    either,
    mapping_of,
    recurse,
    sequence_of,
    whitespace_enclose,
)
from noam.syntax.parser.primitives import (
    literal_constant,
    parse_bool,
    parse_float,
    parse_string,
)

__all__ = ["JsonParser", "JsonValue", "json_grammar", "json_value", "parse_json"]

logger = logging.getLogger(__name__)

type JsonValue = None | bool | float | str | list[JsonValue] | dict[str, JsonValue]

json_null: Parser[None] = literal_constant(None, "null")


def _depth_limited(container: Parser[Any], opener: str, guard: DepthGuard) -> Parser[Any]:
    """Count one nesting level for each container opening at the cursor.

    The guard is entered only once the opening bracket is in view, so an
    empty array and an empty object cost the same single level.
    """

    def parse_container(cursor: Cursor) -> Any:
        if not cursor.starts_with(opener):
            return container.parse(cursor)
        with guard:
            return container.parse(cursor)

    return make_parser(parse_container, always_good=container.always_good, name=container.name)


def json_grammar(guard: DepthGuard | None = None) -> Parser[JsonValue]:
    """Build the JSON value grammar.

    Args:
        guard: Optional DepthGuard entered once per array/object nesting
            level, counted when the opening bracket matches. Without one,
            depth is bounded only by the interpreter's
            recursion limit.

    Returns:
        Parser for one JSON value (no surrounding whitespace)
    """

    def build_value(value: Parser[JsonValue]) -> Parser[JsonValue]:
        array = sequence_of(value, ",", "[", "]")
        obj = mapping_of(parse_string, value, ",", "{", "}", ":")
        if guard is not None:
            array = _depth_limited(array, "[", guard)
            obj = _depth_limited(obj, "{", guard)
        return either(json_null, parse_bool, parse_float, parse_string, array, obj)

    return recurse(build_value)


# One JSON value, no surrounding whitespace, no depth limit.
json_value: Parser[JsonValue] = json_grammar()

# A JSON document: one value with optional surrounding whitespace.
parse_json: Parser[JsonValue] = whitespace_enclose(json_value)


class JsonParser:
    """JSON document parser with input limits.

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Configurable max_nesting_depth prevents stack exhaustion via
      deeply nested [[[[ ... ]]]] documents

    Thread Safety:
        A fresh DepthGuard is built for each parse() call, so one instance
        may be shared between threads.

    Attributes:
        max_source_size: Maximum allowed source size in characters
        max_nesting_depth: Maximum allowed array/object nesting depth
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 64).
                              Clamped against the interpreter recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else JSON_MAX_NESTING_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> JsonValue:
        """Parse a complete JSON document.

        Args:
            source: JSON text

        Returns:
            The document as Python values (None, bool, float, str, list, dict)

        Raises:
            ValueError: If source exceeds max_source_size
            ParseFailedError: If source is not a JSON document, or has
                trailing content after the document
            DepthLimitExceededError: If nesting exceeds max_nesting_depth

        Example:
            >>> JsonParser().parse('{"a": [1, 2]}')
            {'a': [1.0, 2.0]}
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            raise ValueError(
                ErrorTemplate.source_too_large(
                    len(source), self._max_source_size, type(self).__name__
                )
            )

        guard = DepthGuard(max_depth=self._max_nesting_depth)
        document = whitespace_enclose(json_grammar(guard))
        value = parse_all(document, source, what="JSON document")
        logger.info("Parsed JSON document (%d characters)", len(source))
        return value
