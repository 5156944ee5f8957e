"""Tests for the exception hierarchy and message templates."""

from __future__ import annotations

import pytest

from noam.diagnostics import (
    DepthLimitExceededError,
    ErrorTemplate,
    FailedResultAccessError,
    GrammarError,
    NoamError,
    ParseFailedError,
    SequenceReuseError,
)
from noam.syntax.cursor import Cursor


class TestHierarchy:
    """Every noam error is also the matching builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (GrammarError, TypeError),
            (FailedResultAccessError, ValueError),
            (SequenceReuseError, RuntimeError),
            (DepthLimitExceededError, RecursionError),
            (ParseFailedError, ValueError),
        ],
    )
    def test_subclasses(self, error: type[Exception], builtin: type[Exception]) -> None:
        """Each error derives from NoamError and a builtin."""
        assert issubclass(error, NoamError)
        assert issubclass(error, builtin)

    def test_parse_failed_carries_remaining(self) -> None:
        """ParseFailedError keeps the cursor where recognition stopped."""
        rest = Cursor("abc", 1)
        error = ParseFailedError("boom", rest)
        assert error.remaining is rest
        assert str(error) == "boom"


class TestErrorTemplate:
    """Message wording."""

    def test_not_a_parser(self) -> None:
        """Names the combinator and the offending type."""
        msg = ErrorTemplate.not_a_parser(42, "either")
        assert msg == "either() expects parsers, got int: 42"

    def test_untagged_parser(self) -> None:
        """Points the user at the two parser families."""
        msg = ErrorTemplate.untagged_parser(object(), "join")
        assert msg.startswith("join() got object, a Parser with no always_good tag")
        assert "FallibleParser or PureParser" in msg

    def test_repetition_messages(self) -> None:
        """Both repetition errors explain the loop would not end."""
        assert "never terminate" in ErrorTemplate.repetition_never_fails("many")
        msg = ErrorTemplate.repetition_no_progress("many", 7)
        assert "without consuming input" in msg
        assert "position 7" in msg

    def test_parse_failed_excerpt(self) -> None:
        """Long remainders are truncated in messages."""
        msg = ErrorTemplate.parse_failed("JSON", 2, 5, "x" * 100)
        assert msg.startswith("2:5: Failed to parse JSON at ")
        assert msg.endswith("...")
        assert "x" * 33 not in msg

    def test_trailing_input(self) -> None:
        """Short remainders are quoted whole."""
        msg = ErrorTemplate.trailing_input("number", 1, 3, " ab")
        assert msg == "1:3: Unexpected trailing input after number: ' ab'"

    def test_source_too_large(self) -> None:
        """Sizes are formatted with thousands separators."""
        msg = ErrorTemplate.source_too_large(2_000_000, 1_000_000, "JsonParser")
        assert "2,000,000" in msg
        assert "JsonParser constructor" in msg

    def test_simple_templates(self) -> None:
        """Remaining one-line templates."""
        assert ErrorTemplate.unexpected_eof(4) == "Unexpected EOF at position 4"
        assert "check result.good" in ErrorTemplate.failed_result_value()
        assert "(9)" in ErrorTemplate.depth_exceeded(9)
        assert "'r'" in ErrorTemplate.sequence_already_run("r")
        assert ErrorTemplate.unknown_locale("xx_YY") == "Unknown locale 'xx_YY'"
