"""Tests for Result and PureResult."""

from __future__ import annotations

import pytest

from noam.diagnostics import FailedResultAccessError
from noam.syntax.cursor import Cursor
from noam.syntax.parser.base import is_always_good
from noam.syntax.results import PureResult, Result


class TestResult:
    """Fallible results."""

    def test_success_carries_value_and_cursor(self) -> None:
        """success() exposes good, value and the remaining cursor."""
        rest = Cursor("abc", 1)
        result = Result.success(42, rest)
        assert result.good
        assert result.value == 42
        assert result.cursor is rest

    def test_failure_has_no_value(self) -> None:
        """Reading value of a failed result raises."""
        result = Result.failure(Cursor("abc"))
        assert not result.good
        with pytest.raises(FailedResultAccessError, match="check result.good"):
            _ = result.value

    def test_failure_keeps_cursor(self) -> None:
        """A failed result still exposes the cursor it was given."""
        cursor = Cursor("abc", 1)
        assert Result.failure(cursor).cursor is cursor

    def test_bool_follows_good(self) -> None:
        """bool(result) is result.good."""
        assert Result.success(None, Cursor(""))
        assert not Result.failure(Cursor(""))

    def test_success_with_none_value(self) -> None:
        """None is a legitimate value, distinct from failure."""
        result = Result.success(None, Cursor(""))
        assert result.good
        assert result.value is None

    def test_get_with_default(self) -> None:
        """get() returns the value, or the default on failure."""
        assert Result.success(1, Cursor("")).get(9) == 1
        assert Result.failure(Cursor("")).get(9) == 9
        assert Result.failure(Cursor("")).get() is None

    def test_with_cursor_keeps_outcome(self) -> None:
        """with_cursor swaps the cursor and keeps good/value."""
        original = Cursor("abc")
        moved = Result.success("x", original.advance(2)).with_cursor(original)
        assert moved.good
        assert moved.value == "x"
        assert moved.cursor.pos == 0
        assert not Result.failure(original).with_cursor(original.advance()).good

    def test_result_is_fallible(self) -> None:
        """Result carries the fallible tag."""
        assert Result.always_good is False
        assert not is_always_good(Result.success(1, Cursor("")))


class TestPureResult:
    """Always-good results."""

    def test_pure_result_is_always_good(self) -> None:
        """good is always True and the tag is always-good."""
        result = PureResult(3, Cursor("x"))
        assert result.good is True
        assert bool(result)
        assert PureResult.always_good is True
        assert is_always_good(result)

    def test_get_ignores_default(self) -> None:
        """get() always returns the value."""
        assert PureResult(3, Cursor("")).get(9) == 3

    def test_with_cursor(self) -> None:
        """with_cursor keeps the value."""
        result = PureResult("v", Cursor("abc", 2)).with_cursor(Cursor("abc"))
        assert isinstance(result, PureResult)
        assert result.value == "v"
        assert result.cursor.pos == 0

    def test_to_result_widens(self) -> None:
        """to_result converts to a successful Result."""
        widened = PureResult(5, Cursor("r")).to_result()
        assert isinstance(widened, Result)
        assert widened.good
        assert widened.value == 5

    def test_results_are_frozen(self) -> None:
        """Results cannot be mutated."""
        result = PureResult(1, Cursor(""))
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]
