"""Parse result types.

Every parser invocation returns one of two flat, frozen result types:

- ``Result[T]``: may fail. ``good`` tells which; ``value`` exists only when
  good; ``cursor`` is the remaining input (the input cursor on failure).
- ``PureResult[T]``: cannot fail. ``good`` is always True and its mere
  existence is the success proof.

The class-level ``always_good`` tag is what composite parsers read to decide
whether they need a failure branch at all.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

from noam.diagnostics import ErrorTemplate, FailedResultAccessError
from noam.syntax.cursor import Cursor

__all__ = ["AnyResult", "PureResult", "Result"]


@dataclass(frozen=True, slots=True)
class Result[T]:
    """Outcome of a parser that may fail.

    Construct with Result.success() or Result.failure().

    Example:
        >>> ok = Result.success(42, Cursor("rest"))
        >>> ok.good, ok.value, ok.cursor.text
        (True, 42, 'rest')
        >>> bad = Result.failure(Cursor("input"))
        >>> bool(bad)
        False
        >>> bad.value
        Traceback (most recent call last):
        ...
        noam.diagnostics.errors.FailedResultAccessError: Failed result has no value; ...
    """

    good: bool
    cursor: Cursor
    _value: T | None = field(default=None, repr=False)

    always_good: ClassVar[bool] = False

    @classmethod
    def success(cls, value: T, cursor: Cursor) -> Result[T]:
        """Successful result carrying value, with cursor after consumption."""
        return cls(True, cursor, value)

    @classmethod
    def failure(cls, cursor: Cursor) -> Result[Any]:
        """Failed result. cursor must be the parser's input cursor."""
        return cls(False, cursor)

    @property
    def value(self) -> T:
        """Parsed value.

        Raises:
            FailedResultAccessError: If the result is a failure
        """
        if not self.good:
            raise FailedResultAccessError(ErrorTemplate.failed_result_value())
        return self._value  # type: ignore[return-value]

    def get[D](self, default: D = None) -> T | D:  # type: ignore[assignment]
        """Return value when good, default otherwise."""
        return self._value if self.good else default  # type: ignore[return-value]

    def with_cursor(self, cursor: Cursor) -> Result[T]:
        """Same outcome and value, different cursor (lookahead reset)."""
        return Result(self.good, cursor, self._value)

    def __bool__(self) -> bool:
        return self.good


@dataclass(frozen=True, slots=True)
class PureResult[T]:
    """Outcome of a parser that cannot fail.

    Attributes:
        value: Parsed value
        cursor: Remaining input after consumption
    """

    value: T
    cursor: Cursor

    always_good: ClassVar[bool] = True

    @property
    def good(self) -> Literal[True]:
        """Always True."""
        return True

    def get[D](self, default: D = None) -> T:  # type: ignore[assignment]  # noqa: ARG002
        """Return value (default is accepted for symmetry with Result.get)."""
        return self.value

    def with_cursor(self, cursor: Cursor) -> PureResult[T]:
        """Same value, different cursor (lookahead reset)."""
        return PureResult(self.value, cursor)

    def to_result(self) -> Result[T]:
        """Widen to a fallible Result (for composites that may fail)."""
        return Result.success(self.value, self.cursor)

    def __bool__(self) -> bool:
        return True


type AnyResult[T] = Result[T] | PureResult[T]
