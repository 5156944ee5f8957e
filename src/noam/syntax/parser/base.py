"""Parser contract and the always-good tag.

A parser is an immutable object whose ``parse(cursor)`` maps a Cursor to a
Result (may fail) or a PureResult (cannot fail). Which one is a property of
the parser's CLASS, chosen once when the parser is built:

- FallibleParser: ``always_good = False``, returns Result
- PureParser: ``always_good = True``, returns PureResult

Leaf parsers are plain functions certified by one decorator each
(``@parser`` or ``@pure_parser``). Combinators compute the tag of what they
build from the tags of their operands and pick the family accordingly.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from noam.diagnostics import ErrorTemplate, GrammarError, ParseFailedError
from noam.syntax.cursor import Cursor

if TYPE_CHECKING:
    from noam.syntax.results import PureResult, Result

__all__ = [
    "FallibleParser",
    "FnParser",
    "Parser",
    "PureFnParser",
    "PureParser",
    "is_always_good",
    "make_parser",
    "parse_all",
    "parser",
    "pure_parser",
]


class Parser[T](ABC):
    """Base class of every parser.

    Subclasses set the class-level ``always_good`` tag by deriving from
    FallibleParser or PureParser and implement ``parse``.

    Operators:
        ``a | b`` builds either(a, b)
        ``a >> b`` builds join(a, b)
    """

    __slots__ = ()

    always_good: ClassVar[bool]

    @property
    def name(self) -> str:
        """Human-readable name for logs and reprs."""
        return type(self).__name__

    @abstractmethod
    def parse(self, cursor: Cursor) -> Result[T] | PureResult[T]:
        """Run the parser on cursor.

        On failure the returned cursor is the input cursor, unchanged.
        """

    def __call__(self, source: str | Cursor) -> Result[T] | PureResult[T]:
        """Run the parser on a string or a cursor."""
        if isinstance(source, str):
            source = Cursor(source)
        return self.parse(source)

    def map[U](self, func: Callable[[T], U]) -> Parser[U]:
        """Method form of combinators.map(func, self)."""
        from .combinators import map as map_  # noqa: PLC0415 - circular

        return map_(func, self)

    def __or__(self, other: Parser[Any] | str) -> Parser[Any]:
        from .combinators import either  # noqa: PLC0415 - circular

        return either(self, other)

    def __ror__(self, other: str) -> Parser[Any]:
        from .combinators import either  # noqa: PLC0415 - circular

        return either(other, self)

    def __rshift__(self, other: Parser[Any] | str) -> Parser[Any]:
        from .combinators import join  # noqa: PLC0415 - circular

        return join(self, other)

    def __rrshift__(self, other: str) -> Parser[Any]:
        from .combinators import join  # noqa: PLC0415 - circular

        return join(other, self)


class FallibleParser[T](Parser[T]):
    """Parser that may fail; returns Result."""

    __slots__ = ()

    always_good: ClassVar[bool] = False

    @abstractmethod
    def parse(self, cursor: Cursor) -> Result[T]: ...


class PureParser[T](Parser[T]):
    """Parser that never fails; returns PureResult."""

    __slots__ = ()

    always_good: ClassVar[bool] = True

    @abstractmethod
    def parse(self, cursor: Cursor) -> PureResult[T]: ...


@dataclass(frozen=True, slots=True, eq=False)
class FnParser[T](FallibleParser[T]):
    """Fallible parser backed by a function Cursor -> Result."""

    fn: Callable[[Cursor], Result[T]]
    label: str

    @property
    def name(self) -> str:
        return self.label

    def parse(self, cursor: Cursor) -> Result[T]:
        return self.fn(cursor)

    def __repr__(self) -> str:
        return f"<parser {self.label}>"


@dataclass(frozen=True, slots=True, eq=False)
class PureFnParser[T](PureParser[T]):
    """Always-good parser backed by a function Cursor -> PureResult."""

    fn: Callable[[Cursor], PureResult[T]]
    label: str

    @property
    def name(self) -> str:
        return self.label

    def parse(self, cursor: Cursor) -> PureResult[T]:
        return self.fn(cursor)

    def __repr__(self) -> str:
        return f"<pure parser {self.label}>"


def make_parser(
    fn: Callable[[Cursor], Any], *, always_good: bool, name: str | None = None
) -> Parser[Any]:
    """Wrap fn in the parser family selected by always_good."""
    label = name or getattr(fn, "__name__", "parser")
    if always_good:
        return PureFnParser(fn, label)
    return FnParser(fn, label)


def parser[T](fn: Callable[[Cursor], Result[T]]) -> FnParser[T]:
    """Certify a leaf function as a fallible parser.

    The function must return Result.failure(cursor) with its INPUT cursor
    when it does not match.

    Example:
        >>> @parser
        ... def parse_x(cursor: Cursor) -> Result[str]:
        ...     rest = cursor.expect("x")
        ...     if rest is None:
        ...         return Result.failure(cursor)
        ...     return Result.success("x", rest)
    """
    return FnParser(fn, fn.__name__)


def pure_parser[T](fn: Callable[[Cursor], PureResult[T]]) -> PureFnParser[T]:
    """Certify a leaf function as an always-good parser."""
    return PureFnParser(fn, fn.__name__)


def is_always_good(obj: object) -> bool:
    """Read the static always-good tag of a parser, result, or their class."""
    cls = obj if isinstance(obj, type) else type(obj)
    tag = getattr(cls, "always_good", None)
    if not isinstance(tag, bool):
        raise GrammarError(ErrorTemplate.not_a_parser(obj, "is_always_good"))
    return tag


def parse_all[T](p: Parser[T], source: str | Cursor, *, what: str | None = None) -> T:
    """Run p and require it to consume the whole input.

    Returns:
        The parsed value

    Raises:
        ParseFailedError: If p fails or leaves input unconsumed
    """
    cursor = Cursor(source) if isinstance(source, str) else source
    result = p.parse(cursor)
    label = what or p.name
    if not result.good:
        line, col = cursor.compute_line_col()
        raise ParseFailedError(
            ErrorTemplate.parse_failed(label, line, col, cursor.text), cursor
        )
    rest = result.cursor
    if not rest.empty:
        line, col = rest.compute_line_col()
        raise ParseFailedError(
            ErrorTemplate.trailing_input(label, line, col, rest.text), rest
        )
    return result.value
