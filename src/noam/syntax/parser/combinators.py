"""Combinator algebra.

Every function here takes parsers and returns a new parser. The family of
the result (PureParser or FallibleParser) is computed from the operands'
``always_good`` tags when the combinator is called, so a composite built
only from always-good parts needs no failure branch at all.

Strings are accepted wherever a parser is expected and mean ``literal(s)``.

Failure contract: a composite that fails returns its OWN input cursor,
whatever its sub-parsers consumed before the failure.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from noam.constants import DEFAULT_SEPARATOR
from noam.diagnostics import ErrorTemplate, GrammarError
from noam.syntax.cursor import Cursor
from noam.syntax.parser.base import FallibleParser, Parser, make_parser
from noam.syntax.parser.primitives import literal
from noam.syntax.parser.whitespace import whitespace
from noam.syntax.results import PureResult, Result

__all__ = [
    "RecursiveParser",
    "as_parser",
    "comma_separator",
    "current_cursor",
    "either",
    "enclose",
    "fail",
    "fold_left",
    "join",
    "lookahead",
    "many",
    "many1",
    "map",
    "mapping_of",
    "match",
    "optional",
    "pure",
    "recurse",
    "sequence",
    "sequence_of",
    "test",
    "test_then",
    "try_parse",
    "whitespace_enclose",
]

logger = logging.getLogger(__name__)

type ParserLike = Parser[Any] | str


def as_parser(obj: ParserLike, combinator: str) -> Parser[Any]:
    """Coerce obj to a parser: parsers pass through, strings become literals.

    Raises:
        GrammarError: If obj is neither, or is a Parser subclass that sets no
            always_good tag
    """
    if isinstance(obj, Parser):
        if not isinstance(getattr(type(obj), "always_good", None), bool):
            raise GrammarError(ErrorTemplate.untagged_parser(obj, combinator))
        return obj
    if isinstance(obj, str):
        return literal(obj)
    raise GrammarError(ErrorTemplate.not_a_parser(obj, combinator))


def _names(parsers: tuple[Parser[Any], ...]) -> str:
    return ", ".join(p.name for p in parsers)


# ============================================================================
# CONSTANT PARSERS
# ============================================================================


def pure[T](value: T) -> Parser[T]:
    """Always succeed with value, consuming nothing."""

    def parse_pure(cursor: Cursor) -> PureResult[T]:
        return PureResult(value, cursor)

    return make_parser(parse_pure, always_good=True, name=f"pure({value!r})")


def fail() -> Parser[Any]:
    """Always fail."""

    def parse_fail(cursor: Cursor) -> Result[Any]:
        return Result.failure(cursor)

    return make_parser(parse_fail, always_good=False, name="fail")


def _parse_current_cursor(cursor: Cursor) -> PureResult[Cursor]:
    return PureResult(cursor, cursor)


# The threaded cursor itself, as a value.
current_cursor: Parser[Cursor] = make_parser(
    _parse_current_cursor, always_good=True, name="current_cursor"
)


# ============================================================================
# MAP / EITHER / JOIN
# ============================================================================


def map[T, U](func: Callable[[T], U], p: ParserLike) -> Parser[U]:  # noqa: A001
    """Apply func to p's value on success.

    Same tag and cursor as p; func is never called when p fails.
    """
    inner = as_parser(p, "map")
    label = f"map({getattr(func, '__name__', 'func')}, {inner.name})"

    if inner.always_good:

        def parse_pure_map(cursor: Cursor) -> PureResult[U]:
            result = inner.parse(cursor)
            return PureResult(func(result.value), result.cursor)

        return make_parser(parse_pure_map, always_good=True, name=label)

    def parse_map(cursor: Cursor) -> Result[U]:
        result = inner.parse(cursor)
        if not result.good:
            return Result.failure(cursor)
        return Result.success(func(result.value), result.cursor)

    return make_parser(parse_map, always_good=False, name=label)


def either(*alternatives: ParserLike) -> Parser[Any]:
    """Try alternatives in order from the same cursor; first success wins.

    The result is always-good iff some alternative is. The first always-good
    alternative becomes the unconditional fallback; anything after it can
    never run and is dropped. ``either()`` with no alternatives always fails.

    Example:
        >>> p = either(parse_int, pure(42))
        >>> p("hello").value
        42
    """
    parsers = tuple(as_parser(a, "either") for a in alternatives)
    for index, p in enumerate(parsers):
        if p.always_good:
            if index + 1 < len(parsers):
                logger.warning(
                    "either(): %d alternative(s) after always-good %s are unreachable: %s",
                    len(parsers) - index - 1,
                    p.name,
                    _names(parsers[index + 1 :]),
                )
            parsers = parsers[: index + 1]
            break

    label = f"either({_names(parsers)})"

    if parsers and parsers[-1].always_good:
        fallback = parsers[-1]
        options = parsers[:-1]

        def parse_with_fallback(cursor: Cursor) -> PureResult[Any]:
            for option in options:
                result = option.parse(cursor)
                if result.good:
                    return PureResult(result.value, result.cursor)
            return fallback.parse(cursor)

        return make_parser(parse_with_fallback, always_good=True, name=label)

    def parse_either(cursor: Cursor) -> Result[Any]:
        for option in parsers:
            result = option.parse(cursor)
            if result.good:
                return result
        return Result.failure(cursor)

    return make_parser(parse_either, always_good=False, name=label)


def join(*parsers: ParserLike) -> Parser[Any]:
    """Run parsers in order, threading the cursor; keep the last value.

    Aborts at the first failure. Always-good iff every parser is.
    ``join()`` succeeds with None.
    """
    steps = tuple(as_parser(p, "join") for p in parsers)
    if not steps:
        return pure(None)
    if len(steps) == 1:
        return steps[0]
    label = f"join({_names(steps)})"

    if all(step.always_good for step in steps):

        def parse_pure_join(cursor: Cursor) -> PureResult[Any]:
            result: PureResult[Any] = PureResult(None, cursor)
            for step in steps:
                result = step.parse(result.cursor)
            return result

        return make_parser(parse_pure_join, always_good=True, name=label)

    def parse_join(cursor: Cursor) -> Result[Any]:
        current = cursor
        value: Any = None
        for step in steps:
            result = step.parse(current)
            if not result.good:
                return Result.failure(cursor)
            value, current = result.value, result.cursor
        return Result.success(value, current)

    return make_parser(parse_join, always_good=False, name=label)


# Alias: "parse A, then B" reads better as sequence(A, B) in some grammars.
sequence = join


def match(*parsers: ParserLike) -> Parser[None]:
    """Like join, but the value is None."""
    return map(_discard, join(*parsers))


def _discard(_value: object) -> None:
    return None


def enclose[T](prefix: ParserLike, p: Parser[T] | str, postfix: ParserLike) -> Parser[T]:
    """Run prefix, p, postfix in order; keep only p's value.

    Example:
        >>> enclose("(", parse_int, ")")("(42)").value
        42
    """
    before = as_parser(prefix, "enclose")
    inner = as_parser(p, "enclose")
    after = as_parser(postfix, "enclose")
    label = f"enclose({before.name}, {inner.name}, {after.name})"

    if before.always_good and inner.always_good and after.always_good:

        def parse_pure_enclose(cursor: Cursor) -> PureResult[T]:
            middle = inner.parse(before.parse(cursor).cursor)
            return PureResult(middle.value, after.parse(middle.cursor).cursor)

        return make_parser(parse_pure_enclose, always_good=True, name=label)

    def parse_enclose(cursor: Cursor) -> Result[T]:
        opened = before.parse(cursor)
        if not opened.good:
            return Result.failure(cursor)
        middle = inner.parse(opened.cursor)
        if not middle.good:
            return Result.failure(cursor)
        closed = after.parse(middle.cursor)
        if not closed.good:
            return Result.failure(cursor)
        return Result.success(middle.value, closed.cursor)

    return make_parser(parse_enclose, always_good=False, name=label)


def whitespace_enclose[T](p: Parser[T] | str) -> Parser[T]:
    """Surround p with optional whitespace on both sides."""
    return enclose(whitespace, p, whitespace)


# ============================================================================
# PROBES
# ============================================================================


def lookahead[T](p: Parser[T] | str) -> Parser[T]:
    """Run p but leave the cursor where it was; same tag and value as p."""
    inner = as_parser(p, "lookahead")

    def parse_lookahead(cursor: Cursor) -> Any:
        return inner.parse(cursor).with_cursor(cursor)

    return make_parser(
        parse_lookahead, always_good=inner.always_good, name=f"lookahead({inner.name})"
    )


def try_parse[T](p: Parser[T] | str) -> Parser[T | None]:
    """Always succeed: p's value and cursor on success, None otherwise.

    None is also what a successful p producing None looks like; use
    ``test`` or ``optional`` with a sentinel when the two must differ.
    """
    return optional(p, None)


def optional[T, D](p: Parser[T] | str, default: D = None) -> Parser[T | D]:  # type: ignore[assignment]
    """Always succeed: p's value and cursor on success, default otherwise."""
    inner = as_parser(p, "optional")

    def parse_optional(cursor: Cursor) -> PureResult[T | D]:
        result = inner.parse(cursor)
        if result.good:
            return PureResult(result.value, result.cursor)
        return PureResult(default, cursor)

    return make_parser(parse_optional, always_good=True, name=f"optional({inner.name})")


def test(p: ParserLike) -> Parser[bool]:
    """Always succeed: True (advancing) if p matched, False otherwise."""
    inner = as_parser(p, "test")

    def parse_test(cursor: Cursor) -> PureResult[bool]:
        result = inner.parse(cursor)
        if result.good:
            return PureResult(True, result.cursor)
        return PureResult(False, cursor)

    return make_parser(parse_test, always_good=True, name=f"test({inner.name})")


# Not a pytest test function.
test.__test__ = False  # type: ignore[attr-defined]


def test_then[T](p: Parser[T] | str, callback: Callable[[T], object]) -> Parser[bool]:
    """Like test, but call callback with p's value when p matches."""
    inner = as_parser(p, "test_then")

    def parse_test_then(cursor: Cursor) -> PureResult[bool]:
        result = inner.parse(cursor)
        if result.good:
            callback(result.value)
            return PureResult(True, result.cursor)
        return PureResult(False, cursor)

    return make_parser(parse_test_then, always_good=True, name=f"test_then({inner.name})")


test_then.__test__ = False  # type: ignore[attr-defined]


# ============================================================================
# REPETITION
# ============================================================================


def _require_fallible(p: Parser[Any], combinator: str) -> None:
    if p.always_good:
        raise GrammarError(ErrorTemplate.repetition_never_fails(combinator))


def _check_progress(before: Cursor, after: Cursor, combinator: str) -> None:
    if after.begin == before.begin:
        raise GrammarError(ErrorTemplate.repetition_no_progress(combinator, before.begin))


def fold_left[A, T](
    initial: Parser[A] | str,
    rest: Parser[T] | str,
    op: Callable[[A, T], A],
) -> Parser[A]:
    """Left fold over repeated matches.

    Parse ``initial`` for the starting accumulator, then parse ``rest`` as
    many times as it matches, combining with ``acc = op(acc, value)``. Stops
    without failing at the first failure of ``rest``; fails only if
    ``initial`` fails. Same tag as ``initial``.

    Example:
        >>> total = fold_left(parse_int, join(comma_separator, parse_int), operator.add)
        >>> total("1, 2, 3 rest").value
        6

    Raises:
        GrammarError: If rest can never fail (when built), or matches
            without consuming input (when parsing)
    """
    first = as_parser(initial, "fold_left")
    step = as_parser(rest, "fold_left")
    _require_fallible(step, "fold_left")
    label = f"fold_left({first.name}, {step.name})"

    def run(start: Cursor, acc: A) -> tuple[A, Cursor]:
        current = start
        while True:
            result = step.parse(current)
            if not result.good:
                return acc, current
            _check_progress(current, result.cursor, "fold_left")
            acc = op(acc, result.value)
            current = result.cursor

    if first.always_good:

        def parse_pure_fold(cursor: Cursor) -> PureResult[A]:
            head = first.parse(cursor)
            acc, current = run(head.cursor, head.value)
            return PureResult(acc, current)

        return make_parser(parse_pure_fold, always_good=True, name=label)

    def parse_fold(cursor: Cursor) -> Result[A]:
        head = first.parse(cursor)
        if not head.good:
            return Result.failure(cursor)
        acc, current = run(head.cursor, head.value)
        return Result.success(acc, current)

    return make_parser(parse_fold, always_good=False, name=label)


def _collect[T](elem: Parser[T], cursor: Cursor, combinator: str) -> tuple[list[T], Cursor]:
    items: list[T] = []
    current = cursor
    while True:
        result = elem.parse(current)
        if not result.good:
            return items, current
        _check_progress(current, result.cursor, combinator)
        items.append(result.value)
        current = result.cursor


def many[T](p: Parser[T] | str) -> Parser[list[T]]:
    """Zero or more matches of p, as a list. Always-good.

    Raises:
        GrammarError: If p can never fail
    """
    elem = as_parser(p, "many")
    _require_fallible(elem, "many")

    def parse_many(cursor: Cursor) -> PureResult[list[T]]:
        items, current = _collect(elem, cursor, "many")
        return PureResult(items, current)

    return make_parser(parse_many, always_good=True, name=f"many({elem.name})")


def many1[T](p: Parser[T] | str) -> Parser[list[T]]:
    """One or more matches of p, as a list."""
    elem = as_parser(p, "many1")
    _require_fallible(elem, "many1")

    def parse_many1(cursor: Cursor) -> Result[list[T]]:
        items, current = _collect(elem, cursor, "many1")
        if not items:
            return Result.failure(cursor)
        return Result.success(items, current)

    return make_parser(parse_many1, always_good=False, name=f"many1({elem.name})")


# ============================================================================
# SEPARATED SEQUENCES
# ============================================================================


def _separator(sep: ParserLike) -> Parser[Any]:
    """Strings become whitespace-enclosed literals."""
    if isinstance(sep, str):
        return whitespace_enclose(literal(sep))
    return as_parser(sep, "sequence_of")


def _opening(token: ParserLike | None) -> Parser[Any] | None:
    if token is None:
        return None
    if isinstance(token, str):
        return join(literal(token), whitespace)
    return as_parser(token, "sequence_of")


def _closing(token: ParserLike | None) -> Parser[Any] | None:
    if token is None:
        return None
    if isinstance(token, str):
        return join(whitespace, literal(token))
    return as_parser(token, "sequence_of")


def sequence_of[T](
    elem: Parser[T] | str,
    sep: ParserLike = DEFAULT_SEPARATOR,
    open: ParserLike | None = None,  # noqa: A002
    close: ParserLike | None = None,
) -> Parser[list[T]]:
    """Zero or more elem separated by sep, optionally bracketed.

    String separators and brackets match with optional whitespace around
    them. A separator that is not followed by an element is not consumed.
    Without brackets the parser is always-good (an empty list is a match);
    with brackets it fails unless both brackets are present.

    Example:
        >>> sequence_of(parse_int)("10, 20, 30, hello").value
        [10, 20, 30]
        >>> sequence_of(parse_int, ",", "[", "]")("[1, 2]").value
        [1, 2]

    Raises:
        GrammarError: If elem and sep can both never fail
    """
    item = as_parser(elem, "sequence_of")
    separator = _separator(sep)
    if item.always_good and separator.always_good:
        raise GrammarError(ErrorTemplate.repetition_never_fails("sequence_of"))
    label = f"sequence_of({item.name})"

    def parse_items(cursor: Cursor) -> PureResult[list[T]]:
        first = item.parse(cursor)
        if not first.good:
            return PureResult([], cursor)
        items = [first.value]
        current = first.cursor
        while True:
            sep_result = separator.parse(current)
            if not sep_result.good:
                break
            next_item = item.parse(sep_result.cursor)
            if not next_item.good:
                break
            _check_progress(current, next_item.cursor, "sequence_of")
            items.append(next_item.value)
            current = next_item.cursor
        return PureResult(items, current)

    items_parser = make_parser(parse_items, always_good=True, name=label)
    before = _opening(open)
    after = _closing(close)
    if before is None and after is None:
        return items_parser
    return enclose(
        before if before is not None else pure(None),
        items_parser,
        after if after is not None else pure(None),
    )


def mapping_of[K, V](
    key: Parser[K] | str,
    value: Parser[V] | str,
    sep: ParserLike = DEFAULT_SEPARATOR,
    open: ParserLike | None = "{",  # noqa: A002
    close: ParserLike | None = "}",
    colon: ParserLike = ":",
) -> Parser[dict[K, V]]:
    """Bracketed key/value members, as a dict.

    Members are ``key colon value`` separated by sep. Later duplicate keys
    overwrite earlier ones.

    Example:
        >>> mapping_of(parse_string, parse_int)('{"a": 1, "b": 2}').value
        {'a': 1, 'b': 2}
    """
    key_parser = as_parser(key, "mapping_of")
    value_parser = as_parser(value, "mapping_of")
    colon_parser = _separator(colon)

    def parse_member(cursor: Cursor) -> Result[tuple[K, V]]:
        k = key_parser.parse(cursor)
        if not k.good:
            return Result.failure(cursor)
        c = colon_parser.parse(k.cursor)
        if not c.good:
            return Result.failure(cursor)
        v = value_parser.parse(c.cursor)
        if not v.good:
            return Result.failure(cursor)
        return Result.success((k.value, v.value), v.cursor)

    member = make_parser(
        parse_member,
        always_good=False,
        name=f"member({key_parser.name}, {value_parser.name})",
    )
    return map(dict, sequence_of(member, sep, open, close))


# Whitespace, ',', whitespace.
comma_separator: Parser[str] = whitespace_enclose(literal(","))


# ============================================================================
# RECURSION
# ============================================================================


@dataclass(frozen=True, slots=True, eq=False)
class RecursiveParser[T](FallibleParser[T]):
    """Self-referential parser: build(self) is re-derived on every parse.

    Depth is bounded only by input nesting and the interpreter's recursion
    limit.
    """

    build: Callable[[Parser[T]], Parser[T]]

    @property
    def name(self) -> str:
        return f"recurse({getattr(self.build, '__name__', 'build')})"

    def parse(self, cursor: Cursor) -> Result[T]:
        grammar = as_parser(self.build(self), "recurse")
        result = grammar.parse(cursor)
        if grammar.always_good:
            return Result.success(result.value, result.cursor)
        return result  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"<parser {self.name}>"


def recurse[T](build: Callable[[Parser[T]], Parser[T]]) -> Parser[T]:
    """Build a recursive grammar as a fixed point.

    build receives the parser being defined and returns its body, which may
    refer to that parser anywhere except as its own first step without
    consuming input (left recursion never terminates).

    Example:
        >>> nested = recurse(lambda self: either(enclose("[", optional(self), "]"), "x"))
        >>> nested("[[x]]").good
        True
    """
    return RecursiveParser(build)
