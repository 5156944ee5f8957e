"""Sequenced parsers: grammar steps written as straight-line code.

A sequenced rule is a zero-argument generator function. Each ``yield p``
runs parser ``p`` on the threaded cursor and evaluates to its value; the
rule's ``return`` value becomes the parser's value:

    @sequenced
    def point():
        x = yield parse_int
        yield ","
        y = yield parse_int
        return (x, y)

If any step fails, the whole rule fails at once with the cursor it was
given, and the generator is closed (``finally`` blocks run). Yielding a
``str`` is shorthand for ``literal(str)``.

Exceptions raised inside the rule propagate to the caller; they are not
converted into parse failures.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, overload

from noam.diagnostics import ErrorTemplate, GrammarError, SequenceReuseError
from noam.syntax.cursor import NULL_CURSOR, Cursor
from noam.syntax.parser.base import FallibleParser, Parser, PureParser
from noam.syntax.parser.combinators import as_parser
from noam.syntax.results import PureResult, Result

__all__ = [
    "PureSequencedParser",
    "RunState",
    "SequenceRun",
    "SequencedParser",
    "sequenced",
]

logger = logging.getLogger(__name__)

type Rule[T] = Callable[[], Generator[Parser[Any] | str, Any, T]]


class RunState(Enum):
    """Lifecycle of one SequenceRun."""

    NOT_STARTED = auto()
    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()


@dataclass(slots=True)
class SequenceRun[T]:
    """One execution of a sequenced rule.

    Holds the generator and the threaded cursor. Single-use: execute() may
    be called once; every parse of a sequenced parser builds a new run.

    Mutability Note:
        Intentionally mutable (not frozen=True): state and cursor advance
        as steps complete. A run is private to one parse call.

    Attributes:
        rule: Rule name (for logs and errors)
        steps: The rule's generator
        always_good: Reject fallible steps when True
        state: Current RunState
        cursor: Threaded cursor; NULL_CURSOR until execute() starts
    """

    rule: str
    steps: Generator[Parser[Any] | str, Any, T]
    always_good: bool = False
    state: RunState = field(default=RunState.NOT_STARTED, init=False)
    cursor: Cursor = field(default=NULL_CURSOR, init=False)

    def execute(self, cursor: Cursor) -> Result[T] | PureResult[T]:
        """Drive the generator from cursor to completion or first failure.

        Raises:
            SequenceReuseError: If this run has already been executed
            GrammarError: If a step is not a parser, or an always-good rule
                yields a fallible step
        """
        if self.state is not RunState.NOT_STARTED:
            raise SequenceReuseError(ErrorTemplate.sequence_already_run(self.rule))
        self.state = RunState.RUNNING
        self.cursor = cursor
        try:
            try:
                step = next(self.steps)
            except StopIteration as stop:
                return self._succeed(stop.value)

            while True:
                step_parser = as_parser(step, self.rule)
                if self.always_good and not step_parser.always_good:
                    raise GrammarError(
                        ErrorTemplate.fallible_step_in_pure_sequence(self.rule, step_parser)
                    )
                result = step_parser.parse(self.cursor)
                if not result.good:
                    self.state = RunState.FAILED
                    if logger.isEnabledFor(logging.DEBUG):
                        line, col = self.cursor.compute_line_col()
                        logger.debug(
                            "Sequenced '%s' failed at %d:%d on step %s",
                            self.rule,
                            line,
                            col,
                            step_parser.name,
                        )
                    return Result.failure(cursor)
                self.cursor = result.cursor
                try:
                    step = self.steps.send(result.value)
                except StopIteration as stop:
                    return self._succeed(stop.value)
        finally:
            if self.state is RunState.RUNNING:
                self.state = RunState.FAILED
            self.steps.close()

    def _succeed(self, value: T) -> Result[T] | PureResult[T]:
        self.state = RunState.SUCCEEDED
        if self.always_good:
            return PureResult(value, self.cursor)
        return Result.success(value, self.cursor)


def _start[T](rule: Rule[T], label: str, always_good: bool) -> SequenceRun[T]:
    steps = rule()
    if not isinstance(steps, Generator):
        raise GrammarError(ErrorTemplate.not_a_generator(label, steps))
    return SequenceRun(label, steps, always_good)


@dataclass(frozen=True, slots=True, eq=False)
class SequencedParser[T](FallibleParser[T]):
    """Fallible parser defined by a sequenced rule."""

    rule: Rule[T]
    label: str

    @property
    def name(self) -> str:
        return self.label

    def parse(self, cursor: Cursor) -> Result[T]:
        return _start(self.rule, self.label, always_good=False).execute(cursor)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"<sequenced parser {self.label}>"


@dataclass(frozen=True, slots=True, eq=False)
class PureSequencedParser[T](PureParser[T]):
    """Always-good parser defined by a sequenced rule of always-good steps."""

    rule: Rule[T]
    label: str

    @property
    def name(self) -> str:
        return self.label

    def parse(self, cursor: Cursor) -> PureResult[T]:
        return _start(self.rule, self.label, always_good=True).execute(cursor)  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"<pure sequenced parser {self.label}>"


@overload
def sequenced[T](rule: Rule[T], /) -> SequencedParser[T]: ...


@overload
def sequenced[T](
    *, always_good: bool = False, name: str | None = None
) -> Callable[[Rule[T]], SequencedParser[T] | PureSequencedParser[T]]: ...


def sequenced[T](
    rule: Rule[T] | None = None,
    /,
    *,
    always_good: bool = False,
    name: str | None = None,
) -> Any:
    """Turn a generator function into a parser.

    Usable bare (``@sequenced``) or with options
    (``@sequenced(always_good=True)``).

    Args:
        rule: Zero-argument generator function
        always_good: Declare that every step is always-good. The parser is
            then a PureParser; yielding a fallible step raises GrammarError.
        name: Name for logs and reprs (default: the function name)
    """

    def decorate(func: Rule[T]) -> SequencedParser[T] | PureSequencedParser[T]:
        label = name or getattr(func, "__name__", "sequenced")
        if always_good:
            return PureSequencedParser(func, label)
        return SequencedParser(func, label)

    if rule is None:
        return decorate
    return decorate(rule)
