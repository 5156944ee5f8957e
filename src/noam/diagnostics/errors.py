"""noam exception hierarchy.

Parse failure is a value (a Result whose ``good`` is False), never an
exception. The exceptions below signal programming errors in grammar
construction, misuse of results, resource limits, and failures reported by
downstream entry points that promise a value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from noam.syntax.cursor import Cursor

__all__ = [
    "DepthLimitExceededError",
    "FailedResultAccessError",
    "GrammarError",
    "NoamError",
    "ParseFailedError",
    "SequenceReuseError",
]


class NoamError(Exception):
    """Base exception for all noam errors."""


class GrammarError(NoamError, TypeError):
    """Grammar was constructed or used incorrectly.

    Examples:
    - A repetition whose element can never fail (the loop never ends)
    - A repetition whose element matched without consuming input
    - A fallible step awaited inside an always-good sequenced parser
    - A non-parser object passed where a parser was expected

    These are programming errors, not parse failures.
    """


class FailedResultAccessError(NoamError, ValueError):
    """The value of a failed Result was read.

    A failed result carries no value. Check ``result.good`` first.
    """


class SequenceReuseError(NoamError, RuntimeError):
    """A sequenced parser run was executed more than once.

    Each parse builds a fresh run; a run object itself is single-use.
    """


class DepthLimitExceededError(NoamError, RecursionError):
    """Maximum nesting depth was exceeded.

    Raised by DepthGuard when a grammar that opted into a depth limit meets
    input nested deeper than the limit.
    """


class ParseFailedError(NoamError, ValueError):
    """Input was not recognised by a parser that promises a value.

    Raised only by downstream entry points such as ``parse_all`` and
    ``JsonParser.parse``. The engine itself never raises it.

    Attributes:
        remaining: Cursor at the point where recognition stopped
    """

    def __init__(self, message: str, remaining: Cursor) -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message
            remaining: Unconsumed input at the point of failure
        """
        super().__init__(message)
        self.remaining = remaining
