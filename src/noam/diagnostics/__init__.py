"""Error types for noam.

Parse failure is a boolean carried by results; the exceptions exported here
cover grammar construction errors, result misuse, resource limits and
downstream entry points.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    DepthLimitExceededError,
    FailedResultAccessError,
    GrammarError,
    NoamError,
    ParseFailedError,
    SequenceReuseError,
)
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "ErrorTemplate",
    "FailedResultAccessError",
    "GrammarError",
    "NoamError",
    "ParseFailedError",
    "SequenceReuseError",
]
