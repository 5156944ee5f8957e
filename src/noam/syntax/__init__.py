"""Parsing engine: cursor, results and parsers.

Python 3.13+.
"""

from .cursor import NULL_CURSOR, Cursor
from .results import AnyResult, PureResult, Result

__all__ = ["NULL_CURSOR", "AnyResult", "Cursor", "PureResult", "Result"]
