"""Hypothesis strategies for noam property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- text: Parser input text, whitespace runs, integer lists
- json_values: JSON value trees and encoded documents

Usage:
    from tests.strategies import source_text, comma_separated_ints
    from tests.strategies.json_values import json_documents
"""

from .json_values import (
    json_documents,
    json_numbers,
    json_scalars,
    json_strings,
    json_values,
    nested_arrays,
)
from .text import (
    balanced_brackets,
    comma_separated_ints,
    int_lists,
    ints,
    non_numeric_text,
    source_text,
    whitespace_runs,
)

__all__ = [
    "balanced_brackets",
    "comma_separated_ints",
    "int_lists",
    "ints",
    "json_documents",
    "json_numbers",
    "json_scalars",
    "json_strings",
    "json_values",
    "nested_arrays",
    "non_numeric_text",
    "source_text",
    "whitespace_runs",
]
