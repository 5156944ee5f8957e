"""Shared constants for noam.

This module provides centralized configuration constants used across the
engine, the leaf parsers and the bundled grammars. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for recursive grammars
- Input limits: Size constraints for downstream entry points
- Character classes: Whitespace and digits recognised by leaf parsers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "RECURSION_RESERVE_FRAMES",
    "JSON_MAX_NESTING_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Character classes
    "WHITESPACE_CHARS",
    "ASCII_DIGITS",
    "HEX_DIGITS",
    # Separators
    "DEFAULT_SEPARATOR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default maximum nesting depth for grammars that opt into a DepthGuard.
# The engine itself imposes no static limit: recurse() is bounded only by
# input nesting and the interpreter's recursion limit.
MAX_DEPTH: int = 100

# Stack frames kept free when clamping a requested depth against
# sys.getrecursionlimit().
RECURSION_RESERVE_FRAMES: int = 50

# Default array/object nesting limit of JsonParser. Each nesting level costs
# about ten interpreter frames, so this stays well inside the default
# recursion limit of 1000.
JSON_MAX_NESTING_DEPTH: int = 64

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size accepted by downstream entry points (JsonParser).
# 10 MiB of characters. Set to 0 in a constructor to disable.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Space, tab, newline, carriage return.
WHITESPACE_CHARS: str = " \t\n\r"

# ASCII digits only. str.isdigit() accepts Unicode digits like "²"
# which int() rejects.
ASCII_DIGITS: str = "0123456789"

HEX_DIGITS: str = "0123456789abcdefABCDEF"

# ============================================================================
# SEPARATORS
# ============================================================================

# Separator used by sequence_of() and mapping_of() when none is given.
DEFAULT_SEPARATOR: str = ","
