"""Performance benchmarks for noam.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in the combinator core and the JSON grammar.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
