"""Benchmarks: summing a comma-separated list of 1000 integers.

The same task written four ways, from most declarative to hand-written:
fold_left, a sequenced rule looping on try_parse, a sequenced rule looping
on test_then, and a plain loop over the string as the baseline. Every
benchmark checks the sum and the unconsumed remainder so a broken parser
cannot report a fast time.

Python 3.13+.
"""

from __future__ import annotations

import operator

from noam.syntax.cursor import Cursor
from noam.syntax.parser import combinators as C
from noam.syntax.parser.base import parser
from noam.syntax.parser.primitives import parse_int
from noam.syntax.parser.sequencing import sequenced
from noam.syntax.results import Result

EXPECTED_SUM = 15998326
EXPECTED_REMAINDER = ", hello world"

next_int = C.join(C.comma_separator, parse_int)

add_with_fold = C.fold_left(parse_int, next_int, operator.add)


@sequenced
def add_with_try_parse():
    total = yield parse_int
    maybe_next = C.try_parse(next_int)
    while (value := (yield maybe_next)) is not None:
        total += value
    return total


@sequenced
def add_with_test_then():
    values = [(yield parse_int)]
    matched_next = C.test_then(next_int, values.append)
    while (yield matched_next):
        pass
    return sum(values)


@parser
def add_baseline(cursor: Cursor) -> Result[int]:
    source, pos, end = cursor.source, cursor.begin, cursor.end
    start = pos
    while pos < end and source[pos].isdigit():
        pos += 1
    if pos == start:
        return Result.failure(cursor)
    total = int(source[start:pos])
    consumed = pos
    while True:
        while pos < end and source[pos] in " \t\r\n":
            pos += 1
        if pos >= end or source[pos] != ",":
            break
        pos += 1
        while pos < end and source[pos] in " \t\r\n":
            pos += 1
        start = pos
        while pos < end and source[pos].isdigit():
            pos += 1
        if pos == start:
            break
        total += int(source[start:pos])
        consumed = pos
    return Result.success(total, Cursor(source, consumed, end))


def _check(result: Result[int]) -> None:
    assert result.good
    assert result.value == EXPECTED_SUM
    assert result.cursor.text == EXPECTED_REMAINDER


class TestSumBenchmarks:
    """Benchmark four implementations of the same list sum."""

    def test_add_with_fold(self, benchmark, sum_input: str) -> None:
        """Benchmark fold_left over comma-separated integers."""
        result = benchmark(add_with_fold, sum_input)
        _check(result)

    def test_add_with_try_parse(self, benchmark, sum_input: str) -> None:
        """Benchmark a sequenced rule looping on try_parse."""
        result = benchmark(add_with_try_parse, sum_input)
        _check(result)

    def test_add_with_test_then(self, benchmark, sum_input: str) -> None:
        """Benchmark a sequenced rule looping on test_then."""
        result = benchmark(add_with_test_then, sum_input)
        _check(result)

    def test_add_baseline(self, benchmark, sum_input: str) -> None:
        """Benchmark a hand-written loop (reference point)."""
        result = benchmark(add_baseline, sum_input)
        _check(result)
