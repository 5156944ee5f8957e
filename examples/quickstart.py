"""Quickstart - building parsers from combinators.

Demonstrates:

1. Parsing a comma-separated list with sequence_of
2. Summing with fold_left
3. Writing a grammar rule as a sequenced generator
4. A recursive grammar with recurse
5. Whole-input parsing with parse_all and its errors

Python 3.13+.
"""

from __future__ import annotations

import operator

from noam import (
    ParseFailedError,
    comma_separator,
    either,
    enclose,
    fold_left,
    join,
    many,
    parse_all,
    parse_int,
    parse_string,
    recurse,
    sequence_of,
    sequenced,
    try_parse,
)


def example_1_sequence_of() -> None:
    """Parse integers until something that is not an integer."""
    print("=" * 60)
    print("Example 1: sequence_of")
    print("=" * 60)

    result = sequence_of(parse_int)("10, 20, 30, 40, hello")
    print(f"Values:    {result.value}")
    print(f"Remainder: {result.cursor.text!r}")
    print()


def example_2_fold_left() -> None:
    """Sum a list without building it."""
    print("=" * 60)
    print("Example 2: fold_left")
    print("=" * 60)

    total = fold_left(parse_int, join(comma_separator, parse_int), operator.add)
    result = total("1, 2, 3, 4 and more")
    print(f"Sum:       {result.value}")
    print(f"Remainder: {result.cursor.text!r}")
    print()


@sequenced
def key_value():
    key = yield parse_string
    yield ":"
    value = yield either(parse_int, parse_string)
    return key, value


@sequenced
def optional_count():
    name = yield parse_string
    count = yield try_parse(enclose(" x", parse_int, ""))
    return name, count or 1


def example_3_sequenced() -> None:
    """Write rules as straight-line generator code."""
    print("=" * 60)
    print("Example 3: sequenced rules")
    print("=" * 60)

    print(key_value('"port":8080').value)
    print(key_value('"host":"localhost"').value)
    print(optional_count('"apple" x3').value)
    print(optional_count('"pear"').value)
    failed = key_value('"port"=8080')
    print(f"Failure keeps input: {failed.cursor.text!r}")
    print()


def example_4_recursion() -> None:
    """Nested brackets with a self-referential grammar."""
    print("=" * 60)
    print("Example 4: recurse")
    print("=" * 60)

    brackets = recurse(lambda self: many(enclose("[", self, "]")))
    for source in ("[[]][]", "[[[]]]", "[[]"):
        result = brackets(source)
        print(f"{source!r:10} -> {result.value!r:12} remainder {result.cursor.text!r}")
    print()


def example_5_parse_all() -> None:
    """Require the whole input to match."""
    print("=" * 60)
    print("Example 5: parse_all")
    print("=" * 60)

    numbers = sequence_of(parse_int, ",", "[", "]")
    print(parse_all(numbers, "[1, 2, 3]"))
    for bad in ("[1, 2", "[1, 2] extra"):
        try:
            parse_all(numbers, bad, what="number list")
        except ParseFailedError as e:
            print(f"Error: {e}")
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("noam Quickstart Examples")
    print()

    example_1_sequence_of()
    example_2_fold_left()
    example_3_sequenced()
    example_4_recursion()
    example_5_parse_all()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
