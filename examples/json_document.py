"""JSON Example - parsing and pretty-printing JSON with noam.

Demonstrates:

1. Parsing a document with JsonParser
2. Pretty-printing with format_json
3. Input limits (source size and nesting depth)
4. Error positions for malformed documents

Python 3.13+.
"""

from __future__ import annotations

import logging

from noam import DepthLimitExceededError, ParseFailedError
from noam.grammars import JsonParser, format_json

DOCUMENT = """
{
    "name": "noam",
    "version": 1.0,
    "tags": ["parser", "combinator"],
    "config": {"strict": true, "limit": null, "escape": "tab\\there"}
}
"""


def example_1_parse() -> None:
    """Parse a document into Python values."""
    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    value = JsonParser().parse(DOCUMENT)
    print(repr(value))
    print()


def example_2_format() -> None:
    """Render values back to JSON text."""
    print("=" * 60)
    print("Example 2: Formatting")
    print("=" * 60)

    value = JsonParser().parse(DOCUMENT)
    text = format_json(value)
    print(text)
    print(f"Round trip equal: {JsonParser().parse(text) == value}")
    print()


def example_3_limits() -> None:
    """Reject oversized and overly nested documents."""
    print("=" * 60)
    print("Example 3: Input limits")
    print("=" * 60)

    strict = JsonParser(max_source_size=64, max_nesting_depth=4)
    try:
        strict.parse(DOCUMENT)
    except ValueError as e:
        print(f"Too large: {e}")
    try:
        strict.parse("[[[[[[]]]]]]")
    except DepthLimitExceededError as e:
        print(f"Too deep: {e}")
    print()


def example_4_errors() -> None:
    """Malformed documents report line and column."""
    print("=" * 60)
    print("Example 4: Errors")
    print("=" * 60)

    for source in ('{"a": [1, 2,]}', '{"a": 1}\n  trailing'):
        try:
            JsonParser().parse(source)
        except ParseFailedError as e:
            print(f"Error: {e}")
    print()


def main() -> None:
    """Run all JSON examples."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print()
    print("noam JSON Examples")
    print()

    example_1_parse()
    example_2_format()
    example_3_limits()
    example_4_errors()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
