"""Pretty-printer for JSON values.

Layout:
- Arrays print inline: ``[1, 2, 3]``
- Objects print one member per line, indented four spaces per level:

      {
          "name": "noam",
          "tags": ["parser", "combinator"]
      }

- Empty containers print as ``[]`` and ``{}``
- Integral floats print without a fractional part (``1.0`` -> ``1``)

Strings are escaped so the output parses back to the same value.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from noam.grammars.json import JsonValue

__all__ = ["format_json"]

INDENT = "    "

# Largest magnitude printed as an integer; beyond it floats lose integer precision.
_MAX_INTEGRAL = 2**53

_STRING_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _format_string(text: str) -> str:
    parts = ['"']
    for ch in text:
        if ch in _STRING_ESCAPES:
            parts.append(_STRING_ESCAPES[ch])
        elif ch < " ":
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _format_number(number: float) -> str:
    if math.isfinite(number) and number.is_integer() and abs(number) < _MAX_INTEGRAL:
        return str(int(number))
    return repr(number)


def _format(value: JsonValue, depth: str, out: list[str]) -> None:
    match value:
        case None:
            out.append("null")
        case bool():
            out.append("true" if value else "false")
        case int() | float():
            out.append(_format_number(float(value)))
        case str():
            out.append(_format_string(value))
        case list():
            out.append("[")
            for index, item in enumerate(value):
                if index:
                    out.append(", ")
                _format(item, depth, out)
            out.append("]")
        case dict():
            if not value:
                out.append("{}")
                return
            inner = depth + INDENT
            out.append("{\n")
            for index, (key, item) in enumerate(value.items()):
                if index:
                    out.append(",\n")
                out.append(f"{inner}{_format_string(key)}: ")
                _format(item, inner, out)
            out.append(f"\n{depth}}}")
        case _:
            msg = f"Not a JSON value: {type(value).__name__}"
            raise TypeError(msg)


def format_json(value: JsonValue) -> str:
    """Render value in the layout described in the module docstring.

    Raises:
        TypeError: If value contains something that is not a JSON value

    Example:
        >>> print(format_json({"a": [1.0, 2.5], "b": None}))
        {
            "a": [1, 2.5],
            "b": null
        }
    """
    out: list[str] = []
    _format(value, "", out)
    return "".join(out)
