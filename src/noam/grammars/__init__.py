"""Grammars built on the noam engine.

Exports:
    JsonParser: JSON document parser with size and nesting limits
    JsonValue: Type alias for parsed JSON values
    json_grammar: Build the JSON value grammar (optionally depth-limited)
    json_value: JSON value grammar
    parse_json: JSON document grammar (value with surrounding whitespace)
    format_json: Pretty-printer for JSON values
"""

from .json import JsonParser, JsonValue, json_grammar, json_value, parse_json
from .json_format import format_json

__all__ = ["JsonParser", "JsonValue", "format_json", "json_grammar", "json_value", "parse_json"]
