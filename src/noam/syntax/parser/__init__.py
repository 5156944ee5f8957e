"""Parser contract, combinators, sequencing and leaf parsers.

Module Organization:
- base.py: Parser classes, the always-good tag, @parser / @pure_parser
- combinators.py: map, either, join, fold_left, sequence_of, recurse, ...
- sequencing.py: @sequenced generator rules
- primitives.py: Leaf parsers (literals, numbers, strings, lines)
- whitespace.py: Whitespace leaves

Import order matters: primitives and whitespace depend only on base;
combinators depends on both; sequencing depends on combinators.
"""

from noam.syntax.parser.base import (
    FallibleParser,
    FnParser,
    Parser,
    PureFnParser,
    PureParser,
    is_always_good,
    make_parser,
    parse_all,
    parser,
    pure_parser,
)
from noam.syntax.parser.primitives import (
    any_char,
    count_chars,
    delimited,
    end_of_input,
    literal,
    literal_constant,
    one_of,
    parse_bool,
    parse_float,
    parse_int,
    parse_line,
    parse_string,
    regex,
    zero_or_more_chars,
)
from noam.syntax.parser.whitespace import parse_spaces, parse_tabs, skip_whitespace, whitespace
from noam.syntax.parser.combinators import (  # noqa: I001 - after the leaves
    RecursiveParser,
    as_parser,
    comma_separator,
    current_cursor,
    either,
    enclose,
    fail,
    fold_left,
    join,
    lookahead,
    many,
    many1,
    map,
    mapping_of,
    match,
    optional,
    pure,
    recurse,
    sequence,
    sequence_of,
    test,
    test_then,
    try_parse,
    whitespace_enclose,
)
from noam.syntax.parser.sequencing import (
    PureSequencedParser,
    RunState,
    SequencedParser,
    SequenceRun,
    sequenced,
)

__all__ = [
    "FallibleParser",
    "FnParser",
    "Parser",
    "PureFnParser",
    "PureParser",
    "PureSequencedParser",
    "RecursiveParser",
    "RunState",
    "SequenceRun",
    "SequencedParser",
    "any_char",
    "as_parser",
    "comma_separator",
    "count_chars",
    "current_cursor",
    "delimited",
    "either",
    "enclose",
    "end_of_input",
    "fail",
    "fold_left",
    "is_always_good",
    "join",
    "literal",
    "literal_constant",
    "lookahead",
    "make_parser",
    "many",
    "many1",
    "map",
    "mapping_of",
    "match",
    "one_of",
    "optional",
    "parse_all",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_line",
    "parse_spaces",
    "parse_string",
    "parse_tabs",
    "parser",
    "pure",
    "pure_parser",
    "recurse",
    "regex",
    "sequence",
    "sequence_of",
    "sequenced",
    "skip_whitespace",
    "test",
    "test_then",
    "try_parse",
    "whitespace",
    "whitespace_enclose",
    "zero_or_more_chars",
]
