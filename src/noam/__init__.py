"""noam - parser combinators over zero-copy cursors.

Grammars are ordinary Python values: leaf parsers for tokens, combinators
that build bigger parsers out of smaller ones, and generator-based
sequenced rules for multi-step productions. Parsers that can never fail are
distinguished from parsers that may fail when the grammar is built.

Public API:
    Cursor - Immutable [begin, end) view into the source string
    Result / PureResult - Outcome of a parse (may fail / cannot fail)
    parser / pure_parser - Decorators certifying leaf parsers
    sequenced - Decorator turning a generator function into a parser
    either, join, map, fold_left, sequence_of, recurse, ... - Combinators
    parse_all - Run a parser over a whole input or raise ParseFailedError

Exceptions:
    NoamError - Base exception class
    GrammarError - Malformed grammar construction or use
    FailedResultAccessError - Value of a failed result was read
    SequenceReuseError - A sequenced run was executed twice
    ParseFailedError - Entry point could not parse its input
    DepthLimitExceededError - Nesting deeper than a DepthGuard allows

Submodules:
    noam.grammars - JSON grammar, JsonParser and format_json
    noam.parsing - Locale-aware (Babel) number leaves
    noam.core - DepthGuard for recursive grammars
"""

# Essential Public API
from .diagnostics import (
    DepthLimitExceededError,
    FailedResultAccessError,
    GrammarError,
    NoamError,
    ParseFailedError,
    SequenceReuseError,
)
from .syntax import NULL_CURSOR, Cursor, PureResult, Result
from .syntax.parser import (
    Parser,
    comma_separator,
    current_cursor,
    either,
    enclose,
    fail,
    fold_left,
    is_always_good,
    join,
    literal,
    lookahead,
    many,
    many1,
    map,
    mapping_of,
    match,
    optional,
    parse_all,
    parse_bool,
    parse_float,
    parse_int,
    parse_line,
    parse_string,
    parser,
    pure,
    pure_parser,
    recurse,
    regex,
    sequence,
    sequence_of,
    sequenced,
    test,
    test_then,
    try_parse,
    whitespace,
    whitespace_enclose,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("noam")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NULL_CURSOR",
    "Cursor",
    "DepthLimitExceededError",
    "FailedResultAccessError",
    "GrammarError",
    "NoamError",
    "ParseFailedError",
    "Parser",
    "PureResult",
    "Result",
    "SequenceReuseError",
    "__version__",
    "comma_separator",
    "current_cursor",
    "either",
    "enclose",
    "fail",
    "fold_left",
    "is_always_good",
    "join",
    "literal",
    "lookahead",
    "many",
    "many1",
    "map",
    "mapping_of",
    "match",
    "optional",
    "parse_all",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_line",
    "parse_string",
    "parser",
    "pure",
    "pure_parser",
    "recurse",
    "regex",
    "sequence",
    "sequence_of",
    "sequenced",
    "test",
    "test_then",
    "try_parse",
    "whitespace",
    "whitespace_enclose",
]
