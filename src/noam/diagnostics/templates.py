"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

__all__ = ["ErrorTemplate"]

# Longest input excerpt quoted in a message.
_EXCERPT_LEN: int = 32


def _excerpt(text: str) -> str:
    if len(text) <= _EXCERPT_LEN:
        return repr(text)
    return repr(text[:_EXCERPT_LEN]) + "..."


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unexpected_eof(position: int) -> str:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Error message
        """
        return f"Unexpected EOF at position {position}"

    @staticmethod
    def not_a_parser(obj: object, combinator: str) -> str:
        """Object handed to a combinator is not a parser.

        Args:
            obj: The offending object
            combinator: Name of the combinator that received it

        Returns:
            Error message
        """
        return (
            f"{combinator}() expects parsers, got {type(obj).__name__}: {obj!r}"
        )

    @staticmethod
    def untagged_parser(obj: object, combinator: str) -> str:
        """Parser subclass that sets no always_good tag."""
        return (
            f"{combinator}() got {type(obj).__name__}, a Parser with no always_good tag; "
            "derive from FallibleParser or PureParser"
        )

    @staticmethod
    def repetition_never_fails(combinator: str) -> str:
        """Repeated element parser is always-good, so the loop cannot end."""
        return (
            f"{combinator}() element parser can never fail; "
            "the repetition would never terminate"
        )

    @staticmethod
    def repetition_no_progress(combinator: str, position: int) -> str:
        """Repeated element matched without consuming input.

        Args:
            combinator: Name of the repeating combinator
            position: Source position where the empty match occurred

        Returns:
            Error message
        """
        return (
            f"{combinator}() element parser matched without consuming input "
            f"at position {position}; the repetition would never terminate"
        )

    @staticmethod
    def fallible_step_in_pure_sequence(rule: str, step: object) -> str:
        """A sequenced parser declared always-good awaited a fallible step."""
        return (
            f"Sequenced parser '{rule}' is declared always_good but awaited "
            f"fallible parser {step!r}"
        )

    @staticmethod
    def not_a_generator(rule: str, obj: object) -> str:
        """A sequenced rule did not produce a generator."""
        return (
            f"Sequenced parser '{rule}' must be a generator function "
            f"(use 'yield parser'), got {type(obj).__name__}"
        )

    @staticmethod
    def sequence_already_run(rule: str) -> str:
        """A SequenceRun was executed twice."""
        return f"Sequenced run of '{rule}' has already been executed"

    @staticmethod
    def failed_result_value() -> str:
        """Value of a failed result was read."""
        return "Failed result has no value; check result.good first"

    @staticmethod
    def depth_exceeded(max_depth: int) -> str:
        """Nesting depth limit exceeded.

        Args:
            max_depth: The configured limit

        Returns:
            Error message
        """
        return (
            f"Maximum nesting depth ({max_depth}) exceeded. "
            "Input is nested deeper than the configured limit."
        )

    @staticmethod
    def parse_failed(what: str, line: int, column: int, remaining: str) -> str:
        """Input not recognised.

        Args:
            what: Name of the grammar or parser
            line: 1-based line of the failure position
            column: 1-based column of the failure position
            remaining: Input at the point of failure

        Returns:
            Error message
        """
        return f"{line}:{column}: Failed to parse {what} at {_excerpt(remaining)}"

    @staticmethod
    def trailing_input(what: str, line: int, column: int, remaining: str) -> str:
        """Input recognised but not fully consumed."""
        return (
            f"{line}:{column}: Unexpected trailing input after {what}: "
            f"{_excerpt(remaining)}"
        )

    @staticmethod
    def source_too_large(size: int, max_size: int, owner: str) -> str:
        """Source exceeds the configured size limit.

        Args:
            size: Source size in characters
            max_size: Configured limit
            owner: Name of the class whose constructor configures the limit

        Returns:
            Error message
        """
        return (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({max_size:,} characters). "
            f"Configure max_source_size in {owner} constructor to increase limit."
        )

    @staticmethod
    def unknown_locale(locale_code: str) -> str:
        """Locale code not recognised by Babel."""
        return f"Unknown locale '{locale_code}'"
