"""Locale-aware decimal leaf parser.

Recognises numbers written with a locale's CLDR symbols ("1,234.56" in
en_US, "1 234,56" in lv_LV, "1.234,56" in de_DE) and produces a Decimal.

The leaf scans only the characters a number can contain in that locale
(digits, group separators between digit runs, one decimal symbol, a leading
minus sign), then hands the span to Babel for conversion. A group separator
that is not followed by a digit ends the number, so list separators that
happen to equal the group symbol are left alone.

Thread-safe. Uses Babel for CLDR data.

Python 3.13+.
"""

import logging
import re
from decimal import Decimal, InvalidOperation

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from noam.diagnostics.templates import ErrorTemplate
from noam.syntax.cursor import Cursor
from noam.syntax.parser.base import FnParser
from noam.syntax.results import Result

__all__ = ["locale_decimal", "resolve_locale"]

logger = logging.getLogger(__name__)

# Separators Babel accepts in place of a non-breaking-space group symbol.
_SPACE_GROUP_ALTERNATIVES: str = "\u0020\u00a0\u202f"


def resolve_locale(locale_code: str) -> Locale:
    """Parse a BCP 47 or POSIX locale code ("en-US", "en_US").

    Raises:
        ValueError: If Babel does not know the locale
    """
    try:
        return Locale.parse(locale_code.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(ErrorTemplate.unknown_locale(locale_code)) from e


def _number_pattern(decimal: str, group: str, minus: str) -> re.Pattern[str]:
    groups = {group}
    if group.isspace():
        groups.update(_SPACE_GROUP_ALTERNATIVES)
    group_alt = "|".join(re.escape(g) for g in sorted(groups))
    minus_alt = "|".join(re.escape(m) for m in sorted({minus, "-"}))
    return re.compile(
        rf"(?:{minus_alt})?[0-9]+(?:(?:{group_alt})[0-9]+)*(?:{re.escape(decimal)}[0-9]+)?"
    )


def locale_decimal(locale_code: str) -> FnParser[Decimal]:
    """Build a leaf parser for decimals written in locale_code's format.

    Args:
        locale_code: BCP 47 locale identifier (e.g. "en_US", "lv-LV")

    Returns:
        Fallible parser producing Decimal

    Raises:
        ValueError: If the locale is unknown (at build time)

    Examples:
        >>> locale_decimal("en_US")("1,234.56 total").value
        Decimal('1234.56')
        >>> locale_decimal("de_DE")("-1.234,5").value
        Decimal('-1234.5')
    """
    locale = resolve_locale(locale_code)
    decimal_symbol = babel_numbers.get_decimal_symbol(locale)
    group_symbol = babel_numbers.get_group_symbol(locale)
    minus_symbol = babel_numbers.get_minus_sign_symbol(locale)
    pattern = _number_pattern(decimal_symbol, group_symbol, minus_symbol)
    logger.debug(
        "locale_decimal(%s): decimal=%r group=%r minus=%r",
        locale_code,
        decimal_symbol,
        group_symbol,
        minus_symbol,
    )

    def parse_locale_decimal(cursor: Cursor) -> Result[Decimal]:
        m = pattern.match(cursor.source, cursor.begin, cursor.end)
        if m is None:
            return Result.failure(cursor)
        text = m.group()
        negative = False
        for sign in (minus_symbol, "-"):
            if text.startswith(sign):
                text = text[len(sign) :]
                negative = True
                break
        if group_symbol.isspace():
            for alternative in _SPACE_GROUP_ALTERNATIVES:
                text = text.replace(alternative, group_symbol)
        try:
            value = babel_numbers.parse_decimal(text, locale=locale)
        except (babel_numbers.NumberFormatError, InvalidOperation):
            return Result.failure(cursor)
        rest = cursor.advance(m.end() - cursor.begin)
        return Result.success(-value if negative else value, rest)

    return FnParser(parse_locale_decimal, f"locale_decimal({locale_code!r})")
