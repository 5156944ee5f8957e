"""Locale-aware leaf parsers backed by Babel (CLDR data).

Functions:
    locale_decimal: Leaf parser for numbers in a locale's format -> Decimal
    resolve_locale: Parse a locale code into a babel.Locale

Python 3.13+.
"""

from .numbers import locale_decimal, resolve_locale

__all__ = ["locale_decimal", "resolve_locale"]
