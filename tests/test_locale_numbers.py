"""Tests for the locale-aware decimal leaf."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from noam.parsing import locale_decimal, resolve_locale
from noam.syntax.parser import combinators as C
from noam.syntax.parser.base import FnParser, parse_all

# Built once; locale data loading is the slow part.
EN_US = locale_decimal("en_US")
DE_DE = locale_decimal("de_DE")
LV_LV = locale_decimal("lv_LV")


class TestResolveLocale:
    """Locale code handling."""

    def test_posix_and_bcp47_codes(self) -> None:
        """Both separator styles resolve to the same locale."""
        assert resolve_locale("en_US") == resolve_locale("en-US")

    @pytest.mark.parametrize("code", ["xx_YY", "not a locale"])
    def test_unknown_locale(self, code: str) -> None:
        """Unknown codes raise ValueError naming the code."""
        with pytest.raises(ValueError, match="Unknown locale"):
            resolve_locale(code)

    def test_unknown_locale_fails_at_build_time(self) -> None:
        """locale_decimal validates the locale before any parse."""
        with pytest.raises(ValueError, match="xx_YY"):
            locale_decimal("xx_YY")


class TestLocaleDecimal:
    """Parsing with CLDR symbols."""

    def test_is_fallible_leaf(self) -> None:
        """The leaf is a named fallible parser."""
        assert isinstance(EN_US, FnParser)
        assert not EN_US.always_good
        assert EN_US.name == "locale_decimal('en_US')"

    @pytest.mark.parametrize(
        ("parser_name", "source", "expected"),
        [
            ("en", "1,234.56", Decimal("1234.56")),
            ("en", "-42", Decimal(-42)),
            ("en", "0.5", Decimal("0.5")),
            ("de", "-1.234,5", Decimal("-1234.5")),
            ("de", "3,25", Decimal("3.25")),
            ("lv", "1\u00a0234,56", Decimal("1234.56")),
            ("lv", "1 234,56", Decimal("1234.56")),
            ("lv", "1\u202f234,56", Decimal("1234.56")),
        ],
    )
    def test_values(self, parser_name: str, source: str, expected: Decimal) -> None:
        """Grouped, signed and fractional numbers convert exactly."""
        leaf = {"en": EN_US, "de": DE_DE, "lv": LV_LV}[parser_name]
        assert parse_all(leaf, source) == expected

    def test_leaves_rest(self) -> None:
        """Parsing stops after the number."""
        result = EN_US("1,234.56 total")
        assert result.value == Decimal("1234.56")
        assert result.cursor.text == " total"

    def test_group_symbol_before_space_ends_number(self) -> None:
        """A group symbol not followed by a digit is not consumed."""
        result = EN_US("10, 20")
        assert result.value == Decimal(10)
        assert result.cursor.text == ", 20"

    def test_as_list_element(self) -> None:
        """Locale numbers compose with sequence_of."""
        amounts = C.sequence_of(EN_US, ",", "[", "]")
        assert parse_all(amounts, "[1,000.5, 2, -3.25]") == [
            Decimal("1000.5"),
            Decimal(2),
            Decimal("-3.25"),
        ]

    @pytest.mark.parametrize("source", ["", "abc", "-", ",5", " 1"])
    def test_non_numbers_fail(self, source: str) -> None:
        """Input without a leading number fails without consuming."""
        result = EN_US(source)
        assert not result.good
        assert result.cursor.pos == 0

    @given(value=st.decimals(min_value=-(10**9), max_value=10**9, places=2))
    def test_round_trip_en_us(self, value: Decimal) -> None:
        """PROPERTY: en_US grouped rendering parses back to the value."""
        assert parse_all(EN_US, f"{value:,}") == value
