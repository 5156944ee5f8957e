"""Locale Numbers Example - parsing numbers written for people.

Uses Babel's CLDR data to read decimals with each locale's group and
decimal symbols.

Python 3.13+.
"""

from __future__ import annotations

from noam import parse_all, sequence_of
from noam.parsing import locale_decimal

SAMPLES = {
    "en_US": "1,234.56",
    "de_DE": "-1.234,5",
    "lv_LV": "1 234,56",
    "fr_FR": "12 345,67",
}


def main() -> None:
    """Parse one sample per locale, then a list."""
    print("=" * 60)
    print("Locale-aware decimals")
    print("=" * 60)

    for locale_code, source in SAMPLES.items():
        value = parse_all(locale_decimal(locale_code), source)
        print(f"{locale_code}: {source!r:16} -> {value!r}")

    amounts = sequence_of(locale_decimal("en_US"), ";")
    print(amounts("1,000.5; 2; -3.25 end").value)


if __name__ == "__main__":
    main()
