"""
Locale-aware rendering of magnitudes and percentages.

    fmt = NumberFormatter("es")
    fmt.magnitude(2_500_000, 3)  ->  "2,5 M"
    fmt.percent(52.63, 1)        ->  "52,6 %"
    fmt.sign_prefix("2,1 %")     ->  "+2,1 %"

Locale rules come from Babel (CLDR data); output is deterministic for a
given locale.
"""

from __future__ import annotations

import copy

from babel import Locale
from babel.numbers import NumberPattern, parse_pattern

_UNITS = ("", " k", " M", " G")

DEFAULT_LOCALE = "es"


def _with_max_fraction(pattern: NumberPattern, max_fraction_digits: int) -> NumberPattern:
    pattern = copy.copy(pattern)
    pattern.frac_prec = (0, max(0, max_fraction_digits))
    return pattern


class NumberFormatter:

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = Locale.parse(locale)
        self._decimal = parse_pattern(self._locale.decimal_formats[None].pattern)
        self._percent = parse_pattern(self._locale.percent_formats[None].pattern)

    @property
    def locale(self) -> Locale:
        return self._locale

    def magnitude(self, n: float, max_fraction_digits: int) -> str:
        """Format *n*, abbreviating thousands / millions / billions."""
        value = float(n)
        unit = 0
        while abs(value) >= 1000 and unit < len(_UNITS) - 1:
            value /= 1000
            unit += 1
        pattern = _with_max_fraction(self._decimal, max_fraction_digits)
        return pattern.apply(value, self._locale) + _UNITS[unit]

    def percent(self, p: float, max_fraction_digits: int) -> str:
        """Format *p*, given in 0–100 units."""
        pattern = _with_max_fraction(self._percent, max_fraction_digits)
        return pattern.apply(p / 100, self._locale)

    @staticmethod
    def sign_prefix(s: str) -> str:
        """Prefix a non-negative rendering with an explicit ``+``."""
        if s.startswith("-"):
            return s
        return "+" + s
