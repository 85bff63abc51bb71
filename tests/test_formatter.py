"""Tests for locale-aware number formatting."""

import pytest

from rendering.formatter import NumberFormatter


def _spaces(s: str) -> str:
    return s.replace("\xa0", " ").replace("\u202f", " ")


@pytest.fixture
def es() -> NumberFormatter:
    return NumberFormatter("es")


class TestMagnitude:
    @pytest.mark.parametrize(
        "n,digits,expected",
        [
            (2_500_000, 3, "2,5 M"),
            (4_000_000, 3, "4 M"),
            (100_000, 1, "100 k"),
            (1_234_567, 3, "1,235 M"),
            (999, 1, "999"),
            (52.63, 0, "53"),
            (0, 1, "0"),
            (3_100_000_000, 1, "3,1 G"),
        ],
    )
    def test_spanish(self, es, n, digits, expected):
        assert es.magnitude(n, digits) == expected

    def test_negative_values_are_abbreviated_too(self, es):
        assert es.magnitude(-100_000, 1) == "-100 k"

    def test_caps_at_largest_unit(self, es):
        assert es.magnitude(5_000_000_000_000, 0).endswith(" G")

    def test_other_locale(self):
        assert NumberFormatter("en").magnitude(2_500_000, 3) == "2.5 M"

    def test_deterministic(self, es):
        assert es.magnitude(1_234_567, 2) == es.magnitude(1_234_567, 2)


class TestPercent:
    def test_spanish(self, es):
        assert _spaces(es.percent(52.63, 1)) == "52,6 %"
        assert _spaces(es.percent(25, 1)) == "25 %"

    def test_negative(self, es):
        assert es.percent(-2.11, 1).startswith("-2,1")

    def test_fraction_digits(self, es):
        assert _spaces(es.percent(33.3333, 2)) == "33,33 %"
        assert _spaces(es.percent(33.3333, 0)) == "33 %"


class TestSignPrefix:
    @pytest.mark.parametrize(
        "s,expected",
        [("100 k", "+100 k"), ("0", "+0"), ("-5", "-5"), ("2,1 %", "+2,1 %")],
    )
    def test_sign_prefix(self, s, expected):
        assert NumberFormatter.sign_prefix(s) == expected
