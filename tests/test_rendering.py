"""Tests for the long-form and short-form summaries."""

import re

import pytest

from dto.report import Vacced
from rendering.bar import EMPTY_GLYPH, FILL_GLYPHS
from rendering.formatter import NumberFormatter
from rendering.telegram import SOURCE_PAGE_URL, render_long_form
from rendering.twitter import render_short_form
from tests.conftest import make_report

_BAR_GLYPHS = set(FILL_GLYPHS) | {EMPTY_GLYPH}


def _bar_cells(text: str) -> int:
    return sum(1 for ch in text if ch in _BAR_GLYPHS)


@pytest.fixture
def previous():
    return make_report(given=3_900_000, single=2_900_000, full=2_400_000)


@pytest.fixture
def current():
    return make_report(given=4_000_000, single=3_000_000, full=2_500_000)


class TestLongForm:
    def test_headline(self, previous, current, v2_config):
        text = render_long_form(previous, current, v2_config.bands)

        first_line = text.splitlines()[0]
        assert first_line.startswith("<pre>") and first_line.endswith("</pre>")
        assert _bar_cells(first_line) == 25
        assert "Dosis puestas: <strong>+100 k</strong> | Total: 4 M" in text
        assert "<strong>💉💉 Pauta completa</strong>\n<strong>+100 k</strong>" in text
        assert "Total: <strong>2,5 M</strong>" in text
        assert "<strong>💉 Al menos una dosis</strong>" in text
        assert SOURCE_PAGE_URL in text

    def test_one_line_per_age_band(self, previous, current, v2_config):
        text = render_long_form(previous, current, v2_config.bands)

        age_lines = [l for l in text.splitlines() if l.startswith("<pre>") and "(" in l]
        assert len(age_lines) == len(v2_config.bands)
        for band, line in zip(v2_config.bands, age_lines):
            assert line.startswith("<pre>" + band.label)

    def test_age_bars_scale_with_population(self, previous, current, v2_config):
        text = render_long_form(previous, current, v2_config.bands)
        age_lines = [l for l in text.splitlines() if l.startswith("<pre>") and "(" in l]

        widths = {band.id: _bar_cells(line) for band, line in zip(v2_config.bands, age_lines)}
        # 40-49 is the largest band and gets the full width.
        assert widths["40-49"] == 20
        assert widths["80+"] == 7
        assert all(w <= 20 for w in widths.values())

        # Padding keeps the percentages aligned.
        starts = {line.index(" (") for line in age_lines}
        assert len(starts) == 1

    def test_negative_delta_keeps_minus(self, v2_config):
        text = render_long_form(
            make_report(given=4_000_000), make_report(given=3_950_000), v2_config.bands
        )
        assert "Dosis puestas: <strong>-50 k</strong>" in text

    def test_report_without_age_bands(self, v2_config):
        report = make_report(bands={})
        text = render_long_form(report, report, v2_config.bands)
        assert "por grupos de edad" not in text

    def test_formatter_locale(self, previous, current, v2_config):
        text = render_long_form(previous, current, v2_config.bands, NumberFormatter("en"))
        assert "Total: <strong>2.5 M</strong>" in text


class TestShortForm:
    def test_two_posts(self, previous, current, v2_config):
        posts = render_short_form(previous, current, v2_config.bands)
        assert len(posts) == 2

    def test_headline_post(self, previous, current, v2_config):
        first = render_short_form(previous, current, v2_config.bands)[0]

        assert _bar_cells(first.splitlines()[0]) == 20
        assert "Puestas: +100 k | Total: 4 M" in first
        assert "💉💉 Pauta completa\n+100 k" in first
        assert "<" not in first

    def test_age_post(self, previous, current, v2_config):
        second = render_short_form(previous, current, v2_config.bands)[1]
        lines = second.strip().splitlines()

        assert lines[0] == "Por edad (💉💉/💉 %):"
        band_lines = lines[2:]
        assert len(band_lines) == 8
        assert all(_bar_cells(line) == 10 for line in band_lines)
        # 80+: 2.8M / 2.83M of 2,834,024 -> 99 / 100
        assert re.search(r" ≥80 99/100$", band_lines[0])
        assert " 7x " in band_lines[1]

    def test_no_age_post_without_bands(self, v2_config):
        report = make_report(bands={"unknown": Vacced(population_size=1, single=1, full=1)})
        assert len(render_short_form(report, report, v2_config.bands)) == 1
