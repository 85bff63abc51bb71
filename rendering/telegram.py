"""
Long-form summary, rendered as Telegram HTML.

Layout:
  - overall bar (fully vaccinated, then at-least-one-dose on top)
  - headline percentages
  - doses administered since the previous report
  - fully vaccinated / at least one dose blocks (delta, total, % pop.)
  - one bar per age band, its width scaled to the band's population
  - link to the source page
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from comparison import compare
from dto.comparison import Comparison, VaccedDelta
from dto.report import Report
from extractors.config import AgeBandSpec
from rendering.bar import progress_bar, round_half_up
from rendering.formatter import NumberFormatter

SOURCE_PAGE_URL = (
    "https://www.mscbs.gob.es/profesionales/saludPublica/ccayes/"
    "alertasActual/nCov/vacunaCovid19.htm"
)

_TOTAL_BAR_WIDTH = 25
_AGE_BAR_MAX_WIDTH = 20


def _vacced_block(title: str, counts, pcts, fmt: NumberFormatter) -> str:
    return (
        f"<strong>{title}</strong>\n"
        f"<strong>{fmt.sign_prefix(fmt.magnitude(counts.delta, 1))}</strong> "
        f"({fmt.sign_prefix(fmt.percent(pcts.delta, 1))} pob.)\n"
        f"Total: <strong>{fmt.magnitude(counts.current, 3)}</strong> "
        f"({fmt.percent(pcts.current, 1)} pob.)\n"
    )


def _age_lines(
    comparison: Comparison,
    bands: Sequence[AgeBandSpec],
    fmt: NumberFormatter,
) -> List[str]:
    max_pop = max((v.population_size for v in comparison.by_age.values()), default=0)
    if max_pop <= 0:
        return []

    title_width = max((len(b.label) for b in bands), default=0)
    lines: List[str] = []
    for band in bands:
        v: Optional[VaccedDelta] = comparison.by_age.get(band.id)
        if v is None:
            continue
        full, single = v.full_pct.current, v.single_pct.current
        width = round_half_up(v.population_size * _AGE_BAR_MAX_WIDTH / max_pop)
        lines.append(
            "<pre>%s %s%s (%s / %s)</pre>"
            % (
                band.label.ljust(title_width),
                progress_bar(width, full, single - full),
                " " * (_AGE_BAR_MAX_WIDTH - width),
                fmt.percent(full, 1),
                fmt.percent(single, 1),
            )
        )
    return lines


def render_long_form(
    previous: Report,
    current: Report,
    bands: Sequence[AgeBandSpec],
    formatter: Optional[NumberFormatter] = None,
) -> str:
    """Render the Telegram message comparing *current* with *previous*."""
    fmt = formatter or NumberFormatter()
    c = compare(previous, current)
    total = c.total
    full, single = total.full_pct.current, total.single_pct.current

    parts: List[str] = [
        f"<pre>{progress_bar(_TOTAL_BAR_WIDTH, full, single - full)}</pre>\n",
        f"<strong>💉💉 {fmt.percent(full, 1)} | 💉 {fmt.percent(single, 1)}</strong>\n",
        "\n",
        f"Dosis puestas: <strong>{fmt.sign_prefix(fmt.magnitude(c.doses_given.delta, 1))}</strong>"
        f" | Total: {fmt.magnitude(c.doses_given.current, 3)}\n\n",
        "\n",
        _vacced_block("💉💉 Pauta completa", total.full, total.full_pct, fmt),
        "\n",
        _vacced_block("💉 Al menos una dosis", total.single, total.single_pct, fmt),
        "\n",
    ]

    age_lines = _age_lines(c, bands, fmt)
    if age_lines:
        parts.append(
            "\n% por grupos de edad (💉💉 completa / 💉 al menos una dosis):\n\n"
        )
        parts.extend(line + "\n" for line in age_lines)

    parts.append("\n")
    parts.append(
        f'Informe completo disponible en <a href="{SOURCE_PAGE_URL}">'
        "la web del Ministerio de Sanidad</a>.\n"
    )
    return "".join(parts)
