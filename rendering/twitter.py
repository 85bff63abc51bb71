"""
Short-form summary: a two-post thread sized for Twitter.

  1. overall bar, headline percentages, doses and people deltas
  2. one 10-cell bar per age band with whole-number percentages
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from comparison import compare
from dto.comparison import VaccedDelta
from dto.report import Report
from extractors.config import AgeBandSpec
from rendering.bar import progress_bar
from rendering.formatter import NumberFormatter

_TOTAL_BAR_WIDTH = 20
_AGE_BAR_WIDTH = 10


def _headline_post(title: str, counts, pcts, fmt: NumberFormatter) -> str:
    return (
        f"{title}\n"
        f"{fmt.sign_prefix(fmt.magnitude(counts.delta, 1))} "
        f"({fmt.sign_prefix(fmt.percent(pcts.delta, 1))} pob.)\n"
        f"Total: {fmt.magnitude(counts.current, 3)} ({fmt.percent(pcts.current, 1)} pob.)"
    )


def render_short_form(
    previous: Report,
    current: Report,
    bands: Sequence[AgeBandSpec],
    formatter: Optional[NumberFormatter] = None,
) -> List[str]:
    """Render the thread comparing *current* with *previous*."""
    fmt = formatter or NumberFormatter()
    c = compare(previous, current)
    total = c.total
    full, single = total.full_pct.current, total.single_pct.current

    first = "".join(
        [
            f"{progress_bar(_TOTAL_BAR_WIDTH, full, single - full)}\n",
            f"💉💉 {fmt.percent(full, 1)} | 💉 {fmt.percent(single, 1)}\n",
            "\n",
            f"Puestas: {fmt.sign_prefix(fmt.magnitude(c.doses_given.delta, 1))}"
            f" | Total: {fmt.magnitude(c.doses_given.current, 3)}\n\n",
            _headline_post("💉💉 Pauta completa", total.full, total.full_pct, fmt),
            "\n\n",
            _headline_post("💉 Al menos una dosis", total.single, total.single_pct, fmt),
        ]
    )
    posts = [first]

    lines = ["Por edad (💉💉/💉 %):\n\n"]
    for band in bands:
        v: Optional[VaccedDelta] = c.by_age.get(band.id)
        if v is None:
            continue
        band_full, band_single = v.full_pct.current, v.single_pct.current
        lines.append(
            "%s %s %s/%s\n"
            % (
                progress_bar(_AGE_BAR_WIDTH, band_full, band_single - band_full),
                band.short_label,
                fmt.magnitude(band_full, 0),
                fmt.magnitude(band_single, 0),
            )
        )
    if len(lines) > 1:
        posts.append("".join(lines))

    return posts
