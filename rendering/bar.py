"""
Proportional text bars.

    progress_bar(10, 40, 25)  ->  "▓▓▓▓▒▒▒░░░"

Each segment's run length comes from the *cumulative* rounded position
rather than from rounding its own percentage, so the filled part is
always ``round(sum(segments) * width / 100)`` and the bar is always
exactly ``width`` characters long, even when segments add up to more
than 100.
"""

from __future__ import annotations

import math
from typing import Sequence

FILL_GLYPHS: Sequence[str] = ("▓", "▒")
EMPTY_GLYPH = "░"


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def progress_bar(width: int, *segments: float) -> str:
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")

    parts = []
    cells_used = 0
    pct_done = 0.0

    for i, pct in enumerate(segments):
        pct_done += pct
        cells = round_half_up(pct_done * width / 100) - cells_used

        # Runs never go backwards or past the end of the bar.
        cells = max(0, min(cells, width - cells_used))
        cells_used += cells

        parts.append(FILL_GLYPHS[i % len(FILL_GLYPHS)] * cells)

    parts.append(EMPTY_GLYPH * (width - cells_used))
    return "".join(parts)
