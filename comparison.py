"""
Percentages and deltas between two reports.

All functions are pure.  Percentages are in 0–100 units; baselines are
guaranteed positive by ``Vacced``.
"""

from __future__ import annotations

from typing import Dict, Tuple

from dto.comparison import Comparison, FigureDelta, PctDelta, VaccedDelta
from dto.report import Report, Vacced


def percentages(v: Vacced) -> Tuple[float, float]:
    """Return ``(single_pct, full_pct)`` for one segment."""
    return v.pct()


def delta(current: int, previous: int) -> int:
    return current - previous


def delta_pct(current: float, previous: float) -> float:
    return current - previous


def _figure(current: int, previous: int) -> FigureDelta:
    return FigureDelta(current=current, previous=previous, delta=delta(current, previous))


def _pct(current: float, previous: float) -> PctDelta:
    return PctDelta(current=current, previous=previous, delta=delta_pct(current, previous))


def compare_vacced(current: Vacced, previous: Vacced) -> VaccedDelta:
    cur_single, cur_full = percentages(current)
    prev_single, prev_full = percentages(previous)
    return VaccedDelta(
        population_size=current.population_size,
        single=_figure(current.single, previous.single),
        full=_figure(current.full, previous.full),
        single_pct=_pct(cur_single, prev_single),
        full_pct=_pct(cur_full, prev_full),
    )


def compare(previous: Report, current: Report) -> Comparison:
    """
    Compare *current* against *previous*.

    Age bands follow the current report's order.  A band the previous
    report does not have (a newer report revision) is compared against
    zero counts over the same baseline.
    """
    by_age: Dict[str, VaccedDelta] = {}
    for band_id, cur in current.vacced_by_age.items():
        prev = previous.vacced_by_age.get(band_id)
        if prev is None:
            prev = Vacced(population_size=cur.population_size, single=0, full=0)
        by_age[band_id] = compare_vacced(cur, prev)

    return Comparison(
        doses_given=_figure(current.doses.given, previous.doses.given),
        doses_available=_figure(current.doses.available, previous.doses.available),
        total=compare_vacced(current.total_vacced, previous.total_vacced),
        by_age=by_age,
    )
