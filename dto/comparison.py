"""
Comparison DTOs: previous vs. current report, figure by figure.

    Comparison
      ├─ doses_given / doses_available: FigureDelta
      ├─ total: VaccedDelta
      └─ by_age: Dict[str, VaccedDelta]
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel


class FigureDelta(BaseModel):
    current: int
    previous: int
    delta: int

    model_config = {"frozen": True}


class PctDelta(BaseModel):
    current: float
    previous: float
    delta: float

    model_config = {"frozen": True}


class VaccedDelta(BaseModel):
    """Counts and population percentages for one segment, both reports."""

    population_size: int
    single: FigureDelta
    full: FigureDelta
    single_pct: PctDelta
    full_pct: PctDelta

    model_config = {"frozen": True}


class Comparison(BaseModel):
    doses_given: FigureDelta
    doses_available: FigureDelta
    total: VaccedDelta
    by_age: Dict[str, VaccedDelta] = {}

    model_config = {"frozen": True}
