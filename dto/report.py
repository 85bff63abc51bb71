"""
Report DTOs: one immutable snapshot of a vaccination report.

    Report
      ├─ doses: Doses            (delivered / administered)
      ├─ total_vacced: Vacced    (whole population)
      └─ vacced_by_age: Dict[str, Vacced]
           ordered by the extraction config's band list, e.g.
           "80+", "70-79", ..., "12-19"
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, Field


class Doses(BaseModel):
    """Doses delivered to the regions vs. doses actually administered."""

    available: int = Field(ge=0)
    given: int = Field(ge=0)

    model_config = {"frozen": True}


class Vacced(BaseModel):
    """Vaccination counts for one population segment."""

    population_size: int = Field(gt=0)
    single: int = Field(ge=0)  # at least one dose
    full: int = Field(ge=0)  # fully vaccinated

    model_config = {"frozen": True}

    def pct(self) -> Tuple[float, float]:
        """Return ``(single_pct, full_pct)`` against ``population_size``."""
        return (
            self.single * 100 / self.population_size,
            self.full * 100 / self.population_size,
        )


class Report(BaseModel):
    doses: Doses
    total_vacced: Vacced
    vacced_by_age: Dict[str, Vacced] = {}

    model_config = {"frozen": True}
