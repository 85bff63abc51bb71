"""
Versioned extraction configurations.

An ``ExtractionConfig`` pins down where every tracked figure lives in one
revision of the published report: which table holds the totals, which
row is the "Totales" line, which columns carry the four headline figures
(and the labels expected above them), where the age-band tables are and
how their columns are laid out.

Configurations are immutable values handed to ``ReportExtractor``; pick
one with ``get_extraction_config(version)``.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class HeaderCheck(BaseModel):
    """A label expected at a fixed column of a table's header row."""

    col: int = Field(ge=0)
    label: str

    model_config = {"frozen": True}


class AgeBandSpec(BaseModel):
    id: str
    label: str  # long form, e.g. "70-79"
    short_label: str  # short form, e.g. "7x"
    # Known population baseline; None means read it from the document.
    population: Optional[int] = Field(default=None, gt=0)

    model_config = {"frozen": True}


class ExtractionConfig(BaseModel):
    version: str

    # Totals table
    totals_table: int = 0
    header_row: int = 0
    totals_row: int = 22
    totals_label: str = "Totales"
    doses_available: HeaderCheck
    doses_given: HeaderCheck
    single: HeaderCheck
    full: HeaderCheck
    total_population: Optional[int] = Field(default=None, gt=0)
    total_population_col: Optional[int] = None

    # Age-band tables ("at least one dose" and "fully vaccinated")
    single_table: int = 2
    full_table: int = 3
    age_table_label: HeaderCheck
    band_row: int = 22
    band_first_col: int = 1
    band_stride: int = Field(default=2, gt=0)
    population_row: Optional[int] = None
    bands: List[AgeBandSpec]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_population_sources(self) -> "ExtractionConfig":
        if self.total_population is None and self.total_population_col is None:
            raise ValueError(
                "total_population or total_population_col must be set"
            )
        needs_row = [b.id for b in self.bands if b.population is None]
        if needs_row and self.population_row is None:
            raise ValueError(
                f"population_row is required to read baselines for {needs_row}"
            )
        ids = [b.id for b in self.bands]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate age band ids: {ids}")
        return self

    def band_col(self, band_index: int) -> int:
        """Column of the *band_index*-th band in both age tables."""
        return self.band_first_col + band_index * self.band_stride


# -------------------------------------------------------------------
# Known report revisions
# -------------------------------------------------------------------

# INE 2020
_SPAIN_POPULATION = 47_431_256

_HEADLINE_COLUMNS = dict(
    doses_available=HeaderCheck(col=5, label="Total Dosis entregadas (1)"),
    doses_given=HeaderCheck(col=6, label="Dosis administradas (2)"),
    single=HeaderCheck(col=8, label="Nº Personas con al menos 1 dosis"),
    full=HeaderCheck(col=9, label="Nº Personas vacunadas\n(pauta completada)"),
)

_AGE_TABLE_LABEL = HeaderCheck(
    col=18,
    label="Total Población INE Población a Vacunar (1)",
)

_V1 = ExtractionConfig(
    version="v1",
    **_HEADLINE_COLUMNS,
    total_population=_SPAIN_POPULATION,
    age_table_label=_AGE_TABLE_LABEL,
    # Baselines printed under the totals line of the "at least one dose" table.
    population_row=23,
    bands=[
        AgeBandSpec(id="80+", label="≥80", short_label="≥80"),
        AgeBandSpec(id="70-79", label="70-79", short_label="7x"),
        AgeBandSpec(id="60-69", label="60-69", short_label="6x"),
        AgeBandSpec(id="50-59", label="50-59", short_label="5x"),
        AgeBandSpec(id="40-49", label="40-49", short_label="4x"),
        AgeBandSpec(id="30-39", label="30-39", short_label="3x"),
        AgeBandSpec(id="18-29", label="18-29", short_label="18-29"),
    ],
)

_V2 = ExtractionConfig(
    version="v2",
    **_HEADLINE_COLUMNS,
    total_population=_SPAIN_POPULATION,
    age_table_label=_AGE_TABLE_LABEL,
    bands=[
        AgeBandSpec(id="80+", label="≥80", short_label="≥80", population=2_834_024),
        AgeBandSpec(id="70-79", label="70-79", short_label="7x", population=3_960_045),
        AgeBandSpec(id="60-69", label="60-69", short_label="6x", population=5_336_986),
        AgeBandSpec(id="50-59", label="50-59", short_label="5x", population=7_033_306),
        AgeBandSpec(id="40-49", label="40-49", short_label="4x", population=7_891_737),
        AgeBandSpec(id="30-39", label="30-39", short_label="3x", population=6_230_403),
        AgeBandSpec(id="20-29", label="20-29", short_label="2x", population=4_944_640),
        AgeBandSpec(id="12-19", label="12-19", short_label="12-19", population=3_888_686),
    ],
)

EXTRACTION_CONFIGS: Dict[str, ExtractionConfig] = {
    _V1.version: _V1,
    _V2.version: _V2,
}

DEFAULT_VERSION = _V2.version


def get_extraction_config(version: str = DEFAULT_VERSION) -> ExtractionConfig:
    """Return the configuration for report revision *version*."""
    try:
        return EXTRACTION_CONFIGS[version.lower().strip()]
    except KeyError:
        raise ValueError(
            f"Unknown report format version: {version!r} "
            f"(known: {sorted(EXTRACTION_CONFIGS)})"
        ) from None
