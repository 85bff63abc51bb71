"""Pytest configuration and fixtures."""

from typing import Dict, List, Optional, Sequence

import pytest

from dto.report import Doses, Report, Vacced
from extractors.config import get_extraction_config
from grid.accessor import SpreadsheetDocument

HEADLINE_LABELS = {
    5: "Total Dosis entregadas (1)",
    6: "Dosis administradas (2)",
    8: "Nº Personas con al menos 1 dosis",
    9: "Nº Personas vacunadas\n(pauta completada)",
}
AGE_TABLE_LABEL = "Total Población INE Población a Vacunar (1)"

V2_SINGLE = [2_830_000, 3_950_000, 4_900_000, 6_100_000, 5_500_000, 4_000_000, 3_200_000, 1_500_000]
V2_FULL = [2_800_000, 3_900_000, 4_700_000, 5_400_000, 4_300_000, 3_100_000, 2_400_000, 600_000]


def grouped(n: int) -> str:
    """Render *n* the way the report prints it: ``1234567`` -> ``"1.234.567"``."""
    return f"{n:,}".replace(",", ".")


def _blank(rows: int, cols: int) -> List[List[str]]:
    return [["" for _ in range(cols)] for _ in range(rows)]


def build_tables(
    totals: Sequence[str] = ("5.000.000", "4.000.000", "3.000.000", "2.500.000"),
    single_bands: Sequence[int] = V2_SINGLE,
    full_bands: Sequence[int] = V2_FULL,
    band_populations: Optional[Sequence[int]] = None,
    totals_label: str = "Totales",
) -> List[List[List[str]]]:
    """
    Build the four tables of a report in the layout the ``v1``/``v2``
    configs expect.  *totals* is (available, given, single, full).
    """
    available, given, single, full = totals

    totals_table = _blank(23, 10)
    for col, label in HEADLINE_LABELS.items():
        totals_table[0][col] = label
    totals_table[22] = [totals_label, "", "", "", "", available, given, "", single, full]

    single_table = _blank(24, 19)
    full_table = _blank(24, 19)
    for table in (single_table, full_table):
        table[0][18] = AGE_TABLE_LABEL
        table[22][0] = "Totales"

    for i, (s, f) in enumerate(zip(single_bands, full_bands)):
        col = 1 + 2 * i
        single_table[22][col] = grouped(s)
        full_table[22][col] = grouped(f)
        if band_populations is not None:
            single_table[23][col] = grouped(band_populations[i])

    return [totals_table, [["Entregas"]], single_table, full_table]


@pytest.fixture
def v2_config():
    return get_extraction_config("v2")


@pytest.fixture
def v1_config():
    return get_extraction_config("v1")


@pytest.fixture
def report_tables() -> List[List[List[str]]]:
    return build_tables()


@pytest.fixture
def report_document(report_tables) -> SpreadsheetDocument:
    return SpreadsheetDocument(report_tables)


def make_report(
    given: int = 4_000_000,
    available: int = 5_000_000,
    single: int = 3_000_000,
    full: int = 2_500_000,
    population: int = 47_431_256,
    bands: Optional[Dict[str, Vacced]] = None,
) -> Report:
    if bands is None:
        cfg = get_extraction_config("v2")
        bands = {
            band.id: Vacced(population_size=band.population, single=s, full=f)
            for band, s, f in zip(cfg.bands, V2_SINGLE, V2_FULL)
        }
    return Report(
        doses=Doses(available=available, given=given),
        total_vacced=Vacced(population_size=population, single=single, full=full),
        vacced_by_age=bands,
    )
