"""
ReportExtractor: reads one parsed report into a ``Report``.

Steps:
  1. Check the four headline labels in the totals table's header row.
  2. Check the "Totales" label and read doses + people counts from the
     totals row.
  3. Check the label that identifies each age-band table.
  4. Read single/full counts for every configured band, one column pair
     per band, and attach its population baseline.

Every check and every number is fatal on failure: a Report built from a
misread document is worse than no Report.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

from dto.report import Doses, Report, Vacced
from extractors.config import ExtractionConfig, HeaderCheck
from extractors.errors import ParseError, SchemaMismatch
from grid.accessor import SpreadsheetDocument

logger = logging.getLogger(__name__)

_GROUPING_CHAR = "."
_DIGITS = re.compile(r"[0-9]+")


def parse_int(value: str) -> int:
    """
    Parse a grouped decimal such as ``"1.234.567"`` into ``1234567``.

    Raises ``ParseError`` if anything but digits remains.
    """
    digits = value.strip().replace(_GROUPING_CHAR, "")
    if not _DIGITS.fullmatch(digits):
        raise ParseError(value)
    return int(digits)


def _normalise_label(text: str) -> str:
    # Parsers disagree on how line breaks inside a cell come out.
    return " ".join(text.split())


class ReportExtractor:
    """
    Usage::

        extractor = ReportExtractor(get_extraction_config("v2"))
        report = extractor.extract(document)
    """

    def __init__(self, config: ExtractionConfig) -> None:
        self._config = config

    @property
    def config(self) -> ExtractionConfig:
        return self._config

    # ------------------------------------------------------------------
    # Cell helpers
    # ------------------------------------------------------------------

    def _expect(
        self,
        doc: SpreadsheetDocument,
        table: int,
        row: int,
        col: int,
        expected: str,
    ) -> None:
        found = doc.cell(table, row, col)
        if _normalise_label(found) != _normalise_label(expected):
            raise SchemaMismatch(table, row, col, expected, found)

    def _expect_header(
        self, doc: SpreadsheetDocument, table: int, check: HeaderCheck
    ) -> None:
        self._expect(doc, table, self._config.header_row, check.col, check.label)

    def _int_at(self, doc: SpreadsheetDocument, table: int, row: int, col: int) -> int:
        raw = doc.cell(table, row, col)
        try:
            return parse_int(raw)
        except ParseError:
            raise ParseError(raw, (table, row, col)) from None

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def _extract_totals(self, doc: SpreadsheetDocument) -> tuple[Doses, Vacced]:
        cfg = self._config
        table = cfg.totals_table

        for check in (cfg.single, cfg.full, cfg.doses_available, cfg.doses_given):
            self._expect_header(doc, table, check)

        row = cfg.totals_row
        self._expect(doc, table, row, 0, cfg.totals_label)

        doses = Doses(
            available=self._int_at(doc, table, row, cfg.doses_available.col),
            given=self._int_at(doc, table, row, cfg.doses_given.col),
        )

        population = cfg.total_population
        if population is None:
            population = self._int_at(doc, table, row, cfg.total_population_col)

        total = Vacced(
            population_size=population,
            single=self._int_at(doc, table, row, cfg.single.col),
            full=self._int_at(doc, table, row, cfg.full.col),
        )
        return doses, total

    def _extract_age_bands(self, doc: SpreadsheetDocument) -> Dict[str, Vacced]:
        cfg = self._config

        for table in (cfg.single_table, cfg.full_table):
            self._expect_header(doc, table, cfg.age_table_label)

        bands: Dict[str, Vacced] = {}
        for i, band in enumerate(cfg.bands):
            col = cfg.band_col(i)
            population = band.population
            if population is None:
                population = self._int_at(doc, cfg.single_table, cfg.population_row, col)

            bands[band.id] = Vacced(
                population_size=population,
                single=self._int_at(doc, cfg.single_table, cfg.band_row, col),
                full=self._int_at(doc, cfg.full_table, cfg.band_row, col),
            )
        return bands

    def extract(self, doc: SpreadsheetDocument) -> Report:
        doses, total = self._extract_totals(doc)
        by_age = self._extract_age_bands(doc)

        report = Report(doses=doses, total_vacced=total, vacced_by_age=by_age)
        _warn_on_soft_invariants(report)

        logger.info(
            "  -> extracted report (%s): %d doses given, %d full, %d band(s)",
            self._config.version,
            doses.given,
            total.full,
            len(by_age),
        )
        return report


def _warn_on_soft_invariants(report: Report) -> None:
    """Log figures that look wrong without rejecting the report."""
    if report.doses.given > report.doses.available:
        logger.warning(
            "Doses given (%d) exceed doses available (%d)",
            report.doses.given,
            report.doses.available,
        )

    segments = {"total": report.total_vacced, **report.vacced_by_age}
    for name, v in segments.items():
        if v.single > v.population_size:
            logger.warning(
                "%s: %d with at least one dose exceeds population %d",
                name, v.single, v.population_size,
            )
        if v.full > v.single:
            logger.warning(
                "%s: %d fully vaccinated exceeds %d with at least one dose",
                name, v.full, v.single,
            )
