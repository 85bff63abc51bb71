"""
Turn the raw bytes of a published report into a ``SpreadsheetDocument``.

  - ``.ods``  → pandas ``read_excel(engine="odf")``, every sheet, no header
  - ``.xlsx`` → openpyxl, cached values only

Each sheet becomes one table; every cell is normalised to a string.
"""

from __future__ import annotations

import io
import logging
from pathlib import PurePath
from typing import Any, List

import openpyxl
import pandas as pd

from extractors.errors import DocumentLoadError
from grid.accessor import Grid, SpreadsheetDocument

logger = logging.getLogger(__name__)


def cell_text(value: Any) -> str:
    """Render a parsed cell value the way the extractor expects it."""
    if value is None:
        return ""
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def _load_ods(content: bytes) -> List[Grid]:
    sheets = pd.read_excel(
        io.BytesIO(content),
        sheet_name=None,
        header=None,
        engine="odf",
    )
    tables: List[Grid] = []
    for name, df in sheets.items():
        rows = [
            [cell_text(v) for v in record]
            for record in df.itertuples(index=False, name=None)
        ]
        logger.debug("  Sheet '%s': %d row(s)", name, len(rows))
        tables.append(rows)
    return tables


def _load_xlsx(content: bytes) -> List[Grid]:
    wb = openpyxl.load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    try:
        tables: List[Grid] = []
        for ws in wb.worksheets:
            rows = [
                [cell_text(v) for v in values]
                for values in ws.iter_rows(values_only=True)
            ]
            logger.debug("  Sheet '%s': %d row(s)", ws.title, len(rows))
            tables.append(rows)
        return tables
    finally:
        wb.close()


_LOADERS = {
    ".ods": _load_ods,
    ".xlsx": _load_xlsx,
}


def load_document(content: bytes, name: str) -> SpreadsheetDocument:
    """
    Parse *content* according to the extension of *name*.

    Raises ``DocumentLoadError`` for unknown extensions or unreadable bytes.
    """
    suffix = PurePath(name).suffix.lower()
    loader = _LOADERS.get(suffix)
    if loader is None:
        raise DocumentLoadError(f"Unsupported document type: {name!r}")

    try:
        tables = loader(content)
    except Exception as exc:
        raise DocumentLoadError(f"Failed to parse {name!r}: {exc}") from exc

    logger.info("Loaded %s: %d table(s)", name, len(tables))
    return SpreadsheetDocument(tables)
