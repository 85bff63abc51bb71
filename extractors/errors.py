"""
Extraction failures.

Every failure is fatal for the document being read: the extractor never
returns a partially-filled Report.
"""

from __future__ import annotations

from typing import Optional


class ExtractionError(Exception):
    """Base class for anything that stops a document from becoming a Report."""


class SchemaMismatch(ExtractionError):
    """A label the layout relies on is not where it is expected."""

    def __init__(
        self,
        table: int,
        row: int,
        col: int,
        expected: str,
        found: str,
    ) -> None:
        self.table = table
        self.row = row
        self.col = col
        self.expected = expected
        self.found = found
        super().__init__(
            f"Layout changed at table {table}, row {row}, col {col}: "
            f"expected {expected!r}, found {found!r}"
        )


class ParseError(ExtractionError):
    """A numeric cell does not hold an integer once grouping is removed."""

    def __init__(
        self,
        value: str,
        location: Optional[tuple[int, int, int]] = None,
    ) -> None:
        self.value = value
        self.location = location
        where = ""
        if location is not None:
            where = " at table %d, row %d, col %d" % location
        super().__init__(f"Not an integer{where}: {value!r}")


class OutOfRange(ExtractionError, IndexError):
    """A table/row/column beyond the document's actual shape."""

    def __init__(self, table: int, row: Optional[int] = None, col: Optional[int] = None) -> None:
        self.table = table
        self.row = row
        self.col = col
        parts = [f"table {table}"]
        if row is not None:
            parts.append(f"row {row}")
        if col is not None:
            parts.append(f"col {col}")
        super().__init__("Out of range: " + ", ".join(parts))


class DocumentLoadError(ExtractionError):
    """The raw bytes could not be parsed into tables."""
