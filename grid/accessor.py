"""
SpreadsheetDocument: a parsed multi-table workbook viewed as
``(table, row, col) -> str``.

Indices are 0-based.  Nothing is padded or guessed: the document's shape
is the contract, so any access outside it raises ``OutOfRange``.
"""

from __future__ import annotations

from typing import List, Sequence

from extractors.errors import OutOfRange

Grid = List[List[str]]


class SpreadsheetDocument:

    def __init__(self, tables: Sequence[Sequence[Sequence[str]]]) -> None:
        self._tables: List[Grid] = [
            [list(row) for row in table] for table in tables
        ]

    @property
    def table_count(self) -> int:
        return len(self._tables)

    def table(self, table_index: int) -> Grid:
        if not 0 <= table_index < len(self._tables):
            raise OutOfRange(table_index)
        return self._tables[table_index]

    def row(self, table_index: int, row: int) -> List[str]:
        rows = self.table(table_index)
        if not 0 <= row < len(rows):
            raise OutOfRange(table_index, row)
        return list(rows[row])

    def cell(self, table_index: int, row: int, col: int) -> str:
        rows = self.table(table_index)
        if not 0 <= row < len(rows):
            raise OutOfRange(table_index, row)
        cells = rows[row]
        if not 0 <= col < len(cells):
            raise OutOfRange(table_index, row, col)
        return cells[col]

    def __repr__(self) -> str:
        shape = ", ".join(str(len(t)) for t in self._tables)
        return f"SpreadsheetDocument(tables={len(self._tables)}, rows=[{shape}])"
