from grid.accessor import SpreadsheetDocument
from grid.loader import load_document

__all__ = [
    "SpreadsheetDocument",
    "load_document",
]
