"""`sheetmerge_io` top-level package exports the spreadsheet reader and writer used by merges."""

# Module responsibilities:
# - Re-export the openpyxl-backed reader/writer and the tagged cell value so consumers have a stable API surface.
# - Carry the package version declared in pyproject.toml.

from __future__ import annotations

from .cells import EMPTY, CellKind, CellValue
from .excel_reader import SpreadsheetReader, WorkbookHandle
from .excel_writer import SpreadsheetWriter

__all__ = [
    "EMPTY",
    "CellKind",
    "CellValue",
    "SpreadsheetReader",
    "SpreadsheetWriter",
    "WorkbookHandle",
]

__version__ = "0.1.0"
