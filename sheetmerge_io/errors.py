"""Exceptions raised by the spreadsheet reader and writer."""

from __future__ import annotations

import os


class SpreadsheetIOError(Exception):
    """Base error for workbook read/write failures tied to a path."""

    def __init__(self, message: str, path: str | os.PathLike[str]) -> None:
        super().__init__(message)
        self.path = os.fspath(path)


class CorruptFileError(SpreadsheetIOError):
    """Raised when a workbook cannot be parsed as a spreadsheet container."""


class PersistenceError(SpreadsheetIOError):
    """Raised when a workbook cannot be saved."""
