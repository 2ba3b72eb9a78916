"""Custom exceptions used across SheetMerge."""

from __future__ import annotations

import os

from sheetmerge_io.errors import CorruptFileError, PersistenceError, SpreadsheetIOError


class SheetMergeError(Exception):
    """Base error for the application."""


class ConfigError(SheetMergeError):
    """Configuration related error."""


class InsufficientInputError(SheetMergeError):
    """Raised when fewer than two input workbooks are supplied."""


class _PathError(SheetMergeError):
    """Error tied to a single file path."""

    def __init__(self, message: str, path: str | os.PathLike[str]) -> None:
        super().__init__(message)
        self.path = os.fspath(path)


class InputFileNotFoundError(_PathError, FileNotFoundError):
    """Raised when a listed input workbook does not exist."""


class UnsupportedFormatError(_PathError):
    """Raised when an input file does not carry the .xlsx extension."""


# Fatal conditions a merge can raise, application and I/O layers alike.
MERGE_ERRORS: tuple[type[Exception], ...] = (SheetMergeError, SpreadsheetIOError)

__all__ = [
    "MERGE_ERRORS",
    "ConfigError",
    "CorruptFileError",
    "InputFileNotFoundError",
    "InsufficientInputError",
    "PersistenceError",
    "SheetMergeError",
    "SpreadsheetIOError",
    "UnsupportedFormatError",
]
