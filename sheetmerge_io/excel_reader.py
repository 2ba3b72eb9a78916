"""Excel input helpers."""

# Module responsibilities:
# - Provide a thin wrapper around openpyxl.load_workbook with strong validation.
# - Expose the first worksheet's extent and tagged cell values, 1-indexed.
# - Emit structured logs for traceability and future auditing.

from __future__ import annotations

import os
import zipfile
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Tuple

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .cells import CellValue
from .errors import CorruptFileError
from .utils.log import get_logger

logger = get_logger("excel_reader")

Dimensions = Tuple[int, int]


@dataclass(slots=True)
class WorkbookHandle:
    """An open workbook and the worksheet that takes part in merging."""

    path: str
    workbook: Workbook
    worksheet: Worksheet
    closed: bool = False


class SpreadsheetReader:
    """Read-side access to .xlsx workbooks backed by openpyxl.

    Only the first worksheet is used. Formulas are read as their cached
    values; styles and other cell attributes are ignored.
    """

    def open(self, path: str | os.PathLike[str]) -> WorkbookHandle:
        """Load a workbook from disk.

        Raises:
            CorruptFileError: When the file is not a valid spreadsheet container.
        """

        source = os.fspath(path)
        logger.info("Reading Excel workbook", extra={"path": source})
        try:
            workbook = load_workbook(source, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as exc:
            logger.error("Failed to read Excel workbook", extra={"path": source, "error": str(exc)})
            raise CorruptFileError(f"Not a valid .xlsx workbook: '{source}' ({exc})", source) from exc

        if not workbook.worksheets:
            workbook.close()
            raise CorruptFileError(f"Workbook has no worksheets: '{source}'", source)

        return WorkbookHandle(path=source, workbook=workbook, worksheet=workbook.worksheets[0])

    def dimensions(self, handle: WorkbookHandle) -> Dimensions:
        """Return ``(max_row, max_column)`` of the first worksheet.

        A sheet without any cell reports ``(0, 0)``.
        """

        ws = handle.worksheet
        max_row, max_column = ws.max_row, ws.max_column
        if max_row == 1 and max_column == 1 and ws.cell(row=1, column=1).value is None:
            return 0, 0
        return max_row, max_column

    def cell_value(self, handle: WorkbookHandle, row: int, col: int) -> CellValue:
        return CellValue.from_raw(handle.worksheet.cell(row=row, column=col).value)

    def close(self, handle: WorkbookHandle) -> None:
        if handle.closed:
            return
        handle.workbook.close()
        handle.closed = True

    @contextmanager
    def opened(self, path: str | os.PathLike[str]) -> Iterator[WorkbookHandle]:
        """Open a workbook for the duration of a ``with`` block."""

        handle = self.open(path)
        try:
            yield handle
        finally:
            self.close(handle)
