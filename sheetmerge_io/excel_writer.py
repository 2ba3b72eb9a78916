"""Excel output helpers for writing into templates."""

# Module responsibilities:
# - Mutate the template worksheet cell by cell, growing it past its current extent.
# - Persist the template atomically through a temporary file swap.

from __future__ import annotations

import os
from pathlib import Path

from openpyxl.workbook.workbook import Workbook

from .cells import CellKind, CellValue, Scalar
from .errors import PersistenceError
from .excel_reader import WorkbookHandle
from .utils.log import get_logger

logger = get_logger("excel_writer")


def _tmp_path(path: Path) -> Path:
    return path.with_name(path.name + ".tmp")


def _atomic_save(workbook: Workbook, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = _tmp_path(path)
    try:
        workbook.save(tmp_path)
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


class SpreadsheetWriter:
    """Write-side access used on the template workbook only."""

    def set_cell_value(
        self,
        handle: WorkbookHandle,
        row: int,
        col: int,
        value: CellValue | Scalar,
    ) -> None:
        """Store a value at ``(row, col)``, 1-indexed.

        Writing outside the current extent extends the sheet.
        """

        tagged = value if isinstance(value, CellValue) else CellValue.from_raw(value)
        cell = handle.worksheet.cell(row=row, column=col)
        cell.value = tagged.raw
        if tagged.kind is CellKind.TEXT and cell.data_type == "f":
            # text starting with "=" stays text
            cell.data_type = "s"

    def save_as(self, handle: WorkbookHandle, path: str | os.PathLike[str]) -> Path:
        """Save the workbook to *path*, replacing any existing file.

        Raises:
            PersistenceError: When the workbook cannot be written.
        """

        target = Path(path)
        try:
            _atomic_save(handle.workbook, target)
        except OSError as exc:
            logger.error("Failed to save Excel workbook", extra={"output": str(target), "error": str(exc)})
            raise PersistenceError(f"Unable to save merged workbook to '{target}': {exc}", target) from exc
        logger.info("Excel workbook saved", extra={"output": str(target)})
        return target
