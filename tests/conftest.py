from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Callable, Iterator, Sequence

import pytest
from openpyxl import Workbook, load_workbook

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set before test modules import the packages, whose loggers configure on import.
TEST_HOME = Path(tempfile.mkdtemp(prefix="sheetmerge-tests-"))
os.environ["SHEETMERGE_HOME"] = str(TEST_HOME)

Rows = Sequence[Sequence[object]]
WorkbookFactory = Callable[..., Path]


@pytest.fixture(autouse=True, scope="session")
def _session_logger() -> Iterator[None]:
    """Create the shared log handlers once, writing under the temporary home."""

    from sheetmerge.core.logger import get_logger

    get_logger(TEST_HOME / "logs")
    yield


@pytest.fixture()
def make_xlsx(tmp_path: Path) -> WorkbookFactory:
    """Build a single-sheet workbook from *rows* under ``tmp_path``."""

    def _make(name: str, rows: Rows, *, extra_sheet: Rows | None = None) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = "Data"
        for row in rows:
            ws.append(list(row))
        if extra_sheet is not None:
            other = wb.create_sheet("Other")
            for row in extra_sheet:
                other.append(list(row))
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(path)
        return path

    return _make


def _read_rows(path: Path) -> list[tuple[object, ...]]:
    wb = load_workbook(path)
    try:
        ws = wb.worksheets[0]
        return [tuple(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


@pytest.fixture()
def read_xlsx() -> Callable[[Path], list[tuple[object, ...]]]:
    """Return the first worksheet of a workbook as value tuples."""

    return _read_rows
