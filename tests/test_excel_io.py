"""Unit tests for the spreadsheet reader and writer."""

# Module responsibilities:
# - Validate extent reporting, tagged reads and implicit sheet growth.
# - Assert defensive behaviour for corrupt inputs and unwritable outputs.

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook

from sheetmerge_io import CellKind, CellValue, SpreadsheetReader, SpreadsheetWriter
from sheetmerge_io.errors import CorruptFileError, PersistenceError


def test_reader_reports_first_sheet_dimensions(make_xlsx) -> None:
    path = make_xlsx("data.xlsx", [("a", "b", "c"), (1, 2, 3)], extra_sheet=[(1,)] * 9)
    reader = SpreadsheetReader()

    with reader.opened(path) as handle:
        assert reader.dimensions(handle) == (2, 3)
        assert reader.cell_value(handle, 2, 3) == CellValue(CellKind.NUMBER, 3)
        assert reader.cell_value(handle, 1, 1) == CellValue.text("a")
        assert reader.cell_value(handle, 5, 5).is_empty

    assert handle.closed


def test_reader_reports_empty_sheet_as_zero(tmp_path: Path) -> None:
    path = tmp_path / "empty.xlsx"
    Workbook().save(path)
    reader = SpreadsheetReader()

    with reader.opened(path) as handle:
        assert reader.dimensions(handle) == (0, 0)


def test_reader_rejects_non_workbook(tmp_path: Path) -> None:
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"\x00\x01garbage")

    with pytest.raises(CorruptFileError) as excinfo:
        SpreadsheetReader().open(path)

    assert excinfo.value.path == str(path)


def test_writer_extends_sheet_and_saves(make_xlsx, tmp_path: Path) -> None:
    path = make_xlsx("template.xlsx", [("h1", "h2")])
    reader = SpreadsheetReader()
    writer = SpreadsheetWriter()
    output = tmp_path / "nested" / "out.xlsx"

    with reader.opened(path) as handle:
        writer.set_cell_value(handle, 4, 3, CellValue.text("far"))
        writer.set_cell_value(handle, 2, 1, 42)
        assert reader.dimensions(handle) == (4, 3)
        saved = writer.save_as(handle, output)

    assert saved == output
    assert not output.with_name(output.name + ".tmp").exists()
    ws = load_workbook(output).worksheets[0]
    assert ws.cell(row=4, column=3).value == "far"
    assert ws.cell(row=2, column=1).value == 42


def test_writer_keeps_formula_like_text_as_text(make_xlsx, tmp_path: Path) -> None:
    path = make_xlsx("template.xlsx", [("h1",)])
    reader = SpreadsheetReader()
    writer = SpreadsheetWriter()

    with reader.opened(path) as handle:
        writer.set_cell_value(handle, 2, 1, CellValue.text("=SUM(A1:A2)"))
        assert handle.worksheet.cell(row=2, column=1).data_type == "s"


def test_writer_wraps_save_failures(make_xlsx, tmp_path: Path) -> None:
    path = make_xlsx("template.xlsx", [("h1",)])
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")
    reader = SpreadsheetReader()

    with reader.opened(path) as handle:
        with pytest.raises(PersistenceError):
            SpreadsheetWriter().save_as(handle, blocker / "out.xlsx")


def test_io_errors_are_reexported_by_application_errors() -> None:
    from sheetmerge.core import errors as app_errors
    from sheetmerge_io import errors as io_errors

    assert app_errors.CorruptFileError is io_errors.CorruptFileError
    assert app_errors.PersistenceError is io_errors.PersistenceError
    assert issubclass(io_errors.CorruptFileError, app_errors.MERGE_ERRORS)


def test_package_version_matches_project_metadata() -> None:
    import tomllib

    import sheetmerge_io

    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with pyproject.open("rb") as fh:
        declared = tomllib.load(fh)["project"]["version"]

    assert sheetmerge_io.__version__ == declared
