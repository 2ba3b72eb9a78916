"""Row-append merge of .xlsx workbooks into the first one.

PROCESS OVERVIEW
1. validate_inputs() checks count, existence and extension of every input.
2. The first file is opened as the template; its width is the reference column.
3. Each later file is opened in turn, checked against the reference column and
   either appended below the template's current last row or recorded as skipped.
4. The template is saved to the output path, replacing any existing file.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sheetmerge.core.logger import get_logger
from sheetmerge_io.cells import CellValue
from sheetmerge_io.excel_reader import SpreadsheetReader, WorkbookHandle
from sheetmerge_io.excel_writer import SpreadsheetWriter

from .models import ColumnMismatch, MergeOutcome, MergeRequest, PathLike
from .validate import validate_inputs


class MergeEngine:
    """Appends the rows of several workbooks to a template workbook."""

    def __init__(
        self,
        reader: SpreadsheetReader | None = None,
        writer: SpreadsheetWriter | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.reader = reader or SpreadsheetReader()
        self.writer = writer or SpreadsheetWriter()
        self.logger = logger or get_logger()

    def merge(self, request: MergeRequest) -> MergeOutcome:
        """Merge ``request.input_files`` into ``request.output_file``.

        Raises:
            InsufficientInputError, InputFileNotFoundError, UnsupportedFormatError:
                From the validation pass, before any workbook is opened.
            CorruptFileError: When any input cannot be parsed; aborts the merge.
            PersistenceError: When the merged workbook cannot be saved.
        """

        validate_inputs(request.input_files)
        self.logger.info(
            "merge.start template=%s files=%d output=%s",
            request.template,
            len(request.input_files),
            request.output_file,
        )

        outcome = MergeOutcome(output_file=request.output_file)
        template = self.reader.open(request.template)
        try:
            _, reference_column = self.reader.dimensions(template)
            if request.add_file_names:
                self._annotate_template(template, reference_column, request)

            for path in request.input_files[1:]:
                self._merge_one(template, path, reference_column, request, outcome)

            self.writer.save_as(template, request.output_file)
        finally:
            self.reader.close(template)

        self.logger.info(
            "merge.done output=%s merged=%d skipped=%d rows_appended=%d",
            request.output_file,
            len(outcome.files_merged),
            len(outcome.files_skipped),
            outcome.rows_appended,
        )
        return outcome

    def _annotate_template(
        self,
        template: WorkbookHandle,
        reference_column: int,
        request: MergeRequest,
    ) -> None:
        max_row, _ = self.reader.dimensions(template)
        column = reference_column + 1
        if request.source_column_label is not None:
            self.writer.set_cell_value(template, 1, column, CellValue.text(request.source_column_label))
        source = CellValue.text(request.template)
        for row in range(2, max_row + 1):
            self.writer.set_cell_value(template, row, column, source)

    def _merge_one(
        self,
        template: WorkbookHandle,
        path: str,
        reference_column: int,
        request: MergeRequest,
        outcome: MergeOutcome,
    ) -> None:
        max_row_template, _ = self.reader.dimensions(template)
        offset = request.header_offset

        with self.reader.opened(path) as source:
            max_row, max_column = self.reader.dimensions(source)

            if max_column != reference_column and not request.ignore_column_differences:
                mismatch = ColumnMismatch(path=path, columns=max_column, reference_columns=reference_column)
                outcome.record_skipped(path, max_row, mismatch)
                self.logger.warning("merge.skip file=%s reason=%s", path, mismatch.describe())
                return

            annotation = CellValue.text(path) if request.add_file_names else None
            appended = 0
            for x in range(offset, max_row):
                target_row = max_row_template + x + 1 - offset
                for y in range(max_column):
                    value = self.reader.cell_value(source, x + 1, y + 1)
                    self.writer.set_cell_value(template, target_row, y + 1, value)
                if annotation is not None:
                    self.writer.set_cell_value(template, target_row, max_column + 1, annotation)
                appended += 1

            outcome.record_merged(path, max_row, max_column, appended)
            self.logger.info(
                "merge.append file=%s rows=%d columns=%d at_row=%d",
                path,
                appended,
                max_column,
                max_row_template + 1,
            )


def merge_files(
    input_files: Sequence[PathLike],
    output_file: PathLike,
    *,
    keep_headers: bool = False,
    ignore_column_differences: bool = False,
    add_file_names: bool = False,
    source_column_label: str | None = None,
) -> MergeOutcome:
    """Merge *input_files* into *output_file* using the first file as template."""

    request = MergeRequest.build(
        input_files,
        output_file,
        keep_headers=keep_headers,
        ignore_column_differences=ignore_column_differences,
        add_file_names=add_file_names,
        source_column_label=source_column_label,
    )
    return MergeEngine().merge(request)
