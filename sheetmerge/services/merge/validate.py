"""Validation pre-pass run before any workbook is opened."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from sheetmerge.core.errors import (
    InputFileNotFoundError,
    InsufficientInputError,
    UnsupportedFormatError,
)

REQUIRED_EXTENSION = ".xlsx"
MIN_INPUT_FILES = 2


def has_required_extension(path: str) -> bool:
    # case-sensitive, ".XLSX" is rejected; a file named just ".xlsx" is accepted
    return Path(path).name.endswith(REQUIRED_EXTENSION)


def validate_inputs(input_files: Sequence[str]) -> None:
    """Check the whole input list, raising on the first violation.

    Files are checked in order; for each one existence is checked before the
    extension.

    Raises:
        InsufficientInputError: Fewer than two files were supplied.
        InputFileNotFoundError: A listed path does not exist.
        UnsupportedFormatError: A listed path does not end in ``.xlsx``.
    """

    if len(input_files) < MIN_INPUT_FILES:
        raise InsufficientInputError(
            f"There must be at least {MIN_INPUT_FILES} input files, got {len(input_files)}."
        )

    for path in input_files:
        if not os.path.isfile(path):
            raise InputFileNotFoundError(f"File not found: '{path}'", path)
        if not has_required_extension(path):
            raise UnsupportedFormatError(
                f"The file '{path}' is invalid. Can only merge {REQUIRED_EXTENSION} files.", path
            )
