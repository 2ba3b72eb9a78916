"""Data models used by the merge service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

PathLike = str | os.PathLike[str]


@dataclass(frozen=True, slots=True)
class MergeRequest:
    """Inputs for a single merge call.

    ``input_files[0]`` is the template; every later file is appended to it.
    Paths are normalized to strings so outcomes echo them back unchanged.
    """

    input_files: Tuple[str, ...]
    output_file: str
    keep_headers: bool = False
    ignore_column_differences: bool = False
    add_file_names: bool = False
    source_column_label: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "input_files", tuple(os.fspath(p) for p in self.input_files))
        object.__setattr__(self, "output_file", os.fspath(self.output_file))

    @classmethod
    def build(
        cls,
        input_files: Sequence[PathLike],
        output_file: PathLike,
        **options: object,
    ) -> "MergeRequest":
        return cls(tuple(input_files), output_file, **options)  # type: ignore[arg-type]

    @property
    def template(self) -> str:
        return self.input_files[0]

    @property
    def header_offset(self) -> int:
        """Leading rows of each non-template file that are not copied."""

        return 0 if self.keep_headers else 1


class FileStatus(str, Enum):
    MERGED = "merged"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class ColumnMismatch:
    """Non-fatal: a file's width differs from the template's reference column."""

    path: str
    columns: int
    reference_columns: int

    def describe(self) -> str:
        return f"{self.columns} columns, template has {self.reference_columns}"


@dataclass(slots=True)
class FileMergeEntry:
    """Per-file record of what the merge did with a non-template input."""

    path: str
    status: FileStatus
    rows: int
    columns: int
    rows_appended: int = 0
    mismatch: Optional[ColumnMismatch] = None


@dataclass(slots=True)
class MergeOutcome:
    """Merged and skipped files, in input order, template excluded."""

    output_file: str
    entries: List[FileMergeEntry] = field(default_factory=list)

    @property
    def files_merged(self) -> List[str]:
        return [e.path for e in self.entries if e.status is FileStatus.MERGED]

    @property
    def files_skipped(self) -> List[str]:
        return [e.path for e in self.entries if e.status is FileStatus.SKIPPED]

    @property
    def rows_appended(self) -> int:
        return sum(e.rows_appended for e in self.entries)

    def record_merged(self, path: str, rows: int, columns: int, rows_appended: int) -> None:
        self.entries.append(
            FileMergeEntry(
                path=path,
                status=FileStatus.MERGED,
                rows=rows,
                columns=columns,
                rows_appended=rows_appended,
            )
        )

    def record_skipped(self, path: str, rows: int, mismatch: ColumnMismatch) -> None:
        self.entries.append(
            FileMergeEntry(
                path=path,
                status=FileStatus.SKIPPED,
                rows=rows,
                columns=mismatch.columns,
                mismatch=mismatch,
            )
        )


__all__ = [
    "ColumnMismatch",
    "FileMergeEntry",
    "FileStatus",
    "MergeOutcome",
    "MergeRequest",
]
