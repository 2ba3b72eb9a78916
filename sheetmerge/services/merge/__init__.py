"""Merge service package."""

from .engine import MergeEngine, merge_files
from .models import ColumnMismatch, FileMergeEntry, FileStatus, MergeOutcome, MergeRequest
from .report import generate_report

__all__ = [
    "ColumnMismatch",
    "FileMergeEntry",
    "FileStatus",
    "MergeEngine",
    "MergeOutcome",
    "MergeRequest",
    "generate_report",
    "merge_files",
]
