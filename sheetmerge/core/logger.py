"""Application logger writing to the shared SheetMerge log."""

from __future__ import annotations

import logging
from pathlib import Path

from sheetmerge_io.utils.log import attach


def get_logger(log_dir: Path | None = None) -> logging.Logger:
    """Return the ``sheetmerge`` logger, sharing handlers with ``sheetmerge_io``."""

    return attach("sheetmerge", log_dir)
