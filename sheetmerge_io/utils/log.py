"""Logging helpers shared by sheetmerge_io and the sheetmerge application."""

# Module responsibilities:
# - Build one rotating file handler and one console handler per process.
# - Attach them once to each package root logger so every package writes to the same log file.

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import List, Optional

LOG_FILENAME = "sheetmerge.log"

_HANDLERS: List[logging.Handler] = []
_ATTACHED: set[str] = set()


def default_log_dir() -> Path:
    """Return ``$SHEETMERGE_HOME/logs``, defaulting to ``~/SheetMerge/logs``."""

    env = os.getenv("SHEETMERGE_HOME")
    base = Path(env).expanduser() if env else Path.home() / "SheetMerge"
    return base / "logs"


def _shared_handlers(log_dir: Optional[Path] = None) -> List[logging.Handler]:
    if _HANDLERS:
        return _HANDLERS

    directory = log_dir or default_log_dir()
    directory.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.handlers.RotatingFileHandler(
        directory / LOG_FILENAME, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    # stderr keeps stdout free for command output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    _HANDLERS.extend([file_handler, console_handler])
    return _HANDLERS


def attach(root_name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """Configure the *root_name* logger with the shared handlers, once.

    Args:
        root_name: Package logger to configure, e.g. ``sheetmerge``.
        log_dir: Log directory used if the shared handlers do not exist yet.

    Returns:
        The configured package logger.
    """

    logger = logging.getLogger(root_name)
    if root_name in _ATTACHED:
        return logger
    for handler in _shared_handlers(log_dir):
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    _ATTACHED.add(root_name)
    return logger


def get_logger(name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """Return a logger scoped under ``sheetmerge_io``."""

    return attach("sheetmerge_io", log_dir).getChild(name)
