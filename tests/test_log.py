from __future__ import annotations

import logging
import logging.handlers

from sheetmerge.core.logger import get_logger
from sheetmerge_io.utils.log import LOG_FILENAME, default_log_dir, get_logger as io_get_logger


def _file_handlers(logger: logging.Logger) -> list[logging.handlers.RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]


def test_app_and_io_loggers_share_one_log_file():
    app_logger = get_logger()
    io_logger = io_get_logger("excel_reader")

    app_files = _file_handlers(app_logger)
    io_files = _file_handlers(logging.getLogger("sheetmerge_io"))

    assert io_logger.name == "sheetmerge_io.excel_reader"
    assert len(app_files) == 1
    assert app_files == io_files
    assert app_files[0].baseFilename.endswith(LOG_FILENAME)


def test_repeated_calls_do_not_duplicate_handlers():
    first = get_logger()
    count = len(first.handlers)

    assert get_logger() is first
    assert len(first.handlers) == count


def test_default_log_dir_follows_home_override(tmp_path, monkeypatch):
    monkeypatch.setenv("SHEETMERGE_HOME", str(tmp_path))

    assert default_log_dir() == tmp_path / "logs"
