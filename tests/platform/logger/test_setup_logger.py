"""Tests for logger bootstrap."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from coverfit.platform.logging import CoverEventRichHandler, setup_logger


def test_console_only_by_default() -> None:
    app_logger = setup_logger(console_level=logging.WARNING)

    assert app_logger.name == "coverfit"
    assert len(app_logger.handlers) == 1
    handler = app_logger.handlers[0]
    assert isinstance(handler, CoverEventRichHandler)
    assert handler.level == logging.WARNING


def test_log_file_is_added_and_created(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "coverfit.log"

    app_logger = setup_logger(log_file=log_file)
    try:
        app_logger.debug("written to file only")
        file_handlers = [h for h in app_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert "written to file only" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    _ = setup_logger(log_file=tmp_path / "a.log")
    app_logger = setup_logger()

    assert len(app_logger.handlers) == 1
