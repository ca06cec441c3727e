"""Logger bootstrap.

Where: platform/logging/config.py
What: Attach the Rich console handler and an optional rotating log file to the ``coverfit`` logger.
Why: Every layer logs through one named logger configured in a single place.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from coverfit.config.paths import default_log_file

from .handlers import CoverEventRichHandler

LOGGER_NAME: Final[str] = "coverfit"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

FILE_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    handler = CoverEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        target,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Existing handlers are closed first, so calling this again swaps the
    configuration instead of duplicating output.

    Args:
        log_file: Rotating log file to write; console only when None.
        console_level: Minimum level shown on the console.
        file_level: Minimum level written to ``log_file``.

    Returns:
        logging.Logger: The ``coverfit`` logger.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(Path(log_file), file_level))
    return app_logger


# Console only until the CLI knows which log file to use.
logger: Final[logging.Logger] = setup_logger()


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "LOG_BACKUP_COUNT",
    "MAX_LOG_BYTES",
    "logger",
    "setup_logger",
]
