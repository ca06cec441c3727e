"""src/coverfit/features/covers/usecases/process_logging.py
What: Structured processing log callbacks and their null object.
Why: Let pipeline steps log through a minimal contract that may be absent.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, final, override

from coverfit.platform.logging import logger as app_logger

from .processing_types import ProcessingEvent


class ProcessLogger(Protocol):
    """Signature for structured processing log emitters."""

    def __call__(
        self,
        level: int,
        event: ProcessingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        ...


@final
class NullProcessLogger(ProcessLogger):
    """Logger that discards every call."""

    @override
    def __call__(
        self,
        level: int,
        event: ProcessingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        del level, event, message, message_args, context


@final
class LoggingProcessLogger(ProcessLogger):
    """Forward processing events to a ``logging.Logger`` with structured extras."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger: logging.Logger = target if target is not None else app_logger

    @override
    def __call__(
        self,
        level: int,
        event: ProcessingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        extra: dict[str, Any] = {"processing_event": event.value}
        for key, value in context.items():
            extra[key] = str(value) if isinstance(value, Path) else value
        self._logger.log(level, message, *message_args, extra=extra, stacklevel=2)


def ensure_process_logger(log: ProcessLogger | None) -> ProcessLogger:
    """Return ``log`` or a null logger when none was supplied."""

    return log if log is not None else NullProcessLogger()


__all__ = [
    "LoggingProcessLogger",
    "NullProcessLogger",
    "ProcessLogger",
    "ensure_process_logger",
]
