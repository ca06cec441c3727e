"""Tests for structured processing log emitters."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from coverfit.features.covers.usecases import (
    LoggingProcessLogger,
    NullProcessLogger,
    ProcessingEvent,
    ensure_process_logger,
)


def test_null_logger_discards_calls(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    NullProcessLogger()(logging.ERROR, ProcessingEvent.FILE_ERROR, "ignored %s", "value", source_path="x")

    assert caplog.records == []


def test_ensure_process_logger_defaults_to_null() -> None:
    existing = LoggingProcessLogger()

    assert isinstance(ensure_process_logger(None), NullProcessLogger)
    assert ensure_process_logger(existing) is existing


def test_logging_logger_attaches_event_and_context(caplog: pytest.LogCaptureFixture) -> None:
    """Event names and context land on the record; paths are stringified."""

    target = logging.getLogger("coverfit.tests")
    caplog.set_level(logging.DEBUG, logger="coverfit.tests")

    LoggingProcessLogger(target)(
        logging.INFO,
        ProcessingEvent.FILE_START,
        "(%d/%d) Processing file %s",
        1,
        2,
        Path("/music/a.mp3"),
        sequence=1,
        source_path=Path("/music/a.mp3"),
    )

    record = caplog.records[-1]
    assert record.getMessage() == "(1/2) Processing file /music/a.mp3"
    assert getattr(record, "processing_event") == "processing.file.start"
    assert getattr(record, "sequence") == 1
    assert getattr(record, "source_path") == "/music/a.mp3"
