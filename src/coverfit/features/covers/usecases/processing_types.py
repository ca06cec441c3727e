"""src/coverfit/features/covers/usecases/processing_types.py
Where: Covers feature usecases layer.
What: Shared enums and dataclasses for the cover resize flow.
Why: Keep the pipeline lean by centralising result and event definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class ProcessingEvent(StrEnum):
    """Structured event identifiers for cover processing logs."""

    DIRECTORY_START = "processing.directory.start"
    DIRECTORY_COMPLETE = "processing.directory.complete"
    DIRECTORY_ERROR = "processing.directory.error"
    DIRECTORY_NO_FILES = "processing.directory.no_files"
    FILE_START = "processing.file.start"
    FILE_SUCCESS = "processing.file.success"
    FILE_SKIP_NO_TAG = "processing.file.skip.no_tag"
    FILE_SKIP_NO_PICTURES = "processing.file.skip.no_pictures"
    FILE_ERROR = "processing.file.error"
    PICTURE_RESIZE = "processing.picture.resize"
    PICTURE_ERROR = "processing.picture.error"
    OVERRIDE_APPLIED = "processing.override.applied"
    OVERRIDE_MISSING = "processing.override.missing"
    OVERRIDE_ERROR = "processing.override.error"


class FileStatus(StrEnum):
    """Outcome of processing one audio file."""

    RESIZED = "resized"
    NO_TAG = "no_tag"
    NO_PICTURES = "no_pictures"
    FAILED = "failed"


@dataclass(slots=True)
class PictureResult:
    """Outcome of resizing one embedded picture."""

    index: int
    success: bool
    original_size: int = 0
    resized_size: int | None = None
    error_message: str | None = None


@dataclass
class OverrideResult:
    """Outcome of the cover override step for one file."""

    applied: bool
    source_path: Path | None = None
    removed_pictures: int = 0


@dataclass
class ProcessResult:
    """Result of processing an audio file."""

    source_path: Path
    status: FileStatus = FileStatus.FAILED
    written: bool = False
    override: OverrideResult | None = None
    picture_results: list[PictureResult] = field(default_factory=list)
    error_message: str | None = None

    @property
    def success(self) -> bool:
        """Whether the file finished without a file-level failure."""

        return self.status is not FileStatus.FAILED

    @property
    def override_applied(self) -> bool:
        return self.override is not None and self.override.applied

    @property
    def failed_pictures(self) -> list[PictureResult]:
        return [result for result in self.picture_results if not result.success]


@dataclass(slots=True)
class ProcessingLogContext:
    """Mutable bookkeeping for a batch run."""

    process_id: str
    directory: Path
    total_files: int
    start_time: float = field(default_factory=time.perf_counter)
    resized: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, result: ProcessResult) -> None:
        """Count a file result under the matching bucket."""

        if result.status is FileStatus.RESIZED:
            self.resized += 1
        elif result.status is FileStatus.FAILED:
            self.failed += 1
        else:
            self.skipped += 1

    def duration_seconds(self) -> float:
        """Return the elapsed processing time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "process_id": self.process_id,
            "directory": str(self.directory),
            "total_files": self.total_files,
            "resized": self.resized,
            "skipped": self.skipped,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "FileStatus",
    "OverrideResult",
    "PictureResult",
    "ProcessResult",
    "ProcessingEvent",
    "ProcessingLogContext",
]
