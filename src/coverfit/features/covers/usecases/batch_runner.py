"""src/coverfit/features/covers/usecases/batch_runner.py
What: Sequential batch loop resizing covers for every matching file under a root.
Why: Decide continuation policy in one place while the pipeline handles single files.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from coverfit.features.covers.domain import DirectoryNotFoundError, ResizeConfig
from coverfit.platform.filesystem import list_files

from .ports import FileLister
from .process_logging import ProcessLogger, ensure_process_logger
from .processing_types import (
    FileStatus,
    ProcessResult,
    ProcessingEvent,
    ProcessingLogContext,
)


class FileProcessor(Protocol):
    """Callable running the tag pipeline for one file."""

    def __call__(
        self,
        path: Path,
        *,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> ProcessResult:
        ...


def run_batch_resize(
    root_dir: Path,
    config: ResizeConfig,
    *,
    process_file: FileProcessor,
    list_files: FileLister = list_files,
    log: ProcessLogger | None = None,
    progress_callback: Callable[[int, int, Path], None] | None = None,
) -> list[ProcessResult]:
    """Process every file under ``root_dir`` matching the configured filter.

    Raises:
        DirectoryNotFoundError: ``root_dir`` is missing or not a directory.
    """
    emit = ensure_process_logger(log)

    if not root_dir.is_dir():
        emit(
            logging.ERROR,
            ProcessingEvent.DIRECTORY_ERROR,
            "Directory not found: %s",
            root_dir,
            directory=root_dir,
            error_message="directory not found",
        )
        raise DirectoryNotFoundError(root_dir)

    process_id = uuid.uuid4().hex[:12]
    files = list_files(root_dir, config.file_filter, config.recursive)
    total_files = len(files)
    results: list[ProcessResult] = []

    if total_files == 0:
        emit(
            logging.WARNING,
            ProcessingEvent.DIRECTORY_NO_FILES,
            "Found 0 files matching %s in %s",
            config.file_filter,
            root_dir,
            process_id=process_id,
            directory=root_dir,
            total_files=0,
        )
        return results

    stats = ProcessingLogContext(
        process_id=process_id,
        directory=root_dir,
        total_files=total_files,
    )
    emit(
        logging.INFO,
        ProcessingEvent.DIRECTORY_START,
        "Found %d files, which will be processed [id=%s, max=%dx%d, quality=%d, path=%s]",
        total_files,
        process_id,
        config.width,
        config.height,
        config.quality,
        root_dir,
        width=config.width,
        height=config.height,
        **stats.summary_extra(),
    )

    for index, current_file in enumerate(files, start=1):
        emit(
            logging.INFO,
            ProcessingEvent.FILE_START,
            "(%d/%d) Processing file %s",
            index,
            total_files,
            current_file,
            sequence=index,
            total_files=total_files,
            source_path=current_file,
            source_base_path=root_dir,
        )
        try:
            result = process_file(
                current_file,
                sequence=index,
                total=total_files,
                source_root=root_dir,
            )
        except Exception as exc:
            error_message = str(exc) if str(exc) else type(exc).__name__
            emit(
                logging.ERROR,
                ProcessingEvent.FILE_ERROR,
                "Unhandled error processing file #%d/%d [name=%s, error=%s]",
                index,
                total_files,
                current_file.name,
                error_message,
                sequence=index,
                total_files=total_files,
                source_path=current_file,
                source_base_path=root_dir,
                error_message=error_message,
            )
            result = ProcessResult(
                source_path=current_file,
                status=FileStatus.FAILED,
                error_message=error_message,
            )

        results.append(result)
        stats.record(result)

        if progress_callback:
            progress_callback(index, total_files, current_file)

    summary_extra = stats.summary_extra()
    emit(
        logging.INFO,
        ProcessingEvent.DIRECTORY_COMPLETE,
        "Directory processing completed [id=%s, resized=%d, skipped=%d, failed=%d, duration=%.2fs]",
        process_id,
        stats.resized,
        stats.skipped,
        stats.failed,
        summary_extra.get("duration_seconds", 0.0),
        **summary_extra,
    )
    return results


__all__ = ["FileProcessor", "run_batch_resize"]
