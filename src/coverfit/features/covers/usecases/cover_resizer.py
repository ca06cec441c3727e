"""src/coverfit/features/covers/usecases/cover_resizer.py
What: Facade wiring run settings, codecs and logging for cover resizing.
Why: Give the CLI and library callers one object with resize/process_file entry points.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from coverfit.features.covers.domain import ResizeConfig
from coverfit.platform.filesystem import list_files

from .batch_runner import run_batch_resize
from .image_transform import resize_image
from .ports import FileLister, ImageResizer, TagCodecPort
from .process_logging import ProcessLogger, ensure_process_logger
from .processing_types import ProcessResult
from .tag_pipeline import process_file


class CoverResizer:
    """Read the pictures stored in ID3v2 tags and resize all of them."""

    config: ResizeConfig
    tag_codec: TagCodecPort
    resizer: ImageResizer
    file_lister: FileLister
    log: ProcessLogger

    def __init__(
        self,
        config: ResizeConfig,
        *,
        tag_codec: TagCodecPort,
        resizer: ImageResizer = resize_image,
        file_lister: FileLister = list_files,
        log: ProcessLogger | None = None,
    ) -> None:
        """Initialize the resizer.

        Args:
            config: Settings applied to every file.
            tag_codec: Tag codec opening audio files.
            resizer: Image transform used for every picture.
            file_lister: Directory listing collaborator.
            log: Structured logger; logging is disabled when omitted.
        """
        self.config = config
        self.tag_codec = tag_codec
        self.resizer = resizer
        self.file_lister = file_lister
        self.log = ensure_process_logger(log)

    def process_file(
        self,
        path: Path,
        *,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> ProcessResult:
        """Process a single audio file."""

        return process_file(
            path,
            self.config,
            tag_codec=self.tag_codec,
            resizer=self.resizer,
            log=self.log,
            sequence=sequence,
            total=total,
            source_root=source_root,
        )

    def resize(
        self,
        directory: Path,
        progress_callback: Callable[[int, int, Path], None] | None = None,
    ) -> list[ProcessResult]:
        """Process every matching file below ``directory``."""

        return run_batch_resize(
            directory,
            self.config,
            process_file=self.process_file,
            list_files=self.file_lister,
            log=self.log,
            progress_callback=progress_callback,
        )


__all__ = ["CoverResizer"]
