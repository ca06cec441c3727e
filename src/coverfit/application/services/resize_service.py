"""Application service for resizing embedded covers.

This layer centralizes construction of the cover resizer and its adapters
so that user interfaces only deal with requests and results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import final

from coverfit.features.covers import (
    CoverResizer,
    LoggingProcessLogger,
    ProcessLogger,
    ProcessResult,
    ResizeConfig,
    TagCodecPort,
)
from coverfit.features.covers.adapters import MutagenTagCodec


@dataclass(frozen=True)
class ResizeRequest:
    """Input parameters for a resize run.

    Attributes:
        directory: Root directory holding the audio files.
        config: Settings applied to every file.
    """

    directory: Path
    config: ResizeConfig


@final
class CoverResizeService:
    """Application service that builds and runs the cover resizer."""

    def __init__(
        self,
        *,
        tag_codec_factory: Callable[[], TagCodecPort] | None = None,
        log_factory: Callable[[], ProcessLogger] | None = None,
        resizer_factory: Callable[..., CoverResizer] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories."""

        self._tag_codec_factory: Callable[[], TagCodecPort] = tag_codec_factory or MutagenTagCodec
        self._log_factory: Callable[[], ProcessLogger] = log_factory or LoggingProcessLogger
        self._resizer_factory: Callable[..., CoverResizer] = resizer_factory or CoverResizer

    def build_resizer(self, request: ResizeRequest) -> CoverResizer:
        """Construct a resizer wired with the default adapters."""

        return self._resizer_factory(
            request.config,
            tag_codec=self._tag_codec_factory(),
            log=self._log_factory(),
        )

    def process_directory_with_progress(
        self,
        request: ResizeRequest,
        progress_callback: Callable[[int, int, Path], None] | None = None,
    ) -> list[ProcessResult]:
        """Resize covers below the request directory, reporting progress."""

        resizer = self.build_resizer(request)
        return resizer.resize(request.directory, progress_callback=progress_callback)


__all__ = ["CoverResizeService", "ResizeRequest"]
