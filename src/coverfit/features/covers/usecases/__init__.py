"""
/*
Path: src/coverfit/features/covers/usecases/__init__.py
Summary: Package exports for cover resize use cases.
Why: Provide a stable namespace for the pipeline, batch loop and result types.
*/
"""

from .batch_runner import FileProcessor, run_batch_resize
from .cover_resizer import CoverResizer
from .image_transform import fit_within, image_dimensions, resize_image
from .override_resolver import load_override_image, resolve_override
from .ports import FileLister, ImageResizer, TagCodecPort, TagHandle
from .process_logging import (
    LoggingProcessLogger,
    NullProcessLogger,
    ProcessLogger,
    ensure_process_logger,
)
from .processing_types import (
    FileStatus,
    OverrideResult,
    PictureResult,
    ProcessResult,
    ProcessingEvent,
    ProcessingLogContext,
)
from .tag_pipeline import FileScope, apply_override, process_file, resize_pictures

__all__ = [
    "CoverResizer",
    "FileLister",
    "FileProcessor",
    "FileScope",
    "FileStatus",
    "ImageResizer",
    "LoggingProcessLogger",
    "NullProcessLogger",
    "OverrideResult",
    "PictureResult",
    "ProcessLogger",
    "ProcessResult",
    "ProcessingEvent",
    "ProcessingLogContext",
    "TagCodecPort",
    "TagHandle",
    "apply_override",
    "ensure_process_logger",
    "fit_within",
    "image_dimensions",
    "load_override_image",
    "process_file",
    "resize_image",
    "resize_pictures",
    "resolve_override",
    "run_batch_resize",
]
