# Where: coverfit.features.covers.__init__
# What: Expose the cover resizing services and shared dataclasses.
# Why: Provide a cohesive import surface for UI and integration layers.

from .domain import (
    CoverfitError,
    DirectoryNotFoundError,
    FileIOError,
    ImageDecodeError,
    ImageEncodeError,
    OverrideImageLoadError,
    OverrideSource,
    ResizeConfig,
    TagFamilyMissingError,
)
from .usecases import (
    CoverResizer,
    FileStatus,
    LoggingProcessLogger,
    NullProcessLogger,
    PictureResult,
    ProcessLogger,
    ProcessResult,
    ProcessingEvent,
    TagCodecPort,
)

__all__ = [
    "CoverResizer",
    "CoverfitError",
    "DirectoryNotFoundError",
    "FileIOError",
    "FileStatus",
    "ImageDecodeError",
    "ImageEncodeError",
    "LoggingProcessLogger",
    "NullProcessLogger",
    "OverrideImageLoadError",
    "OverrideSource",
    "PictureResult",
    "ProcessLogger",
    "ProcessResult",
    "ProcessingEvent",
    "ResizeConfig",
    "TagCodecPort",
    "TagFamilyMissingError",
]
