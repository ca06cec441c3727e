"""Domain objects for the cover resizing feature."""

from .errors import (
    CoverfitError,
    DirectoryNotFoundError,
    FileIOError,
    ImageDecodeError,
    ImageEncodeError,
    ImageTransformError,
    OverrideImageLoadError,
    TagFamilyMissingError,
)
from .models import (
    DEFAULT_FILE_FILTER,
    DEFAULT_HEIGHT,
    DEFAULT_OVERRIDE_FILE_NAME,
    DEFAULT_QUALITY,
    DEFAULT_WIDTH,
    OverrideImage,
    OverrideSource,
    ResizeConfig,
    clamp_quality,
)

__all__ = [
    "CoverfitError",
    "DEFAULT_FILE_FILTER",
    "DEFAULT_HEIGHT",
    "DEFAULT_OVERRIDE_FILE_NAME",
    "DEFAULT_QUALITY",
    "DEFAULT_WIDTH",
    "DirectoryNotFoundError",
    "FileIOError",
    "ImageDecodeError",
    "ImageEncodeError",
    "ImageTransformError",
    "OverrideImage",
    "OverrideImageLoadError",
    "OverrideSource",
    "ResizeConfig",
    "TagFamilyMissingError",
    "clamp_quality",
]
