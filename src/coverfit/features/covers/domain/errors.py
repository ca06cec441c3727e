"""src/coverfit/features/covers/domain/errors.py
What: Exception hierarchy raised while resizing embedded covers.
Why: Let the pipeline tell per-picture, per-file and batch failures apart.
"""

from __future__ import annotations

from pathlib import Path


class CoverfitError(Exception):
    """Base class for all cover processing errors."""


class DirectoryNotFoundError(CoverfitError):
    """Raised when the batch root does not exist or is not a directory."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"Not a directory: {directory}")
        self.directory: Path = directory


class TagFamilyMissingError(CoverfitError):
    """Raised when an audio file carries no ID3v2 tag."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File does not have tags of ID3 version 2, no cover available: {path}")
        self.path: Path = path


class FileIOError(CoverfitError):
    """Raised when an audio file cannot be opened or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"I/O error on {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


class ImageTransformError(CoverfitError):
    """Base class for image decode/encode failures."""


class ImageDecodeError(ImageTransformError):
    """Raised when picture bytes are not a decodable image."""


class ImageEncodeError(ImageTransformError):
    """Raised when a resized image cannot be re-encoded."""


class OverrideImageLoadError(CoverfitError):
    """Raised when the external cover image cannot be read or identified."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not load override image {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


__all__ = [
    "CoverfitError",
    "DirectoryNotFoundError",
    "FileIOError",
    "ImageDecodeError",
    "ImageEncodeError",
    "ImageTransformError",
    "OverrideImageLoadError",
    "TagFamilyMissingError",
]
