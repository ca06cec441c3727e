"""src/coverfit/features/covers/domain/models.py
What: Value objects describing a resize run and its override sources.
Why: Keep run settings immutable and validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import final

QUALITY_MIN: int = 0
QUALITY_MAX: int = 100

DEFAULT_WIDTH: int = 500
DEFAULT_HEIGHT: int = 500
DEFAULT_QUALITY: int = 90
DEFAULT_FILE_FILTER: str = "*.mp3"
DEFAULT_OVERRIDE_FILE_NAME: str = "cover.jpg"


def clamp_quality(quality: int) -> int:
    """Clamp an image quality value into the inclusive ``[0, 100]`` range."""

    return max(QUALITY_MIN, min(QUALITY_MAX, int(quality)))


@final
@dataclass(frozen=True, slots=True)
class ResizeConfig:
    """Immutable settings shared by every file of one batch run."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    quality: int = DEFAULT_QUALITY
    recursive: bool = False
    file_filter: str = DEFAULT_FILE_FILTER
    override_from_file: bool = False
    override_file_name: str = DEFAULT_OVERRIDE_FILE_NAME

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Width must be a positive integer; received {self.width}")
        if self.height <= 0:
            raise ValueError(f"Height must be a positive integer; received {self.height}")
        if not self.file_filter:
            raise ValueError("File filter must not be empty")
        if self.override_from_file and not self.override_file_name:
            raise ValueError("Override file name must not be empty when override is enabled")
        # Frozen dataclass: assign through object.__setattr__.
        object.__setattr__(self, "quality", clamp_quality(self.quality))

    @property
    def size(self) -> tuple[int, int]:
        """Bounding box as ``(width, height)``."""

        return (self.width, self.height)


@final
@dataclass(frozen=True, slots=True)
class OverrideSource:
    """External cover image found next to an audio file."""

    path: Path


@final
@dataclass(frozen=True, slots=True)
class OverrideImage:
    """Loaded override image bytes and their detected MIME type."""

    source: OverrideSource
    data: bytes = field(repr=False)
    mime: str


__all__ = [
    "DEFAULT_FILE_FILTER",
    "DEFAULT_HEIGHT",
    "DEFAULT_OVERRIDE_FILE_NAME",
    "DEFAULT_QUALITY",
    "DEFAULT_WIDTH",
    "OverrideImage",
    "OverrideSource",
    "QUALITY_MAX",
    "QUALITY_MIN",
    "ResizeConfig",
    "clamp_quality",
]
