"""src/coverfit/features/covers/usecases/ports.py
What: Protocols describing the tag codec, image resizer and file listing collaborators.
Why: Let the pipeline run against in-memory fakes as well as the real codecs.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol


class TagHandle(Protocol):
    """An audio file opened read-write together with its ID3v2 tag."""

    path: Path

    @property
    def has_id3v2(self) -> bool:
        ...

    def picture_count(self) -> int:
        ...

    def read_picture(self, index: int) -> bytes:
        ...

    def write_picture(self, index: int, data: bytes) -> None:
        ...

    def clear_pictures(self) -> int:
        ...

    def add_picture(self, data: bytes, mime: str) -> None:
        ...

    def save(self) -> None:
        ...


class TagCodecPort(Protocol):
    """Factory opening audio files for tag access."""

    def open(self, path: Path) -> AbstractContextManager[TagHandle]:
        ...


class ImageResizer(Protocol):
    """Bytes-in, bytes-out image resize operation."""

    def __call__(self, data: bytes, width: int, height: int, quality: int) -> bytes:
        ...


class FileLister(Protocol):
    """Directory listing collaborator."""

    def __call__(self, directory: Path, pattern: str, recursive: bool) -> list[Path]:
        ...


__all__ = ["FileLister", "ImageResizer", "TagCodecPort", "TagHandle"]
