"""Mutagen-backed tag codec.

Where: src/coverfit/features/covers/adapters/mutagen_tag_codec.py
What: Open MP3 files read-write and expose their ID3v2 APIC frames as pictures.
Why: Confine ID3 frame handling to one adapter behind the ``TagCodecPort`` protocol.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, final

from mutagen import MutagenError
from mutagen.id3 import (
    APIC,
    ID3,
    Encoding,
    ID3NoHeaderError,
    ID3UnsupportedVersionError,
    PictureType,
)

from coverfit.features.covers.domain import FileIOError, TagFamilyMissingError

PICTURE_FRAME_ID: str = "APIC"


@final
class MutagenTagHandle:
    """An open audio file and its parsed ID3v2 tag."""

    def __init__(self, path: Path, fileobj: BinaryIO, tags: ID3 | None) -> None:
        self.path: Path = path
        self._fileobj: BinaryIO = fileobj
        self._tags: ID3 | None = tags

    @property
    def has_id3v2(self) -> bool:
        return self._tags is not None and self._tags.version >= (2, 2, 0)

    def _require_tags(self) -> ID3:
        if self._tags is None:
            raise TagFamilyMissingError(self.path)
        return self._tags

    def _pictures(self) -> list[APIC]:
        return list(self._require_tags().getall(PICTURE_FRAME_ID))

    def picture_count(self) -> int:
        return len(self._pictures())

    def read_picture(self, index: int) -> bytes:
        return bytes(self._pictures()[index].data)

    def write_picture(self, index: int, data: bytes) -> None:
        self._pictures()[index].data = data

    def clear_pictures(self) -> int:
        """Remove every picture frame and return how many were removed."""

        removed = self.picture_count()
        self._require_tags().delall(PICTURE_FRAME_ID)
        return removed

    def add_picture(self, data: bytes, mime: str) -> None:
        self._require_tags().add(
            APIC(
                encoding=Encoding.UTF8,
                mime=mime,
                type=PictureType.COVER_FRONT,
                desc="",
                data=data,
            )
        )

    def save(self) -> None:
        """Write the tag back, replacing frames that share a key."""

        tags = self._require_tags()
        # mutagen writes v2.3 or v2.4 only; v2.2 tags are upgraded to v2.3.
        v2_version = 4 if tags.version >= (2, 4, 0) else 3
        if v2_version == 3:
            # Frames were upgraded to v2.4 on load; convert them back.
            tags.update_to_v23()
        try:
            _ = self._fileobj.seek(0)
            tags.save(self._fileobj, v2_version=v2_version)
        except (OSError, MutagenError) as exc:
            raise FileIOError(self.path, str(exc)) from exc


@final
class MutagenTagCodec:
    """Open MP3 files for ID3v2 picture access."""

    @contextmanager
    def open(self, path: Path) -> Iterator[MutagenTagHandle]:
        """Open ``path`` read-write and parse its ID3v2 tag.

        Raises:
            FileIOError: The file cannot be opened or its tag cannot be parsed.
        """
        try:
            fileobj = open(path, "r+b")
        except OSError as exc:
            raise FileIOError(path, exc.strerror or str(exc)) from exc

        with fileobj:
            try:
                tags: ID3 | None = ID3(fileobj, load_v1=False)
            except (ID3NoHeaderError, ID3UnsupportedVersionError):
                tags = None
            except (OSError, MutagenError) as exc:
                raise FileIOError(path, f"could not read tag: {exc}") from exc

            yield MutagenTagHandle(path, fileobj, tags)


__all__ = ["MutagenTagCodec", "MutagenTagHandle", "PICTURE_FRAME_ID"]
