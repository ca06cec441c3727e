"""Shared pytest fixtures building encoded images and tagged MP3 files."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from io import BytesIO
from pathlib import Path

import pytest
from mutagen.id3 import APIC, ID3, TIT2, Encoding, PictureType
from PIL import Image

# Raw MPEG-1 Layer III frame header followed by silence; tags are all that matter here.
_MPEG_FRAME: bytes = b"\xff\xfb\x90\x64" + b"\x00" * 413


def encode_image(
    size: tuple[int, int],
    image_format: str = "JPEG",
    color: tuple[int, int, int] = (200, 40, 40),
) -> bytes:
    """Return a solid-colour image of ``size`` encoded as ``image_format``."""

    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format=image_format)
    return buffer.getvalue()


def decoded_size(data: bytes) -> tuple[int, int]:
    """Return the pixel size of encoded image bytes."""

    with Image.open(BytesIO(data)) as image:
        return image.size


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Factory fixture producing encoded images."""

    return encode_image


@pytest.fixture
def image_size() -> Callable[[bytes], tuple[int, int]]:
    """Helper fixture decoding image bytes into ``(width, height)``."""

    return decoded_size


@pytest.fixture
def make_mp3() -> Callable[..., Path]:
    """Factory fixture writing an MP3 file with an optional ID3v2 tag.

    Pictures are given as ``(data, mime)`` pairs; each gets its own description
    so that they are stored as separate APIC frames.
    """

    def _make(
        path: Path,
        pictures: Sequence[tuple[bytes, str]] = (),
        *,
        with_tag: bool = True,
        v2_version: int = 4,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(_MPEG_FRAME * 4)
        if not with_tag:
            return path

        tags = ID3()
        tags.add(TIT2(encoding=Encoding.UTF8, text="Track"))
        for index, (data, mime) in enumerate(pictures):
            tags.add(
                APIC(
                    encoding=Encoding.UTF8,
                    mime=mime,
                    type=PictureType.COVER_FRONT if index == 0 else PictureType.COVER_BACK,
                    desc=f"picture-{index}",
                    data=data,
                )
            )
        tags.save(str(path), v2_version=v2_version)
        return path

    return _make
