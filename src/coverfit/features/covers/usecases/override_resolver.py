"""src/coverfit/features/covers/usecases/override_resolver.py
What: Find and load a cover image file stored next to an audio file.
Why: Separate the override lookup from the tag mutation that follows it.
"""

from __future__ import annotations

from pathlib import Path

from coverfit.features.covers.domain import (
    ImageDecodeError,
    OverrideImage,
    OverrideImageLoadError,
    OverrideSource,
)

from .image_transform import detect_mime


def resolve_override(audio_path: Path, override_file_name: str) -> OverrideSource | None:
    """Return the override cover in the audio file's directory, if any.

    Args:
        audio_path: Audio file being processed.
        override_file_name: File name of the cover image, e.g. ``cover.jpg``.

    Returns:
        OverrideSource | None: The resolved source when a regular file exists
        there, otherwise None.
    """
    if not override_file_name:
        return None

    candidate = audio_path.absolute().parent / override_file_name
    if not candidate.is_file():
        return None
    return OverrideSource(path=candidate)


def load_override_image(source: OverrideSource) -> OverrideImage:
    """Read the override image and identify its format.

    Raises:
        OverrideImageLoadError: The file cannot be read or is not an image.
    """
    try:
        data = source.path.read_bytes()
    except OSError as exc:
        raise OverrideImageLoadError(source.path, exc.strerror or str(exc)) from exc

    if not data:
        raise OverrideImageLoadError(source.path, "file is empty")

    try:
        mime = detect_mime(data)
    except ImageDecodeError as exc:
        raise OverrideImageLoadError(source.path, str(exc)) from exc

    return OverrideImage(source=source, data=data, mime=mime)


__all__ = ["load_override_image", "resolve_override"]
