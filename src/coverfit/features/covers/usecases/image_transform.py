"""src/coverfit/features/covers/usecases/image_transform.py
Where: Covers feature usecases layer.
What: Fit encoded images into a bounding box and re-encode them with Pillow.
Why: Keep the only pixel-touching code a pure bytes-in, bytes-out function.
"""

from __future__ import annotations

from io import BytesIO

from PIL import Image

from coverfit.features.covers.domain import ImageDecodeError, ImageEncodeError


def fit_within(size: tuple[int, int], width: int, height: int) -> tuple[int, int]:
    """Return the largest aspect-preserving size that fits ``width`` x ``height``.

    Smaller images are scaled up to touch the bounding box. Each dimension is
    at least one pixel.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Bounding box must be positive; received {width}x{height}")

    original_width, original_height = size
    if original_width <= 0 or original_height <= 0:
        raise ValueError(f"Cannot fit an empty image of size {original_width}x{original_height}")

    scale = min(width / original_width, height / original_height)
    return (
        max(1, min(width, round(original_width * scale))),
        max(1, min(height, round(original_height * scale))),
    )


def _decode(data: bytes) -> Image.Image:
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise ImageDecodeError(f"Picture is not a decodable image: {exc}") from exc

    if image.format is None:
        raise ImageDecodeError("Picture format could not be determined")
    return image


def image_dimensions(data: bytes) -> tuple[int, int]:
    """Return ``(width, height)`` of encoded image bytes."""

    with _decode(data) as image:
        return image.size


def detect_mime(data: bytes) -> str:
    """Return the MIME type Pillow associates with encoded image bytes."""

    with _decode(data) as image:
        return image.get_format_mimetype() or f"image/{(image.format or '').lower()}"


def resize_image(data: bytes, width: int, height: int, quality: int) -> bytes:
    """Resize encoded image bytes to fit a bounding box and re-encode them.

    Args:
        data: Encoded image (JPEG, PNG, ...).
        width: Maximum width in pixels.
        height: Maximum height in pixels.
        quality: Encoder quality, already clamped to ``[0, 100]``.

    Returns:
        bytes: The image encoded in its original format.

    Raises:
        ImageDecodeError: ``data`` is not a decodable image.
        ImageEncodeError: The resized image could not be encoded.
    """
    with _decode(data) as image:
        image_format = image.format
        target_size = fit_within(image.size, width, height)

        # Palette and bilevel images fall back to nearest neighbour inside Pillow.
        resized = image if image.size == target_size else image.resize(
            target_size, Image.Resampling.LANCZOS
        )

        buffer = BytesIO()
        try:
            resized.save(buffer, format=image_format, quality=quality)
        except (OSError, ValueError, KeyError) as exc:
            raise ImageEncodeError(
                f"Could not encode resized {image_format} image: {exc}"
            ) from exc
        return buffer.getvalue()


__all__ = ["detect_mime", "fit_within", "image_dimensions", "resize_image"]
