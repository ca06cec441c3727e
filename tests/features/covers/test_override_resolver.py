"""Tests for locating and loading override cover images."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from coverfit.features.covers.domain import OverrideImageLoadError, OverrideSource
from coverfit.features.covers.usecases.override_resolver import (
    load_override_image,
    resolve_override,
)


def test_resolve_override_finds_sibling_file(tmp_path: Path) -> None:
    audio = tmp_path / "album" / "01.mp3"
    audio.parent.mkdir()
    _ = audio.write_bytes(b"")
    cover = audio.parent / "cover.jpg"
    _ = cover.write_bytes(b"jpeg")

    source = resolve_override(audio, "cover.jpg")

    assert source == OverrideSource(path=cover)


def test_resolve_override_returns_none_when_absent(tmp_path: Path) -> None:
    audio = tmp_path / "01.mp3"
    _ = audio.write_bytes(b"")

    assert resolve_override(audio, "cover.jpg") is None


def test_resolve_override_ignores_directories(tmp_path: Path) -> None:
    """Only regular files count as override covers."""

    audio = tmp_path / "01.mp3"
    _ = audio.write_bytes(b"")
    (tmp_path / "cover.jpg").mkdir()

    assert resolve_override(audio, "cover.jpg") is None


def test_resolve_override_does_not_look_in_parent_directories(tmp_path: Path) -> None:
    _ = (tmp_path / "cover.jpg").write_bytes(b"jpeg")
    audio = tmp_path / "disc1" / "01.mp3"
    audio.parent.mkdir()
    _ = audio.write_bytes(b"")

    assert resolve_override(audio, "cover.jpg") is None


def test_resolve_override_handles_relative_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A bare file name resolves against the current working directory."""

    monkeypatch.chdir(tmp_path)
    _ = (tmp_path / "01.mp3").write_bytes(b"")
    _ = (tmp_path / "folder.png").write_bytes(b"png")

    source = resolve_override(Path("01.mp3"), "folder.png")

    assert source is not None
    assert source.path.resolve() == (tmp_path / "folder.png").resolve()


def test_load_override_image_detects_mime(
    tmp_path: Path, make_image: Callable[..., bytes]
) -> None:
    data = make_image((40, 40), "PNG")
    cover = tmp_path / "cover.jpg"
    _ = cover.write_bytes(data)

    image = load_override_image(OverrideSource(path=cover))

    assert image.data == data
    assert image.mime == "image/png"
    assert image.source.path == cover


def test_load_override_image_rejects_empty_file(tmp_path: Path) -> None:
    cover = tmp_path / "cover.jpg"
    _ = cover.write_bytes(b"")

    with pytest.raises(OverrideImageLoadError, match="empty"):
        _ = load_override_image(OverrideSource(path=cover))


def test_load_override_image_rejects_non_images(tmp_path: Path) -> None:
    cover = tmp_path / "cover.jpg"
    _ = cover.write_text("not an image", encoding="utf-8")

    with pytest.raises(OverrideImageLoadError) as exc_info:
        _ = load_override_image(OverrideSource(path=cover))
    assert exc_info.value.path == cover


def test_load_override_image_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OverrideImageLoadError):
        _ = load_override_image(OverrideSource(path=tmp_path / "gone.jpg"))
