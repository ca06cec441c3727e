"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from coverfit.config.config import Config
from coverfit.config.paths import default_config_path


def test_load_creates_default_file(portable_repo_root: Path) -> None:
    """A missing config file is created with every value unset."""

    _ = portable_repo_root
    config = Config.load()

    assert default_config_path().exists()
    assert config.log_file is None
    assert config.width is None
    assert config.quality is None
    assert Config.load() is config


def test_save_load_toml(portable_repo_root: Path) -> None:
    """Saved values are read back with paths converted to ``Path``."""

    _ = portable_repo_root
    original = Config(
        log_file=Path("/test/logs/coverfit.log"),
        width=800,
        height=600,
        quality=75,
        file_filter="*.MP3",
        override_file_name="folder.jpg",
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/coverfit.log")
    assert (loaded.width, loaded.height, loaded.quality) == (800, 600, 75)
    assert loaded.file_filter == "*.MP3"
    assert loaded.override_file_name == "folder.jpg"


def test_unknown_keys_are_ignored(
    portable_repo_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    _ = config_path.write_text('width = 320\nbase_path = "/music"\n', encoding="utf-8")
    _ = portable_repo_root

    loaded = Config.load()

    assert loaded.width == 320
    assert "base_path" in caplog.text


def test_invalid_toml_raises(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    config_path = default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    _ = config_path.write_text("width = = 3\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_rendered_file_documents_every_key(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    Config(width=640).save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "width = 640" in content
    assert "# Example: log_file" in content
    assert "# Example: file_filter" in content
    assert "# Example: override_file_name" in content
    assert "\nquality =" not in content
