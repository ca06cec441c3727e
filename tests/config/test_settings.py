"""Tests for runtime defaults derived from configuration."""

from pathlib import Path

from coverfit.config.config import Config
from coverfit.config.settings import RuntimeDefaults, runtime_defaults


def test_unset_values_use_built_in_defaults() -> None:
    assert runtime_defaults(Config()) == RuntimeDefaults()


def test_configured_values_are_used() -> None:
    defaults = runtime_defaults(
        Config(
            log_file=Path("/tmp/coverfit.log"),
            width=800,
            height=640,
            quality=70,
            file_filter=" *.MP3 ",
            override_file_name="folder.jpg",
        )
    )

    assert defaults == RuntimeDefaults(
        width=800,
        height=640,
        quality=70,
        file_filter="*.MP3",
        override_file_name="folder.jpg",
    )


def test_invalid_values_fall_back() -> None:
    """Non-positive sizes, non-integer quality and blank names are ignored."""

    config = Config(width=0, height=-3, file_filter="  ", override_file_name="")
    config.quality = "high"  # pyright: ignore[reportAttributeAccessIssue]

    assert runtime_defaults(config) == RuntimeDefaults()


def test_out_of_range_quality_is_passed_through() -> None:
    """Quality is clamped when the run settings are built, not here."""

    assert runtime_defaults(Config(quality=400)).quality == 400
