"""Where: src/coverfit/config/settings.py
What: Derived runtime defaults sourced from persisted configuration.
Why: Hand validated values to the CLI without repeating boundary checks.
Trade-offs: - Invalid config values fall back silently to built-in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from coverfit.config.config import Config
from coverfit.features.covers.domain import (
    DEFAULT_FILE_FILTER,
    DEFAULT_HEIGHT,
    DEFAULT_OVERRIDE_FILE_NAME,
    DEFAULT_QUALITY,
    DEFAULT_WIDTH,
)


@final
@dataclass(frozen=True, slots=True)
class RuntimeDefaults:
    """Defaults applied to command line flags that were not given."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    quality: int = DEFAULT_QUALITY
    file_filter: str = DEFAULT_FILE_FILTER
    override_file_name: str = DEFAULT_OVERRIDE_FILE_NAME


def _positive_or(value: object, fallback: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return fallback


def _text_or(value: object, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback


def runtime_defaults(config: Config) -> RuntimeDefaults:
    """Build validated defaults from a loaded configuration."""

    quality = config.quality
    # Quality is clamped later; only reject non-integers here.
    if not isinstance(quality, int) or isinstance(quality, bool):
        quality = DEFAULT_QUALITY

    return RuntimeDefaults(
        width=_positive_or(config.width, DEFAULT_WIDTH),
        height=_positive_or(config.height, DEFAULT_HEIGHT),
        quality=quality,
        file_filter=_text_or(config.file_filter, DEFAULT_FILE_FILTER),
        override_file_name=_text_or(config.override_file_name, DEFAULT_OVERRIDE_FILE_NAME),
    )


__all__ = ["RuntimeDefaults", "runtime_defaults"]
