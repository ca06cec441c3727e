"""Configuration management for coverfit."""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from coverfit.config.paths import default_config_path
from coverfit.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field whose string values are converted to ``Path``."""

    return field(default=default, metadata={"path": True})


# (comment lines, keys) for each block of the rendered TOML file.
_TOML_SECTIONS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (
        ("Log file path (optional)", 'Example: log_file = "/path/to/logs/coverfit.log"'),
        ("log_file",),
    ),
    (
        (
            "Maximum cover size in pixels and encoder quality 0-100 (optional)",
            "Defaults: width = 500, height = 500, quality = 90",
        ),
        ("width", "height", "quality"),
    ),
    (
        ("File name pattern of audio files to process (optional)", 'Example: file_filter = "*.mp3"'),
        ("file_filter",),
    ),
    (
        (
            "Name of the cover image used with --override-cover (optional)",
            'Example: override_file_name = "cover.jpg"',
        ),
        ("override_file_name",),
    ),
)


@dataclass
class Config:
    """Application configuration.

    Every value is optional; command line flags take precedence and
    built-in defaults apply when neither is given.
    """

    log_file: Path | None = _path_field()
    width: int | None = None
    height: int | None = None
    quality: int | None = None
    file_filter: str | None = None
    override_file_name: str | None = None

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path") and isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, skipping unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(key for key in data if key not in known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_toml(self) -> str:
        """Render the configuration as a commented TOML document."""

        lines = ["# coverfit configuration file", ""]
        for comments, keys in _TOML_SECTIONS:
            lines.extend(f"# {comment}" for comment in comments)
            for key in keys:
                value = getattr(self, key)
                if value is not None and value != "":
                    lines.append(f"{key} = {_toml_value(value)}")
            lines.append("")
        return "\n".join(lines)

    def save(self, path: Path | None = None) -> Path:
        """Write the configuration file and return its location."""

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self.to_toml(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration to %s: %s", target, e)
            raise
        logger.debug("Configuration saved to %s", target)
        return target

    @classmethod
    def load(cls) -> "Config":
        """Return the process-wide configuration, reading it on first use.

        A commented default file is written when none exists yet.

        Raises:
            tomllib.TOMLDecodeError: The configuration file is not valid TOML.
            OSError: The file cannot be read or the default cannot be written.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()
        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    instance = cls.from_mapping(tomllib.load(f))
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            _ = instance.save(config_file)
            logger.info("Created default configuration at %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, Path)):
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


__all__ = ["Config"]
