"""Where coverfit keeps its configuration and log files.

Both live next to the project checkout so a clone stays self-contained:

- ``<project_root>/config/config.toml`` (``COVERFIT_CONFIG`` overrides it)
- ``<project_root>/logs/coverfit.log`` (``COVERFIT_LOG_DIR`` overrides the directory)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

CONFIG_ENV_VAR: Final[str] = "COVERFIT_CONFIG"
LOG_DIR_ENV_VAR: Final[str] = "COVERFIT_LOG_DIR"
LOG_FILE_NAME: Final[str] = "coverfit.log"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first of: explicit path, non-blank environment value, default.

    The chosen path is expanded and made absolute.
    """
    candidate: Path | str | None = explicit_path
    if candidate is None and env_var:
        value = (os.environ if env is None else env).get(env_var, "").strip()
        candidate = value or None
    chosen = Path(candidate) if candidate is not None else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the closest ancestor of ``start`` holding a project marker.

    Falls back to the current working directory when none is found.
    """
    origin = (start or Path(__file__).resolve()).parent
    for directory in (origin, *origin.parents):
        if any((directory / marker).exists() for marker in _ROOT_MARKERS):
            return directory
    return Path.cwd()


def default_config_path() -> Path:
    """Location of the TOML configuration file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    """Directory receiving log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=LOG_DIR_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "logs",
    )


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_DIR_ENV_VAR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
