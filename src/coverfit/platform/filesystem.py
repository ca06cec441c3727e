"""src/coverfit/platform/filesystem.py
What: Directory listing helpers used by the batch driver.
Why: Keep raw filesystem traversal out of the cover processing use cases.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path


def matches_pattern(file_name: str, pattern: str) -> bool:
    """Case-insensitive shell-style match of a file name against ``pattern``."""

    return fnmatchcase(file_name.casefold(), pattern.casefold())


def list_files(directory: Path, pattern: str, recursive: bool) -> list[Path]:
    """List regular files under ``directory`` whose names match ``pattern``.

    Args:
        directory: Root directory to enumerate.
        pattern: Shell-style glob applied to file names, e.g. ``*.mp3``.
        recursive: Descend into subdirectories when True.

    Returns:
        list[Path]: Matching files sorted by path so the order is stable.
    """
    candidates = directory.rglob("*") if recursive else directory.iterdir()
    matches = [
        path
        for path in candidates
        if path.is_file() and matches_pattern(path.name, pattern)
    ]
    return sorted(matches)


__all__ = ["list_files", "matches_pattern"]
