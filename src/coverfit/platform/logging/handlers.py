"""Rich console handler for structured processing events.

Where: platform/logging/handlers.py
What: Turn ``processing_event`` records into one-line, icon-prefixed console messages.
Why: The pipeline logs facts as extras; how they look on screen is decided here.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

ELLIPSIS: str = "…"
PATH_STYLE: Style = Style(color="white")
SEPARATOR_STYLE: Style = Style(color="magenta")


def _pure(raw: str) -> PurePath:
    return PureWindowsPath(raw) if "\\" in raw else PurePosixPath(raw)


def compact_path(raw: str, base: str | None = None, limit: int = 4) -> str:
    """Shorten ``raw`` for display.

    The path is shown relative to ``base`` when it lies beneath it. Only the
    last ``limit`` segments are kept; dropped leading segments become ``…``.
    """
    path = _pure(raw)
    if base:
        base_path = _pure(base)
        if path != base_path and path.is_relative_to(base_path):
            path = path.relative_to(base_path)

    separator = "\\" if isinstance(path, PureWindowsPath) else "/"
    segments = [part for part in path.parts if part != path.anchor]
    prefix = path.anchor.rstrip("\\/") + separator if path.anchor else ""
    if len(segments) > limit:
        segments = [ELLIPSIS, *segments[-limit:]]
    return (prefix + separator.join(segments)) or "."


def _styled_path(display: str) -> Text:
    text = Text()
    for char in display:
        _ = text.append(char, style=SEPARATOR_STYLE if char in "/\\…" else PATH_STYLE)
    return text


class CoverEventRichHandler(RichHandler):
    """Rich handler rendering cover processing events; other records render normally."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "processing.directory.start": ("🚀", "cyan"),
        "processing.directory.complete": ("✅", "green"),
        "processing.directory.error": ("❌", "red"),
        "processing.directory.no_files": ("ℹ️", "yellow"),
        "processing.file.start": ("🎧", "blue"),
        "processing.file.success": ("🎉", "green"),
        "processing.file.skip.no_tag": ("⛔", "red"),
        "processing.file.skip.no_pictures": ("↪️", "yellow"),
        "processing.file.error": ("⛔", "red"),
        "processing.picture.resize": ("🖼️", "magenta"),
        "processing.picture.error": ("⚠️", "red"),
        "processing.override.applied": ("📦", "magenta"),
        "processing.override.missing": ("ℹ️", "yellow"),
        "processing.override.error": ("❌", "red"),
    }
    _FILE_LABELS: ClassVar[dict[str, str]] = {
        "processing.file.start": "Processing ",
        "processing.file.success": "Resized covers in ",
        "processing.file.skip.no_tag": "No ID3v2 tag, no cover available: ",
        "processing.file.skip.no_pictures": "No embedded pictures in ",
        "processing.file.error": "Failed ",
        "processing.picture.resize": "Resized picture ",
        "processing.picture.error": "Could not resize picture ",
        "processing.override.applied": "Replaced pictures with ",
        "processing.override.missing": "No override cover next to ",
        "processing.override.error": "Could not load override cover for ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            rich_tracebacks=True,
            markup=True,
        )
        super().__init__(*args, **kwargs)

    def _path(self, raw: object, base: object = None) -> Text:
        return _styled_path(
            compact_path(str(raw), str(base) if base else None, self._PATH_SEGMENT_LIMIT)
        )

    @staticmethod
    def _int(record: logging.LogRecord, name: str) -> int | None:
        value = getattr(record, name, None)
        return value if isinstance(value, int) and not isinstance(value, bool) else None

    def _directory_body(self, record: logging.LogRecord, event: str, body: Text) -> None:
        total_files = self._int(record, "total_files")
        if event == "processing.directory.start":
            _ = body.append(f"Found {total_files} files" if total_files is not None else "Directory start")
            width, height = self._int(record, "width"), self._int(record, "height")
            if width is not None and height is not None:
                _ = body.append(f" [max {width}x{height}]")
        elif event == "processing.directory.no_files":
            _ = body.append("Found 0 files")
        elif event == "processing.directory.complete":
            _ = body.append("Directory complete")
            metrics = [
                f"{name}={value}"
                for name in ("resized", "skipped", "failed")
                if (value := self._int(record, name)) is not None
            ]
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(f" [{', '.join(metrics)}]")
        else:
            _ = body.append("Directory error")
            error = getattr(record, "error_message", None)
            if error:
                _ = body.append(f" ({error})")

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._path(directory))

    def _file_body(self, record: logging.LogRecord, event: str, body: Text) -> None:
        sequence = self._int(record, "sequence")
        total_files = self._int(record, "total_files")
        if sequence:
            _ = body.append(f"({sequence}/{total_files}) " if total_files else f"({sequence}) ")

        _ = body.append(self._FILE_LABELS.get(event, ""))
        picture_index = self._int(record, "picture_index")
        if picture_index is not None:
            _ = body.append(f"#{picture_index + 1} in ")

        override_path = getattr(record, "override_path", None)
        if event == "processing.override.applied" and override_path:
            _ = body.append_text(self._path(override_path))
            _ = body.append(" for ")

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._path(source_path, getattr(record, "source_base_path", None)))

        details = self._details(record, event)
        if details:
            _ = body.append(f" ({', '.join(details)})")

    def _details(self, record: logging.LogRecord, event: str) -> list[str]:
        details: list[str] = []
        if event == "processing.picture.resize":
            original_size = self._int(record, "original_size")
            resized_size = self._int(record, "resized_size")
            if original_size is not None and resized_size is not None:
                details.append(f"{original_size} → {resized_size} bytes")
        elif event == "processing.file.success":
            pictures = self._int(record, "pictures")
            if pictures is not None:
                details.append(f"pictures={pictures}")
            duration_ms = getattr(record, "duration_ms", None)
            if isinstance(duration_ms, (int, float)):
                details.append(f"{duration_ms:.2f} ms")

        error_message = getattr(record, "error_message", None)
        if error_message and event.endswith("error"):
            details.append(str(error_message))
        return details

    def render_event(self, record: logging.LogRecord) -> Text | None:
        """Render a processing event record, or return None for plain records."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        body = Text(style=Style(color=color))
        if event.startswith("processing.directory"):
            self._directory_body(record, event, body)
        else:
            self._file_body(record, event, body)

        text = Text(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = self.render_event(record)
        if rendered is not None:
            return rendered
        return super().render_message(record, message)


__all__ = ["CoverEventRichHandler", "compact_path"]
