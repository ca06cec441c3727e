"""Transient progress bar shown while a directory is processed.

Where: ui/cli/display/progress.py
What: Feed the service's per-file callback into a Rich progress task.
Why: The bar must share the log handler's console so log lines and the bar do not interleave.
"""

from pathlib import Path
from typing import Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID

from coverfit.application.services.resize_service import ResizeRequest
from coverfit.features.covers import ProcessResult
from coverfit.platform.logging import CoverEventRichHandler, logger

ProgressCallback = Callable[[int, int, Path], None]

_DESCRIPTION = "[cyan]Resizing covers..."


@runtime_checkable
class ResizeServiceLike(Protocol):
    """Anything able to process a directory while reporting per-file progress."""

    def process_directory_with_progress(
        self,
        request: ResizeRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> list[ProcessResult]:
        ...


def _log_console() -> Console | None:
    return next(
        (handler.console for handler in logger.handlers if isinstance(handler, CoverEventRichHandler)),
        None,
    )


@final
class _TaskTracker:
    """Progress callback that lazily creates the task once the total is known."""

    def __init__(self, progress: Progress) -> None:
        self._progress = progress
        self._task: TaskID | None = None
        self._seen = 0

    def __call__(self, processed: int, total: int, current_file: Path) -> None:
        _ = current_file
        if self._task is None:
            self._task = self._progress.add_task(_DESCRIPTION, total=total)
        _ = self._progress.update(
            self._task,
            advance=max(0, processed - self._seen),
            description=f"{_DESCRIPTION} {processed}/{total}",
        )
        self._seen = processed


@final
class ProgressDisplay:
    """Runs the resize service, optionally behind a progress bar."""

    def run_with_service(
        self,
        app: ResizeServiceLike,
        request: ResizeRequest,
        *,
        show_progress: bool = True,
    ) -> list[ProcessResult]:
        """Process ``request`` through ``app``.

        Args:
            app: Service doing the work.
            request: Resize operation parameters.
            show_progress: Render a transient progress bar while files are processed.

        Returns:
            One result per processed file.
        """
        if not show_progress:
            return app.process_directory_with_progress(request)

        with Progress(
            transient=True,
            redirect_stdout=False,
            redirect_stderr=False,
            console=_log_console(),
        ) as bar:
            return app.process_directory_with_progress(request, _TaskTracker(bar))


__all__ = ["ProgressCallback", "ProgressDisplay", "ResizeServiceLike"]
