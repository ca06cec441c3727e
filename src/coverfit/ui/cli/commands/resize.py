"""src/coverfit/ui/cli/commands/resize.py
What: Execute a resize run for a directory root via the CLI.
Why: Bridge parsed arguments with the application service and console displays.
"""

from __future__ import annotations

from coverfit.application.services.resize_service import CoverResizeService, ResizeRequest
from coverfit.features.covers import ProcessResult
from coverfit.ui.cli.args.options import ResizeArgs
from coverfit.ui.cli.display.progress import ProgressDisplay
from coverfit.ui.cli.display.result import ResultDisplay


class ResizeCommand:
    """Command for resizing the covers below a directory."""

    args: ResizeArgs
    app: CoverResizeService
    request: ResizeRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: ResizeArgs, app: CoverResizeService | None = None) -> None:
        """Initialize the command.

        Args:
            args: Command line arguments.
            app: Application service; a default instance is built when omitted.
        """
        self.args = args
        self.app = app or CoverResizeService()
        self.request = ResizeRequest(directory=args.directory, config=args.config)
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()

    def execute(self) -> list[ProcessResult]:
        """Execute the resize run.

        Returns:
            List of processing results.

        Raises:
            DirectoryNotFoundError: The requested directory does not exist.
        """
        results = self.progress_display.run_with_service(
            self.app,
            self.request,
            show_progress=self.args.verbose,
        )
        self.result_display.show_results(results, quiet=not self.args.verbose)
        return results


__all__ = ["ResizeCommand"]
