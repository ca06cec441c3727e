"""src/coverfit/ui/cli/display/result.py
What: Render the user-facing summary of a resize run.
Why: Keep console output formatting out of the command flow.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from coverfit.features.covers import FileStatus, ProcessResult


def render_processing_summary(
    console: Console,
    results: Sequence[ProcessResult],
    header_label: str = "Processing Summary",
) -> None:
    """Render a formatted summary of processing outcomes.

    Args:
        console: Rich console instance used to render output.
        results: Sequence of processing results to summarize.
        header_label: Label rendered in the summary header.
    """
    resized = [result for result in results if result.status is FileStatus.RESIZED]
    no_tag = [result for result in results if result.status is FileStatus.NO_TAG]
    no_pictures = [result for result in results if result.status is FileStatus.NO_PICTURES]
    failed = [result for result in results if result.status is FileStatus.FAILED]
    picture_failures = sum(len(result.failed_pictures) for result in results)

    console.print(f"\n[bold]{header_label}:[/bold]")
    console.print(f"Total files processed: {len(results)}")
    console.print(f"[green]Covers resized: {len(resized)}[/green]")
    if no_tag:
        console.print(f"[yellow]Without ID3v2 tag: {len(no_tag)}[/yellow]")
    if no_pictures:
        console.print(f"[yellow]Without embedded pictures: {len(no_pictures)}[/yellow]")
    if picture_failures:
        console.print(f"[red]Pictures that could not be resized: {picture_failures}[/red]")

    if not failed:
        return

    console.print(f"[red]Failed: {len(failed)}[/red]")
    for failed_result in failed:
        console.print(f"[red]  • {failed_result.source_path}: {failed_result.error_message}[/red]")


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_results(self, results: list[ProcessResult], quiet: bool = False) -> None:
        """Display processing results.

        Args:
            results: List of processing results.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        render_processing_summary(console=self.console, results=results)


__all__ = ["ResultDisplay", "render_processing_summary"]
