"""Console rendering helpers for the CLI."""

from coverfit.ui.cli.display.progress import ProgressDisplay
from coverfit.ui.cli.display.result import ResultDisplay, render_processing_summary

__all__ = ["ProgressDisplay", "ResultDisplay", "render_processing_summary"]
