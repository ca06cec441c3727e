"""Command line interface exports."""

from coverfit.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
