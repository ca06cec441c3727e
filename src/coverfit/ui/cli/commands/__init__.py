"""Command execution package for CLI."""

from coverfit.ui.cli.commands.resize import ResizeCommand

__all__ = ["ResizeCommand"]
