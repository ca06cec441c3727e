"""Command line argument handling package."""

from coverfit.ui.cli.args.options import ResizeArgs
from coverfit.ui.cli.args.parser import ArgumentParser, UsageError

__all__ = ["ArgumentParser", "ResizeArgs", "UsageError"]
