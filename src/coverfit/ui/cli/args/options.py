"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from coverfit.features.covers import ResizeConfig


@final
@dataclass(slots=True)
class ResizeArgs:
    """Validated command line arguments for a resize run."""

    directory: Path
    config: ResizeConfig
    verbose: bool
    log_file: Path


__all__ = ["ResizeArgs"]
