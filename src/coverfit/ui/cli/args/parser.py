"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, final, override

from coverfit.config.config import Config
from coverfit.config.settings import RuntimeDefaults, runtime_defaults
from coverfit.features.covers import ResizeConfig
from coverfit.platform.logging import DEFAULT_LOG_FILE, setup_logger
from coverfit.ui.cli.args.options import ResizeArgs

PROG_NAME: str = "coverfit"
USAGE_HINT: str = f"Try '{PROG_NAME} --help' for more information."
MISSING_DIRECTORY_HINT: str = (
    "No path to a directory with MP3 files provided. "
    f"Please use '{PROG_NAME} -d \"/path/to/My Music/Amon Amarth\"' to choose a directory."
)


class UsageError(Exception):
    """Raised instead of exiting when argparse rejects the command line."""


@final
class _RaisingArgumentParser(argparse.ArgumentParser):
    """``argparse.ArgumentParser`` that raises instead of printing and exiting."""

    @override
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        ``-h`` selects the height, so the built-in help flag is replaced by ``--help``.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _RaisingArgumentParser(
            prog=PROG_NAME,
            description="Resize the images included in the tags of all MP3 files in a given directory.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )
        _ = parser.add_argument(
            "-d",
            "--dir",
            dest="directory",
            type=str,
            metavar="DIR",
            help="Directory containing MP3 files, which should be processed",
        )
        _ = parser.add_argument(
            "-w",
            "--width",
            type=str,
            metavar="PX",
            help="New max width of images",
        )
        _ = parser.add_argument(
            "-h",
            "--height",
            type=str,
            metavar="PX",
            help="New max height of images",
        )
        _ = parser.add_argument(
            "-q",
            "--quality",
            type=str,
            metavar="0-100",
            help="Compress image after resizing (value: 0 - 100)",
        )
        _ = parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Also process files in subdirectories",
        )
        _ = parser.add_argument(
            "-f",
            "--filter",
            dest="file_filter",
            type=str,
            metavar="PATTERN",
            help="Only process files whose name matches this pattern (default: *.mp3)",
        )
        _ = parser.add_argument(
            "-o",
            "--override-cover",
            action="store_true",
            help="Replace embedded pictures with a cover image stored next to each file",
        )
        _ = parser.add_argument(
            "--cover-name",
            type=str,
            metavar="NAME",
            help="File name of the cover image used with --override-cover (default: cover.jpg)",
        )
        _ = parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show progress and other messages",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            metavar="PATH",
            help="Write a detailed log to this file",
        )
        _ = parser.add_argument(
            "--help",
            action="store_true",
            help="Show information about usage",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ResizeArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ResizeArgs: Validated command line arguments.

        Raises:
            SystemExit: When help was requested, the directory is missing or a
                value is malformed.
        """
        parser = ArgumentParser.create_parser()
        try:
            parsed_args = parser.parse_args(args_list)
        except UsageError:
            print(f"Oops something went wrong. {USAGE_HINT}")
            sys.exit(2)

        if parsed_args.help:
            parser.print_help()
            sys.exit(0)

        if parsed_args.directory is None:
            print(MISSING_DIRECTORY_HINT)
            sys.exit(0)

        configuration = Config.load()
        defaults = runtime_defaults(configuration)

        try:
            width = ArgumentParser._parse_int(parsed_args.width, defaults.width)
            height = ArgumentParser._parse_int(parsed_args.height, defaults.height)
            quality = ArgumentParser._parse_int(parsed_args.quality, defaults.quality)
        except ValueError:
            parser.print_help()
            sys.exit(2)

        log_level = logging.INFO if parsed_args.verbose else logging.WARNING
        log_file = Path(parsed_args.log_file) if parsed_args.log_file else (
            configuration.log_file or DEFAULT_LOG_FILE
        )
        _ = setup_logger(log_file=log_file, console_level=log_level)

        try:
            config = ArgumentParser._build_config(parsed_args, defaults, width, height, quality)
        except ValueError as exc:
            print(f"{exc}. {USAGE_HINT}")
            parser.print_help()
            sys.exit(2)

        return ResizeArgs(
            directory=Path(parsed_args.directory),
            config=config,
            verbose=parsed_args.verbose,
            log_file=log_file,
        )

    @staticmethod
    def _parse_int(raw: str | None, default: int) -> int:
        if raw is None:
            return default
        return int(raw.strip())

    @staticmethod
    def _build_config(
        parsed_args: argparse.Namespace,
        defaults: RuntimeDefaults,
        width: int,
        height: int,
        quality: int,
    ) -> ResizeConfig:
        return ResizeConfig(
            width=width,
            height=height,
            quality=quality,
            recursive=parsed_args.recursive,
            file_filter=parsed_args.file_filter or defaults.file_filter,
            override_from_file=parsed_args.override_cover,
            override_file_name=parsed_args.cover_name or defaults.override_file_name,
        )


__all__ = ["ArgumentParser", "UsageError"]
