"""Command line interface for coverfit."""

import sys
from typing import final

from coverfit.features.covers import DirectoryNotFoundError, ProcessResult
from coverfit.platform.logging import logger
from coverfit.ui.cli.args import ArgumentParser
from coverfit.ui.cli.commands import ResizeCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            results = ResizeCommand(args).execute()
            if CommandProcessor._has_failures(results):
                sys.exit(1)
            return

        except DirectoryNotFoundError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _has_failures(results: list[ProcessResult]) -> bool:
        return any(not result.success for result in results)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0


__all__ = ["CommandProcessor", "main"]
