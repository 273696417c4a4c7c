"""Command line interface for tagreader."""

import sys
from collections.abc import Sequence
from typing import final

from tagreader.platform.logging import logger
from tagreader.ui.cli.args import ArgumentParser
from tagreader.ui.cli.commands import ReadCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 when any file could not be read.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            results = ReadCommand(args).execute()
            if any(not r.success for r in results):
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)


def main(args_list: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command(args_list)
    return 0
