"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagreader.config import Config, log_level_from_name
from tagreader.platform.logging import setup_logger
from tagreader.ui.cli.args.options import ReadArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagreader",
            description="Print the ID3 tags (title, artist, album, ...) of MP3 files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="MP3 files to inspect",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--stream",
            action="store_true",
            help="Read the ID3v2 tag only, without seeking (ignores ID3v1)",
        )
        _ = parser.add_argument(
            "--show-header",
            action="store_true",
            default=None,
            help="Also print the ID3v2 header",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show frame-level debugging information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ReadArgs:
        """Process command line arguments and configure logging.

        Flags override the configuration file.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ReadArgs: Processed command line arguments.

        Raises:
            SystemExit: On invalid usage (raised by argparse).
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()
        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = log_level_from_name(configuration.log_level)

        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        show_header = (
            parsed_args.show_header
            if parsed_args.show_header is not None
            else configuration.show_header
        )

        return ReadArgs(
            paths=[Path(p) for p in parsed_args.paths],
            stream=parsed_args.stream,
            show_header=bool(show_header),
            verbose=is_verbose,
            quiet=is_quiet,
        )


__all__ = ["ArgumentParser"]
