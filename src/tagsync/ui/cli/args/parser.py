"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagsync import __version__
from tagsync.config.config import Config
from tagsync.platform.logging import logger, setup_logger
from tagsync.ui.cli.args.options import ApplyArgs, CLIArgs, ConvertArgs, ListArgs


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
            prog="tagsync",
            description="Exchange album, artist, title, track and year tags between FLAC and MP3 files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        subparsers = parser.add_subparsers(dest="command", required=True)

        list_parser = subparsers.add_parser(
            "list",
            help="Write the attributes of each file as a tab-separated table to stdout",
        )
        _ = list_parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="FLAC or MP3 files to read",
        )
        _ = list_parser.add_argument(
            "--from-sibling",
            action="store_true",
            help="Read attributes from each file's .mp3 sibling, keyed by the given path",
        )
        ArgumentParser._add_verbosity(list_parser)

        apply_parser = subparsers.add_parser(
            "apply",
            help="Write edited attributes into fresh copies of the referenced FLAC files",
        )
        _ = apply_parser.add_argument(
            "--attributes",
            type=str,
            metavar="FILE",
            help="Table of attributes to apply ('-' or omitted reads stdin)",
        )
        _ = apply_parser.add_argument(
            "--output",
            type=str,
            metavar="DIR",
            help="Directory for output files (defaults to the current directory; created if missing)",
        )
        _ = apply_parser.add_argument(
            "--track-from-filename",
            action="store_true",
            help="Take a missing track number from the leading number in the file name",
        )
        ArgumentParser._add_verbosity(apply_parser)

        convert_parser = subparsers.add_parser(
            "convert",
            help="Encode .wav files to .flac beside the originals",
        )
        _ = convert_parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Files to convert; only names ending in .wav are used",
        )
        ArgumentParser._add_verbosity(convert_parser)

        return parser

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show per-file details",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "list":
            return ListArgs(
                command="list",
                files=list(parsed_args.files),
                from_sibling=parsed_args.from_sibling,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "apply":
            return ArgumentParser._process_apply(parsed_args)

        if command == "convert":
            return ConvertArgs(
                command="convert",
                files=list(parsed_args.files),
                encoder=configuration.encoder,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_apply(parsed_args: argparse.Namespace) -> ApplyArgs:
        attributes = parsed_args.attributes
        attributes_path = Path(attributes) if attributes and attributes != "-" else None
        output = Path(parsed_args.output) if parsed_args.output else Path.cwd()

        return ApplyArgs(
            command="apply",
            attributes=attributes_path,
            output=output,
            track_from_filename=parsed_args.track_from_filename,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
