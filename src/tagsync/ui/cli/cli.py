"""Command line interface for tagsync."""

import sys
from typing import final

from tagsync.platform.logging import logger
from tagsync.shared.errors import TagSyncError
from tagsync.ui.cli.args import ArgumentParser
from tagsync.ui.cli.args.options import ApplyArgs, CLIArgs, ConvertArgs, ListArgs
from tagsync.ui.cli.commands import ApplyCommand, CommandExecutor, ConvertCommand, ListCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Select the pipeline for the parsed subcommand."""
        if isinstance(args, ListArgs):
            return ListCommand(args)
        if isinstance(args, ApplyArgs):
            return ApplyCommand(args)
        assert isinstance(args, ConvertArgs)
        return ConvertCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Any error aborts the run: its description is logged and the
        process exits with status 1.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            CommandProcessor.build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except (TagSyncError, OSError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` before this return is reached.
    """
    CommandProcessor.process_command()
    return 0
