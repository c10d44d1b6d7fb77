"""Command implementations package."""

from tagsync.ui.cli.commands.apply import ApplyCommand
from tagsync.ui.cli.commands.convert import ConvertCommand
from tagsync.ui.cli.commands.executor import CommandExecutor
from tagsync.ui.cli.commands.listing import ListCommand

__all__ = ["ApplyCommand", "CommandExecutor", "ConvertCommand", "ListCommand"]
