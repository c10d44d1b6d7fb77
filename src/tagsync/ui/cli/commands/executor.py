"""src/tagsync/ui/cli/commands/executor.py
What: Shared base for CLI command executors.
Why: Give every pipeline the same construction and execution shape.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from tagsync.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT

    def __init__(self, args: ArgsT) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        self.args = args

    @abstractmethod
    def execute(self) -> None:
        """Execute the command, raising on the first failure."""
        pass
