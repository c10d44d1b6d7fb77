"""Implementation of the ``apply`` command."""

import sys
from typing import TextIO, final, override

from tagsync.features.apply import ApplyEngine, ApplyRequest
from tagsync.features.exchange import read_table
from tagsync.shared.attributes import FileAttributes
from tagsync.ui.cli.args.options import ApplyArgs
from tagsync.ui.cli.commands.executor import CommandExecutor


@final
class ApplyCommand(CommandExecutor[ApplyArgs]):
    """Apply an edited exchange table to copies of the referenced files."""

    def __init__(
        self,
        args: ApplyArgs,
        stdin: TextIO | None = None,
        engine: ApplyEngine | None = None,
    ) -> None:
        super().__init__(args)
        self.stdin = stdin
        self.engine = engine or ApplyEngine()

    def load_attributes(self) -> dict[str, FileAttributes]:
        """Parse the whole table from ``--attributes`` or standard input."""
        if self.args.attributes is None:
            return read_table(self.stdin or sys.stdin)
        with open(self.args.attributes, encoding="utf-8", newline="") as handle:
            return read_table(handle)

    @override
    def execute(self) -> None:
        attributes = self.load_attributes()
        _ = self.engine.run(
            ApplyRequest(
                attributes=attributes,
                output_dir=self.args.output,
                track_from_filename=self.args.track_from_filename,
            )
        )
