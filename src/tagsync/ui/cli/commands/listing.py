"""Implementation of the ``list`` command."""

import sys
from pathlib import Path
from typing import TextIO, final, override

from tagsync.features.exchange import write_table
from tagsync.features.metadata import AttributeExtractor
from tagsync.features.path import PathGroup
from tagsync.platform.logging import logger
from tagsync.shared.attributes import FileAttributes
from tagsync.ui.cli.args.options import ListArgs
from tagsync.ui.cli.commands.executor import CommandExecutor


@final
class ListCommand(CommandExecutor[ListArgs]):
    """Export the attributes of the given files as an exchange table."""

    def __init__(self, args: ListArgs, stdout: TextIO | None = None) -> None:
        super().__init__(args)
        self.stdout = stdout

    def collect(self) -> list[FileAttributes]:
        """Read every file before anything is written, so a failure prints no rows."""
        collection: list[FileAttributes] = []
        for file in self.args.files:
            source = PathGroup(Path(file)).sibling if self.args.from_sibling else Path(file)
            if source != Path(file):
                logger.debug("Reading %s for %s", source, file)
            collection.append(AttributeExtractor.extract(source).with_path(file))
        return collection

    @override
    def execute(self) -> None:
        collection = self.collect()
        count = write_table(collection, self.stdout or sys.stdout)
        logger.debug("Listed %d file(s)", count)
