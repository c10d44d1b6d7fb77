"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``list`` subcommand."""

    command: Literal["list"]
    files: list[str]
    from_sibling: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ApplyArgs:
    """Command line arguments for the ``apply`` subcommand."""

    command: Literal["apply"]
    # None reads the table from standard input.
    attributes: Path | None
    output: Path
    track_from_filename: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ConvertArgs:
    """Command line arguments for the ``convert`` subcommand."""

    command: Literal["convert"]
    files: list[str]
    encoder: str
    verbose: bool
    quiet: bool


CLIArgs = ListArgs | ApplyArgs | ConvertArgs

__all__ = ["ApplyArgs", "CLIArgs", "ConvertArgs", "ListArgs"]
