"""
Summary: Error hierarchy surfaced by every tagsync pipeline.
Why: Let the CLI report any failure uniformly while callers can still match on kind.
"""

from __future__ import annotations

from pathlib import Path


class TagSyncError(Exception):
    """Base class for failures raised by tagsync."""


class ConfigError(TagSyncError):
    """The configuration file could not be parsed or holds invalid values."""


class UnsupportedFormatError(TagSyncError):
    """The file extension matches no supported tag container."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"unsupported file type: {self.path}")


class TagContainerError(TagSyncError):
    """A tag container could not be read or written."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = str(path)
        super().__init__(f"{self.path}: {reason}")


class TableParseError(TagSyncError):
    """The exchange table is malformed."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f"{prefix}{message}")


class OutputExistsError(TagSyncError, FileExistsError):
    """Writing the output would overwrite an existing file."""

    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"writing metadata would overwrite existing file: {self.path}")


class EncoderNotInstalledError(TagSyncError):
    """The external encoder could not be started."""

    def __init__(self, encoder: str) -> None:
        self.encoder = encoder
        super().__init__(f"{encoder} must be installed")


class EncodeError(TagSyncError):
    """The external encoder exited unsuccessfully."""


class NoMatchingInputError(TagSyncError):
    """No input path carried the extension a batch operation needs."""


__all__ = [
    "ConfigError",
    "EncodeError",
    "EncoderNotInstalledError",
    "NoMatchingInputError",
    "OutputExistsError",
    "TableParseError",
    "TagContainerError",
    "TagSyncError",
    "UnsupportedFormatError",
]
