"""Value objects and errors shared across features."""

from .attributes import Attributes, FileAttributes
from .errors import (
    ConfigError,
    EncodeError,
    EncoderNotInstalledError,
    NoMatchingInputError,
    OutputExistsError,
    TableParseError,
    TagContainerError,
    TagSyncError,
    UnsupportedFormatError,
)

__all__ = [
    "Attributes",
    "ConfigError",
    "EncodeError",
    "EncoderNotInstalledError",
    "FileAttributes",
    "NoMatchingInputError",
    "OutputExistsError",
    "TableParseError",
    "TagContainerError",
    "TagSyncError",
    "UnsupportedFormatError",
]
