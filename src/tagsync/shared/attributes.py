# Where: tagsync.shared.attributes
# What: Unified attribute record read from and written to every tag container.
# Why: One model lets the exchange table and the apply engine ignore container formats.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class Attributes:
    """Descriptive metadata for one track.

    ``None`` means absent; it is never the same as an empty string.
    """

    album: str | None = None
    artist: list[str] = field(default_factory=list)
    title: str | None = None
    track: int | None = None
    year: int | None = None

    def with_path(self, path: Path | str) -> "FileAttributes":
        """Annotate these attributes with the file they belong to."""
        return FileAttributes(path=str(path), attributes=self)


@dataclass(slots=True)
class FileAttributes:
    """Attributes keyed by the path string used in the exchange table."""

    path: str
    attributes: Attributes


__all__ = ["Attributes", "FileAttributes"]
