"""
Summary: Derive sibling, output and track-number values from one base path.
Why: Keep all filename conventions in one read-only value computed up front.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from tagsync.config.settings import SIBLING_EXTENSION


def parse_track_number(file_name: str) -> int | None:
    """Parse the track number that prefixes ``file_name``.

    The prefix is everything before the first space and must be an unsigned
    integer, so ``"03 Song.flac"`` yields ``3`` while ``"Song.flac"`` and
    ``"abc Song.flac"`` yield ``None``.
    """

    prefix, separator, _ = file_name.partition(" ")
    if not separator:
        return None
    if not prefix.isascii() or not prefix.isdigit():
        return None
    return int(prefix)


@dataclass(frozen=True, slots=True)
class PathGroup:
    """A base path and the related paths derived from it.

    Derived values are computed once at construction and never change.
    """

    base: Path
    sibling_extension: str = SIBLING_EXTENSION
    sibling: Path = field(init=False)
    track: int | None = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", Path(self.base))
        object.__setattr__(self, "sibling", self.base.with_suffix(self.sibling_extension))
        object.__setattr__(self, "track", parse_track_number(self.base.name))

    def output(self, output_dir: Path | str) -> Path:
        """Return ``output_dir`` joined with the base path's file name."""
        return Path(output_dir) / self.base.name


__all__ = ["PathGroup", "parse_track_number"]
