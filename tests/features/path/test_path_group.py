"""
Summary: Tests for PathGroup path derivation and filename track parsing.
Why: Pin the sibling, output and track-number rules the pipelines rely on.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from tagsync.features.path import PathGroup, parse_track_number


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("03 Song Title.flac", 3),
        ("12 Another One.mp3", 12),
        ("0 Zero.flac", 0),
        ("Song Title.flac", None),
        ("SongTitle.flac", None),
        ("abc Song.flac", None),
        ("-3 Negative.flac", None),
        ("3a Mixed.flac", None),
        (" Leading space.flac", None),
    ],
)
def test_parse_track_number(file_name: str, expected: int | None) -> None:
    """Only an unsigned integer before the first space counts as a track number."""

    assert parse_track_number(file_name) == expected


def test_path_group_derives_sibling_and_track() -> None:
    """Derived values are available straight after construction."""

    group = PathGroup(Path("music/album/03 Song Title.flac"))

    assert group.base == Path("music/album/03 Song Title.flac")
    assert group.sibling == Path("music/album/03 Song Title.mp3")
    assert group.track == 3


def test_path_group_custom_sibling_extension() -> None:
    """The sibling extension can be chosen per group."""

    group = PathGroup(Path("a/b.mp3"), sibling_extension=".flac")

    assert group.sibling == Path("a/b.flac")


def test_path_group_output_joins_file_name(tmp_path: Path) -> None:
    """The output path keeps only the final component of the base path."""

    group = PathGroup(Path("/somewhere/else/01 Intro.flac"))

    assert group.output(tmp_path) == tmp_path / "01 Intro.flac"
    assert group.output("out") == Path("out/01 Intro.flac")


def test_path_group_accepts_strings_and_is_read_only() -> None:
    """String bases are normalized and derived values cannot be reassigned."""

    group = PathGroup("Song.flac")  # pyright: ignore[reportArgumentType]

    assert group.base == Path("Song.flac")
    assert group.track is None
    with pytest.raises(FrozenInstanceError):
        group.sibling = Path("other.mp3")  # pyright: ignore[reportAttributeAccessIssue]
