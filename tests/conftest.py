"""Shared pytest fixtures: synthesized audio files and isolated configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from mutagen.flac import FLAC
from mutagen.id3 import ID3, TALB, TDRC, TIT2, TPE1, TRCK

from tagsync.config.config import Config

FlacFactory = Callable[..., Path]
Mp3Factory = Callable[..., Path]


def _minimal_flac_bytes() -> bytes:
    """A FLAC stream holding only a STREAMINFO block (44.1 kHz, stereo, 16 bit)."""

    sample_rate, channels, bits_per_sample = 44100, 2, 16
    packed = (sample_rate << 44) | ((channels - 1) << 41) | ((bits_per_sample - 1) << 36)
    body = (
        (4096).to_bytes(2, "big")
        + (4096).to_bytes(2, "big")
        + (0).to_bytes(3, "big")
        + (0).to_bytes(3, "big")
        + packed.to_bytes(8, "big")
        + bytes(16)
    )
    header = bytes([0x80]) + len(body).to_bytes(3, "big")
    return b"fLaC" + header + body


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point configuration at a file that does not exist and forget cached loads."""

    monkeypatch.setenv("TAGSYNC_CONFIG", str(tmp_path / "no-config.toml"))
    Config.reset()
    yield None
    Config.reset()


@pytest.fixture
def flac_factory(tmp_path: Path) -> FlacFactory:
    """Create FLAC files carrying the given vorbis comments.

    Keyword arguments map comment keys to lists of values; pass no keywords
    for a file without a comment block.
    """

    def _create(name: str = "track.flac", directory: Path | None = None, **comments: list[str]) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(_minimal_flac_bytes())
        if comments:
            audio = FLAC(path)
            audio.add_tags()
            assert audio.tags is not None
            for key, values in comments.items():
                audio.tags[key] = values
            audio.save()
        return path

    return _create


@pytest.fixture
def mp3_factory(tmp_path: Path) -> Mp3Factory:
    """Create ID3-only MP3 files with the given standard frames."""

    def _create(
        name: str = "track.mp3",
        *,
        album: str | None = None,
        artist: str | None = None,
        title: str | None = None,
        track: str | None = None,
        year: str | None = None,
    ) -> Path:
        path = tmp_path / name
        tags = ID3()
        if album is not None:
            tags.add(TALB(encoding=3, text=[album]))
        if artist is not None:
            tags.add(TPE1(encoding=3, text=[artist]))
        if title is not None:
            tags.add(TIT2(encoding=3, text=[title]))
        if track is not None:
            tags.add(TRCK(encoding=3, text=[track]))
        if year is not None:
            tags.add(TDRC(encoding=3, text=[year]))
        tags.save(path)
        return path

    return _create
