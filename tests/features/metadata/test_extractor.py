"""Tests for the attribute extraction facade."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagsync.features.metadata import AttributeExtractor, FlacTagContainer
from tagsync.shared.attributes import Attributes
from tagsync.shared.errors import UnsupportedFormatError

FlacFactory = Callable[..., Path]
Mp3Factory = Callable[..., Path]


class TestAttributeExtractor:
    """Routing by extension."""

    @pytest.mark.parametrize("name", ["song.wav", "song.ogg", "song.FLAC", "song", "song.flac.bak"])
    def test_unsupported_format_performs_no_io(self, name: str, mocker: MockerFixture) -> None:
        flac_open = mocker.Mock()
        mp3_open = mocker.Mock()
        _ = mocker.patch.dict(AttributeExtractor._readers, {".flac": flac_open, ".mp3": mp3_open})  # pyright: ignore[reportPrivateUsage]

        with pytest.raises(UnsupportedFormatError, match="unsupported file type"):
            _ = AttributeExtractor.extract(Path("/does/not/exist") / name)

        flac_open.assert_not_called()
        mp3_open.assert_not_called()

    def test_extract_flac(self, flac_factory: FlacFactory) -> None:
        path = flac_factory(album=["A"], artist=["X", "Y"])

        assert AttributeExtractor.extract(path) == Attributes(album="A", artist=["X", "Y"])

    def test_extract_mp3_from_string_path(self, mp3_factory: Mp3Factory) -> None:
        path = mp3_factory(artist="Solo", year="1985")

        assert AttributeExtractor.extract(str(path)) == Attributes(artist=["Solo"], year=1985)

    def test_open_writable_only_accepts_flac(self, flac_factory: FlacFactory, mp3_factory: Mp3Factory) -> None:
        assert isinstance(AttributeExtractor.open_writable(flac_factory()), FlacTagContainer)

        with pytest.raises(UnsupportedFormatError):
            _ = AttributeExtractor.open_writable(mp3_factory())

    def test_supported_formats(self) -> None:
        assert AttributeExtractor.supported_formats() == frozenset({".flac", ".mp3"})
