"""Format-specific tag containers.

Where: src/tagsync/features/metadata/containers.py
What: Wrap mutagen's FLAC and ID3 objects behind the tag container ports.
Why: Keep every format's field mapping in one place so new formats plug in beside them.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Self

from mutagen import MutagenError
from mutagen.flac import FLAC
from mutagen.id3 import ID3, ID3NoHeaderError

from tagsync.config.settings import (
    VORBIS_ALBUM,
    VORBIS_ARTIST,
    VORBIS_TITLE,
    VORBIS_TRACK,
    VORBIS_YEAR,
)
from tagsync.platform.logging import logger
from tagsync.shared.attributes import Attributes
from tagsync.shared.errors import TagContainerError

from ._tag_utils import first_or_none, parse_int, parse_track

__all__ = ["FlacTagContainer", "Mp3TagContainer"]


def _reraise_missing(path: Path, exc: MutagenError) -> None:
    """Surface a missing file as the ``OSError`` mutagen wrapped."""
    cause = exc.__cause__ or exc.__context__
    if isinstance(cause, FileNotFoundError) or not path.exists():
        raise FileNotFoundError(f"No such file: {path}") from exc


class FlacTagContainer:
    """Vorbis comment block of a FLAC file."""

    FORMAT: ClassVar[str] = "FLAC"

    def __init__(self, path: Path, audio: FLAC) -> None:
        self.path = path
        self._audio = audio
        if self._audio.tags is None:
            self._audio.add_tags()

    @classmethod
    def open(cls, path: Path) -> Self:
        """Read the FLAC container at ``path``."""
        try:
            audio = FLAC(path)
        except MutagenError as exc:
            logger.debug("Failed to read %s tags from %s: %s", cls.FORMAT, path, exc)
            _reraise_missing(path, exc)
            raise TagContainerError(path, exc) from exc
        return cls(path, audio)

    def _values(self, key: str) -> list[str] | None:
        tags = self._audio.tags
        assert tags is not None
        return tags.get(key)

    def read_attributes(self) -> Attributes:
        """Normalize the vorbis comments.

        Album, title, track and year take the first value of their field,
        while artist keeps every value of the multi-valued field.
        """
        attributes = Attributes(
            album=first_or_none(self._values(VORBIS_ALBUM)),
            artist=list(self._values(VORBIS_ARTIST) or []),
            title=first_or_none(self._values(VORBIS_TITLE)),
            track=parse_track(first_or_none(self._values(VORBIS_TRACK))),
            year=parse_int(first_or_none(self._values(VORBIS_YEAR))),
        )
        logger.debug("Read %s attributes from %s: %s", self.FORMAT, self.path, attributes)
        return attributes

    def apply_attributes(self, attributes: Attributes) -> None:
        """Mutate the vorbis comments in memory.

        Absent album, title, track and year leave the existing values alone.
        Artist is always replaced, so an empty sequence clears it.
        """
        tags = self._audio.tags
        assert tags is not None

        if attributes.album is not None:
            tags[VORBIS_ALBUM] = [attributes.album]
        if attributes.title is not None:
            tags[VORBIS_TITLE] = [attributes.title]
        if attributes.track is not None:
            tags[VORBIS_TRACK] = [str(attributes.track)]
        if attributes.year is not None:
            tags[VORBIS_YEAR] = [str(attributes.year)]
        tags[VORBIS_ARTIST] = list(attributes.artist)

    def save(self, destination: Path) -> None:
        """Write the comment block into the FLAC file at ``destination``."""
        try:
            self._audio.save(destination)
        except MutagenError as exc:
            logger.debug("Failed to write %s tags to %s: %s", self.FORMAT, destination, exc)
            raise TagContainerError(destination, exc) from exc


class Mp3TagContainer:
    """ID3v2 frame set of an MP3 file. Read-only."""

    FORMAT: ClassVar[str] = "MP3"

    def __init__(self, path: Path, tags: ID3 | None) -> None:
        self.path = path
        self._tags = tags

    @classmethod
    def open(cls, path: Path) -> Self:
        """Read the ID3v2 tag at ``path``; a file without one reads as empty."""
        try:
            tags = ID3(path)
        except ID3NoHeaderError:
            logger.debug("No ID3 header in %s", path)
            tags = None
        except MutagenError as exc:
            logger.debug("Failed to read %s tags from %s: %s", cls.FORMAT, path, exc)
            _reraise_missing(path, exc)
            raise TagContainerError(path, exc) from exc
        return cls(path, tags)

    def _text(self, frame_id: str) -> str | None:
        if self._tags is None:
            return None
        frame = self._tags.get(frame_id)
        if frame is None or not frame.text:
            return None
        return str(frame.text[0])

    def _year(self) -> int | None:
        if self._tags is None:
            return None
        frame = self._tags.get("TDRC")
        if frame is None or not frame.text:
            return None
        return frame.text[0].year

    def read_attributes(self) -> Attributes:
        """Map the standard frames one-to-one onto ``Attributes``."""
        artist = self._text("TPE1")
        attributes = Attributes(
            album=self._text("TALB"),
            artist=[artist] if artist is not None else [],
            title=self._text("TIT2"),
            track=parse_track(self._text("TRCK")),
            year=self._year(),
        )
        logger.debug("Read %s attributes from %s: %s", self.FORMAT, self.path, attributes)
        return attributes
