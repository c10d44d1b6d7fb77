"""Where: src/tagsync/config/settings.py
What: Fixed constants shared by the path, metadata, exchange and convert features.
Why: Keep format-level literals in one place instead of scattering them across modules.
"""

from __future__ import annotations

from typing import Final

# File extensions -------------------------------------------------------------

FLAC_EXTENSION: Final[str] = ".flac"
MP3_EXTENSION: Final[str] = ".mp3"

# Batch conversion reads WAV sources and writes FLAC beside them.
CONVERT_SOURCE_EXTENSION: Final[str] = ".wav"
CONVERT_TARGET_EXTENSION: Final[str] = FLAC_EXTENSION

# Companion file consulted by ``list --from-sibling``.
SIBLING_EXTENSION: Final[str] = MP3_EXTENSION


# Vorbis comment keys ---------------------------------------------------------

VORBIS_ALBUM: Final[str] = "album"
VORBIS_ARTIST: Final[str] = "artist"
VORBIS_TITLE: Final[str] = "title"
VORBIS_TRACK: Final[str] = "tracknumber"
# Vorbis comments have no standard year field.
VORBIS_YEAR: Final[str] = "YEAR"


# Exchange table --------------------------------------------------------------

TABLE_HEADER: Final[tuple[str, ...]] = ("path", "album", "artist", "title", "track", "year")
TABLE_DELIMITER: Final[str] = "\t"
ARTIST_SEPARATOR: Final[str] = ","


# External encoder ------------------------------------------------------------

DEFAULT_ENCODER: Final[str] = "ffmpeg"


__all__ = [
    "ARTIST_SEPARATOR",
    "CONVERT_SOURCE_EXTENSION",
    "CONVERT_TARGET_EXTENSION",
    "DEFAULT_ENCODER",
    "FLAC_EXTENSION",
    "MP3_EXTENSION",
    "SIBLING_EXTENSION",
    "TABLE_DELIMITER",
    "TABLE_HEADER",
    "VORBIS_ALBUM",
    "VORBIS_ARTIST",
    "VORBIS_TITLE",
    "VORBIS_TRACK",
    "VORBIS_YEAR",
]
