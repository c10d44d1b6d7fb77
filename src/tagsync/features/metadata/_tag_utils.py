"""Tag utility helpers.

Where: src/tagsync/features/metadata/_tag_utils.py
What: Pure helpers for reading first values and numbers out of raw tag values.
Why: Share the parsing rules between the FLAC and MP3 containers.
"""

from __future__ import annotations

import re
from typing import Final

_INTEGER: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")

__all__ = [
    "first_or_none",
    "parse_int",
    "parse_track",
]


def first_or_none(values: list[str] | None) -> str | None:
    """Return the first element of a multi-valued field, or ``None`` when it is missing or empty."""
    return values[0] if values else None


def parse_int(value: str | None) -> int | None:
    """Parse a plain signed decimal integer, returning ``None`` on anything else."""
    if value is None or _INTEGER.fullmatch(value) is None:
        return None
    return int(value)


def parse_track(value: str | None) -> int | None:
    """Parse a track value in ``number`` or ``number/total`` form.

    Returns ``None`` for missing, negative or non-numeric values.
    """
    if not value:
        return None
    number = value.split(sep="/", maxsplit=1)[0].strip()
    return int(number) if number.isascii() and number.isdigit() else None
