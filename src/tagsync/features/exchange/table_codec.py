"""Tab-delimited exchange table codec.

Where: src/tagsync/features/exchange/table_codec.py
What: Serialize ``FileAttributes`` to rows under a fixed header and parse them back.
Why: Let users edit attributes for many files in a spreadsheet or text editor.

Absent fields render as empty cells and empty cells parse back as absent.
Artists are joined with a comma, so an artist name that itself contains a
comma reads back as several artists.
"""

from __future__ import annotations

import csv
import re
from collections.abc import Iterable, Mapping
from typing import Final, TextIO

from tagsync.config.settings import ARTIST_SEPARATOR, TABLE_DELIMITER, TABLE_HEADER
from tagsync.platform.logging import logger
from tagsync.shared.attributes import Attributes, FileAttributes
from tagsync.shared.errors import TableParseError

__all__ = ["parse_row", "read_table", "render_row", "write_table"]

_INTEGER: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


def _optional(value: object | None) -> str:
    return "" if value is None else str(value)


def render_row(item: FileAttributes) -> list[str]:
    """Render one record as cells in ``TABLE_HEADER`` order."""
    attributes = item.attributes
    return [
        item.path,
        _optional(attributes.album),
        ARTIST_SEPARATOR.join(attributes.artist),
        _optional(attributes.title),
        _optional(attributes.track),
        _optional(attributes.year),
    ]


def write_table(items: Iterable[FileAttributes], stream: TextIO) -> int:
    """Write the header and one row per record, in the order given.

    Returns:
        int: Number of data rows written.
    """
    writer = csv.writer(stream, delimiter=TABLE_DELIMITER, lineterminator="\n")
    writer.writerow(TABLE_HEADER)
    count = 0
    for item in items:
        writer.writerow(render_row(item))
        count += 1
    stream.flush()
    return count


def _parse_optional_str(value: str) -> str | None:
    return value if value != "" else None


def _parse_optional_int(column: str, value: str, *, line: int | None, minimum: int | None = None) -> int | None:
    if value == "":
        return None
    if _INTEGER.fullmatch(value) is None:
        raise TableParseError(f"{column}: expected an integer, got {value!r}", line=line)
    number = int(value)
    if minimum is not None and number < minimum:
        raise TableParseError(f"{column}: expected a value >= {minimum}, got {number}", line=line)
    return number


def parse_row(row: Mapping[str, str], *, line: int | None = None) -> FileAttributes:
    """Parse one row keyed by header name.

    Raises:
        TableParseError: If a numeric column holds something other than an integer.
    """
    artist = row["artist"]
    attributes = Attributes(
        album=_parse_optional_str(row["album"]),
        artist=artist.split(ARTIST_SEPARATOR) if artist != "" else [],
        title=_parse_optional_str(row["title"]),
        track=_parse_optional_int("track", row["track"], line=line, minimum=0),
        year=_parse_optional_int("year", row["year"], line=line),
    )
    return attributes.with_path(row["path"])


def _check_header(fieldnames: list[str] | None) -> None:
    if fieldnames is None:
        raise TableParseError("missing header", line=1)
    if sorted(fieldnames) != sorted(TABLE_HEADER):
        expected = TABLE_DELIMITER.join(TABLE_HEADER)
        raise TableParseError(f"expected header {expected!r}, got {fieldnames!r}", line=1)


def read_table(stream: TextIO) -> dict[str, FileAttributes]:
    """Parse a whole table and index the records by path.

    A path that repeats keeps the values from its last row. Any malformed
    row aborts the parse, so nothing is returned for partial input.

    Raises:
        TableParseError: On a bad header, wrong arity or a non-integer number.
    """
    reader = csv.DictReader(stream, delimiter=TABLE_DELIMITER)
    result: dict[str, FileAttributes] = {}
    try:
        _check_header(reader.fieldnames)
        for row in reader:
            line = reader.line_num
            if None in row or any(value is None for value in row.values()):
                raise TableParseError(
                    f"expected {len(TABLE_HEADER)} fields", line=line
                )
            item = parse_row(row, line=line)
            if item.path in result:
                logger.debug("Path %s repeats on line %d; last row wins", item.path, line)
                del result[item.path]
            result[item.path] = item
    except csv.Error as exc:
        raise TableParseError(str(exc), line=reader.line_num) from exc
    return result
