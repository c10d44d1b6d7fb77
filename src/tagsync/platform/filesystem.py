"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from pathlib import Path

from tagsync.shared.errors import OutputExistsError


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def copy_file_exclusive(source: Path, destination: Path) -> Path:
    """Byte-copy ``source`` to ``destination``, refusing to replace an existing file.

    The destination is opened with exclusive creation, so a file that appears
    between an earlier existence check and the copy is still never overwritten.
    """

    try:
        with open(source, "rb") as src, open(destination, "xb") as dst:
            shutil.copyfileobj(src, dst)
    except FileExistsError as exc:
        raise OutputExistsError(destination) from exc
    shutil.copymode(source, destination)
    return destination


__all__ = ["copy_file_exclusive", "ensure_directory"]
