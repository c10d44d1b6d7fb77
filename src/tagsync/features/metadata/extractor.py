"""Attribute extraction facade.

Where: src/tagsync/features/metadata/extractor.py
What: Route a path to the tag container for its extension.
Why: Callers ask for attributes or a writable container without knowing formats.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ClassVar

from tagsync.config.settings import FLAC_EXTENSION, MP3_EXTENSION
from tagsync.shared.attributes import Attributes
from tagsync.shared.errors import UnsupportedFormatError

from .containers import FlacTagContainer, Mp3TagContainer
from .ports import TagContainerPort, TagReaderPort

__all__ = ["AttributeExtractor"]


class AttributeExtractor:
    """Facade for reading and opening tag containers.

    The extension is matched exactly and case-sensitively; anything other
    than ``.flac`` or ``.mp3`` is rejected before any file is touched.
    """

    _readers: ClassVar[dict[str, Callable[[Path], TagReaderPort]]] = {
        FLAC_EXTENSION: FlacTagContainer.open,
        MP3_EXTENSION: Mp3TagContainer.open,
    }

    _writers: ClassVar[dict[str, Callable[[Path], TagContainerPort]]] = {
        FLAC_EXTENSION: FlacTagContainer.open,
    }

    @classmethod
    def supported_formats(cls) -> frozenset[str]:
        """Extensions ``extract`` accepts."""
        return frozenset(cls._readers)

    @classmethod
    def open_reader(cls, path: Path | str) -> TagReaderPort:
        """Open the container for ``path`` for reading.

        Raises:
            UnsupportedFormatError: If the extension matches no supported format.
        """
        path = Path(path)
        opener = cls._readers.get(path.suffix)
        if opener is None:
            raise UnsupportedFormatError(path)
        return opener(path)

    @classmethod
    def open_writable(cls, path: Path | str) -> TagContainerPort:
        """Open the container for ``path`` so it can be mutated and saved.

        Raises:
            UnsupportedFormatError: If the format has no writable container.
        """
        path = Path(path)
        opener = cls._writers.get(path.suffix)
        if opener is None:
            raise UnsupportedFormatError(path)
        return opener(path)

    @classmethod
    def extract(cls, path: Path | str) -> Attributes:
        """Extract ``Attributes`` from the file at ``path``.

        Raises:
            UnsupportedFormatError: If the extension matches no supported format.
            TagContainerError: If the container is malformed.
            FileNotFoundError: If the file does not exist.
        """
        return cls.open_reader(path).read_attributes()
