"""
Summary: Capability protocols implemented by each tag container format.
Why: Exchange and apply logic depend on these shapes, never on a container's layout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from tagsync.shared.attributes import Attributes


@runtime_checkable
class TagReaderPort(Protocol):
    """A loaded tag container that can be normalized into ``Attributes``."""

    path: Path

    def read_attributes(self) -> Attributes:
        """Return the container's fields as an ``Attributes`` value."""
        ...


@runtime_checkable
class TagContainerPort(TagReaderPort, Protocol):
    """A loaded tag container that can also be mutated and persisted."""

    def apply_attributes(self, attributes: Attributes) -> None:
        """Mutate the in-memory container; performs no file I/O."""
        ...

    def save(self, destination: Path) -> None:
        """Write the in-memory container into ``destination``."""
        ...


__all__ = ["TagContainerPort", "TagReaderPort"]
