"""
Summary: Port for the external audio encoder.
Why: Let the batch driver run against ffmpeg in production and a recording fake in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class EncoderPort(Protocol):
    """An external encoder invoked synchronously once per file."""

    def probe(self) -> None:
        """Raise ``EncoderNotInstalledError`` if the encoder cannot be started."""
        ...

    def encode(self, source: Path, destination: Path) -> None:
        """Encode ``source`` into ``destination``, raising on failure."""
        ...


__all__ = ["EncoderPort"]
