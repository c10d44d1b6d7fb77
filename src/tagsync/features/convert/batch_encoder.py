"""
Summary: Drive the external encoder over a batch of WAV files.
Why: Convert recordings to FLAC beside the originals before tagging them.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from tagsync.config.settings import CONVERT_SOURCE_EXTENSION, CONVERT_TARGET_EXTENSION
from tagsync.platform.logging import TagEvent, logger
from tagsync.shared.errors import NoMatchingInputError

from .ports import EncoderPort


def select_inputs(paths: Iterable[str | Path]) -> list[Path]:
    """Keep the paths whose name ends in the source extension, in input order."""
    return [Path(p) for p in paths if str(p).endswith(CONVERT_SOURCE_EXTENSION)]


def target_path(source: Path) -> Path:
    """Return ``source`` with its extension replaced by the target extension."""
    return source.with_suffix(CONVERT_TARGET_EXTENSION)


class BatchEncoder:
    """Encode each WAV input to FLAC in the same directory."""

    def __init__(self, encoder: EncoderPort) -> None:
        self.encoder = encoder

    def run(self, paths: Iterable[str | Path]) -> list[Path]:
        """Convert every matching input, stopping at the first failure.

        Returns:
            list[Path]: Output paths written, in input order.

        Raises:
            NoMatchingInputError: If no input ends in the source extension.
            EncoderNotInstalledError: If the encoder probe fails.
            EncodeError: If an encoder invocation fails.
        """
        sources = select_inputs(paths)
        if not sources:
            raise NoMatchingInputError(f"no {CONVERT_SOURCE_EXTENSION} files among the given inputs")

        self.encoder.probe()

        written: list[Path] = []
        for index, source in enumerate(sources, start=1):
            destination = target_path(source)
            logger.debug(
                "[%d/%d] Encoding %s -> %s",
                index,
                len(sources),
                source,
                destination,
                extra={"tag_event": TagEvent.CONVERT_START, "source_path": source, "target_path": destination},
            )
            self.encoder.encode(source, destination)
            logger.debug(
                "Encoded %s",
                destination,
                extra={"tag_event": TagEvent.CONVERT_COMPLETE, "source_path": destination},
            )
            written.append(destination)

        logger.info("Converted %d file(s) to %s", len(written), CONVERT_TARGET_EXTENSION)
        return written


__all__ = ["BatchEncoder", "select_inputs", "target_path"]
