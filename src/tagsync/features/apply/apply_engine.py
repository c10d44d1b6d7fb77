"""
Summary: Write edited attributes into fresh copies of the referenced files.
Why: Source files are never modified and earlier output is never overwritten.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable

from tagsync.features.metadata import AttributeExtractor, TagContainerPort
from tagsync.features.path import PathGroup
from tagsync.platform.filesystem import copy_file_exclusive, ensure_directory
from tagsync.platform.logging import TagEvent, logger
from tagsync.shared.attributes import Attributes, FileAttributes
from tagsync.shared.errors import OutputExistsError

ContainerOpener = Callable[[Path], TagContainerPort]


@dataclass(slots=True, frozen=True)
class ApplyRequest:
    """Inputs for one apply run."""

    attributes: Mapping[str, FileAttributes]
    output_dir: Path
    track_from_filename: bool = False


@dataclass(slots=True)
class ApplyResult:
    """Output files written by a completed run, in processing order."""

    written: list[Path] = field(default_factory=list)


class ApplyEngine:
    """Apply imported attributes one file at a time.

    Each entry is opened, mutated, copied to the output directory and then
    written into the copy. The first failure aborts the run.
    """

    def __init__(self, open_container: ContainerOpener | None = None) -> None:
        self._open_container: ContainerOpener = open_container or AttributeExtractor.open_writable

    def run(self, request: ApplyRequest) -> ApplyResult:
        """Apply every entry of ``request.attributes``.

        Raises:
            OutputExistsError: If an output file already exists.
            TagContainerError: If a container cannot be read or written.
            UnsupportedFormatError: If an entry is not a FLAC file.
            OSError: On any other filesystem failure.
        """
        output_dir = ensure_directory(request.output_dir)
        result = ApplyResult()
        for path, item in request.attributes.items():
            written = self.apply_one(
                path,
                item.attributes,
                output_dir,
                track_from_filename=request.track_from_filename,
            )
            result.written.append(written)
        logger.info("Applied attributes to %d file(s) in %s", len(result.written), output_dir)
        return result

    def apply_one(
        self,
        path: str | Path,
        attributes: Attributes,
        output_dir: Path,
        *,
        track_from_filename: bool = False,
    ) -> Path:
        """Apply ``attributes`` to a copy of ``path`` inside ``output_dir``."""
        paths = PathGroup(Path(path))
        if track_from_filename and attributes.track is None and paths.track is not None:
            logger.debug("Using track %d from file name %s", paths.track, paths.base.name)
            attributes = replace(attributes, track=paths.track)

        container = self._open_container(paths.base)
        container.apply_attributes(attributes)

        destination = paths.output(output_dir)
        if destination.exists():
            raise OutputExistsError(destination)

        _ = copy_file_exclusive(paths.base, destination)
        try:
            container.save(destination)
        except BaseException:
            destination.unlink(missing_ok=True)
            raise
        logger.debug(
            "Wrote %s -> %s",
            paths.base,
            destination,
            extra={
                "tag_event": TagEvent.APPLY_WRITE,
                "source_path": paths.base,
                "target_path": destination,
            },
        )
        return destination


__all__ = ["ApplyEngine", "ApplyRequest", "ApplyResult", "ContainerOpener"]
