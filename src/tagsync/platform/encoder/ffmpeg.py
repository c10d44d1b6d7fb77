"""ffmpeg adapter for the encoder port.

Where: src/tagsync/platform/encoder/ffmpeg.py
What: Probe for and invoke the ffmpeg executable as a blocking subprocess.
Why: Keep process handling out of the batch driver.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from tagsync.config.settings import DEFAULT_ENCODER
from tagsync.platform.logging import logger
from tagsync.shared.errors import EncodeError, EncoderNotInstalledError

_STDERR_TAIL_LINES = 5


class FfmpegEncoder:
    """Run ``ffmpeg -i SOURCE DESTINATION`` once per file."""

    def __init__(self, binary: str = DEFAULT_ENCODER) -> None:
        self.binary = binary

    def probe(self) -> None:
        """Check that the executable can be started at all."""
        try:
            _ = subprocess.run(
                [self.binary, "-version"],
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Encoder probe for %s failed: %s", self.binary, exc)
            raise EncoderNotInstalledError(self.binary) from exc

    def command(self, source: Path, destination: Path) -> list[str]:
        """Build the argument list for one conversion."""
        # -n refuses to overwrite; -nostdin keeps ffmpeg from prompting.
        return [
            self.binary,
            "-hide_banner",
            "-nostdin",
            "-n",
            "-i",
            str(source),
            str(destination),
        ]

    def encode(self, source: Path, destination: Path) -> None:
        """Encode ``source`` into ``destination``; blocks until ffmpeg exits."""
        cmd = self.command(source, destination)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise EncoderNotInstalledError(self.binary) from exc

        if result.returncode != 0:
            tail = "\n".join(result.stderr.strip().splitlines()[-_STDERR_TAIL_LINES:])
            raise EncodeError(
                f"{self.binary} failed on {source} (exit {result.returncode}): {tail}"
            )


__all__ = ["FfmpegEncoder"]
