"""External encoder adapters."""

from .ffmpeg import FfmpegEncoder

__all__ = ["FfmpegEncoder"]
