"""tagsync: attribute exchange between FLAC and MP3 tag containers."""

__version__ = "0.1.0"
