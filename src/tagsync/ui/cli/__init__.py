"""Command line interface package."""

from tagsync.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
