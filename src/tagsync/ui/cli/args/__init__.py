"""Command line argument handling package."""

from tagsync.ui.cli.args.options import ApplyArgs, CLIArgs, ConvertArgs, ListArgs
from tagsync.ui.cli.args.parser import ArgumentParser

__all__ = ["ApplyArgs", "ArgumentParser", "CLIArgs", "ConvertArgs", "ListArgs"]
