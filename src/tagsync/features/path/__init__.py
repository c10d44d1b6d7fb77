"""
Summary: Public surface for path derivation helpers.
Why: Provide a stable import path for the pipelines and tests.
"""

from .path_group import PathGroup, parse_track_number

__all__ = ["PathGroup", "parse_track_number"]
