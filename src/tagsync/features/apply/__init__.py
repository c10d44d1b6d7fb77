"""
Summary: Public surface for applying edited attributes to FLAC copies.
Why: Provide a stable import path for the CLI and tests.
"""

from .apply_engine import ApplyEngine, ApplyRequest, ApplyResult

__all__ = ["ApplyEngine", "ApplyRequest", "ApplyResult"]
