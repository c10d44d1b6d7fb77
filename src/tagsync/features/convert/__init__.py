"""
Summary: Public surface for batch WAV to FLAC conversion.
Why: Provide a stable import path for the CLI and tests.
"""

from .batch_encoder import BatchEncoder, select_inputs, target_path
from .ports import EncoderPort

__all__ = ["BatchEncoder", "EncoderPort", "select_inputs", "target_path"]
