"""
Summary: Public surface for tag container access and attribute extraction.
Why: Provide a stable import path for the pipelines and tests.
"""

from .containers import FlacTagContainer, Mp3TagContainer
from .extractor import AttributeExtractor
from .ports import TagContainerPort, TagReaderPort

__all__ = [
    "AttributeExtractor",
    "FlacTagContainer",
    "Mp3TagContainer",
    "TagContainerPort",
    "TagReaderPort",
]
