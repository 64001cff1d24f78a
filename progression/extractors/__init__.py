"""Document extractors for the progression export."""

from progression.extractors.base import BaseExtractor, ExtractedFramework
from progression.extractors.framework_extractor import (
    FrameworkExtractor,
    parse_framework,
    split_front_matter,
)

__all__ = [
    "BaseExtractor",
    "ExtractedFramework",
    "FrameworkExtractor",
    "parse_framework",
    "split_front_matter",
]
