"""Core infrastructure for the progression export."""

from progression.core.config import ProgressionSettings, get_settings
from progression.core.exceptions import FrameworkParseError, ProgressionError

__all__ = [
    "ProgressionSettings",
    "get_settings",
    "ProgressionError",
    "FrameworkParseError",
]
