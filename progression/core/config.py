"""
Export configuration using Pydantic settings.

Defaults reproduce the fixed framework list and output file; any value can
be overridden through ``PROGRESSION_*`` environment variables or a ``.env``.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


class ProgressionSettings(BaseSettings):
    """Configuration for the progression framework export."""

    # Inputs, in the order their rows are combined
    framework_paths: List[str] = [
        "frameworks/engineering/backend.md",
        "frameworks/engineering/data.md",
        "frameworks/engineering/mobile.md",
        "frameworks/engineering/qualityanalyst.md",
        "frameworks/engineering/web.md",
        "frameworks/product.md",
        "frameworks/techops.md",
        "frameworks/generic.md",
    ]

    # Output
    output_path: str = "Personal Development Framework.csv"

    # Extraction
    front_matter_delimiter: str = "---\n"

    # Rebranding
    brand_from: str = "Monzo"
    brand_to: str = "Move"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PROGRESSION_"
        extra = "ignore"

    def get_framework_paths(self) -> List[Path]:
        """Get input documents as Paths, in configured order."""
        return [Path(p) for p in self.framework_paths]

    def get_output_path(self) -> Path:
        """Get output file as Path."""
        return Path(self.output_path)


@lru_cache()
def get_settings() -> ProgressionSettings:
    """
    Get cached settings instance.

    Uses @lru_cache for a process-wide singleton.
    """
    return ProgressionSettings()
