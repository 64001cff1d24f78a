"""
Base extractor classes and data models.

Defines the abstract interface for document extractors and the
result type they hand to the row projector.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from progression.models.framework import Framework


@dataclass
class ExtractedFramework:
    """
    Extraction result for one framework document.

    Holds the parsed front matter along with where it came from, so
    errors and log lines further down the pipeline can name the file.
    """

    source_path: Path
    front_matter: str
    framework: Framework

    def to_dict(self) -> Dict[str, Any]:
        """Convert extraction to dictionary for logging/debugging."""
        return {
            "source_path": str(self.source_path),
            "role": self.framework.role,
            "topics": [t.name for t in self.framework.topics],
            "front_matter_chars": len(self.front_matter),
        }


class BaseExtractor(ABC):
    """
    Abstract base class for document extractors.

    All document extractors must implement the extract method.
    """

    @abstractmethod
    async def extract(self, file_path: Path) -> ExtractedFramework:
        """
        Extract a framework from a document.

        Args:
            file_path: Path to the document file

        Returns:
            ExtractedFramework for the document

        Raises:
            FileNotFoundError: If file does not exist
            FrameworkParseError: If the embedded framework cannot be parsed
        """
        pass

    def _validate_file(self, file_path: Path) -> None:
        """
        Validate file exists.

        Raises:
            FileNotFoundError: If file does not exist
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
