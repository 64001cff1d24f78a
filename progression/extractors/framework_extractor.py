"""
Markdown framework extractor.

Framework documents are Markdown pages whose YAML front matter, fenced by
``---`` lines, describes the role, its topics and the criteria for each
level. Only the front matter is read; the Markdown body is ignored.
"""

import logging
import re
from pathlib import Path
from typing import Any, Optional

import aiofiles
import yaml
from pydantic import ValidationError

from progression.core.exceptions import FrameworkParseError
from progression.extractors.base import BaseExtractor, ExtractedFramework
from progression.models.framework import Framework

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "---\n"

BOOL_TAG = "tag:yaml.org,2002:bool"


class FrameworkLoader(yaml.SafeLoader):
    """
    SafeLoader that reads only true/false as booleans.

    PyYAML follows YAML 1.1, where bare yes/no/on/off are booleans too;
    criteria such as "No" must stay text.
    """


FrameworkLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrameworkLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def split_front_matter(
    text: str,
    delimiter: str = DEFAULT_DELIMITER,
    source: Optional[str] = None,
) -> str:
    """
    Return the block between the first and second delimiter.

    Anything after the second delimiter is page body, and further
    delimiters there (Markdown horizontal rules) are ignored.

    Raises:
        FrameworkParseError: If the delimiter occurs fewer than two times
    """
    segments = text.split(delimiter)
    if len(segments) < 3:
        found = len(segments) - 1
        raise FrameworkParseError(
            f"Expected front matter fenced by two {delimiter.strip()!r} lines, found {found}",
            source=source,
            details={"delimiter_count": found},
        )
    return segments[1]


def parse_framework(payload: str, source: Optional[str] = None) -> Framework:
    """
    Parse a YAML front-matter payload into a Framework.

    Raises:
        FrameworkParseError: If the YAML is malformed, is not a mapping,
            or is missing required fields
    """
    try:
        data: Any = yaml.load(payload, Loader=FrameworkLoader)
    except yaml.YAMLError as e:
        raise FrameworkParseError(f"Invalid YAML front matter: {e}", source=source) from e

    if not isinstance(data, dict):
        raise FrameworkParseError(
            f"Front matter must be a mapping, got {type(data).__name__}",
            source=source,
        )

    try:
        return Framework.model_validate(data)
    except ValidationError as e:
        raise FrameworkParseError(
            f"Front matter does not match framework schema: {e.error_count()} error(s)",
            source=source,
            details={
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ]
            },
        ) from e


class FrameworkExtractor(BaseExtractor):
    """Extracts the framework front matter from Markdown documents."""

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        self.delimiter = delimiter

    async def extract(self, file_path: Path) -> ExtractedFramework:
        """
        Extract the framework from a Markdown document.

        Args:
            file_path: Path to the document

        Returns:
            ExtractedFramework with the parsed front matter

        Raises:
            FileNotFoundError: If file does not exist
            FrameworkParseError: If the front matter is missing or invalid
        """
        self._validate_file(file_path)

        async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
            text = await f.read()

        # Normalize Windows line endings so the delimiter matches
        text = text.replace("\r\n", "\n")
        if not text.endswith("\n"):
            text += "\n"

        source = str(file_path)
        front_matter = split_front_matter(text, self.delimiter, source=source)
        framework = parse_framework(front_matter, source=source)

        extracted = ExtractedFramework(
            source_path=file_path,
            front_matter=front_matter,
            framework=framework,
        )
        logger.debug(f"Extracted {file_path.name}: {extracted.to_dict()}")
        return extracted
