"""
Framework to row transformer.

Flattens a parsed Framework into one row per criterion per level.
"""

import logging
from typing import List

from progression.models.framework import Framework, Topic, TopicContent
from progression.models.rows import ProgressionRow
from progression.transformers.normalizers import (
    DEFAULT_BRAND_FROM,
    DEFAULT_BRAND_TO,
    rebrand,
)

logger = logging.getLogger(__name__)

EXAMPLES_SEPARATOR = "; "


class RowProjector:
    """
    Projects Framework objects onto flat ProgressionRows.

    Row order follows the document: topics in order, levels in order
    within a topic, plain criteria before criteria with examples.
    """

    def __init__(
        self,
        brand_from: str = DEFAULT_BRAND_FROM,
        brand_to: str = DEFAULT_BRAND_TO,
    ):
        self.brand_from = brand_from
        self.brand_to = brand_to

    def project(self, framework: Framework) -> List[ProgressionRow]:
        """
        Transform a framework into rows.

        Args:
            framework: Parsed framework document

        Returns:
            Rows in document order
        """
        role = framework.role
        rows: List[ProgressionRow] = []

        for topic in framework.topics:
            for content in topic.content:
                rows.extend(self._project_content(role, topic, content))

        return rows

    def _project_content(
        self, role: str, topic: Topic, content: TopicContent
    ) -> List[ProgressionRow]:
        topic_label = f"{topic.name} {content.level}"
        rows: List[ProgressionRow] = []

        # Both lists may be present on the same level
        for criterion in content.criteria or []:
            rows.append(
                ProgressionRow(
                    role=role,
                    topic=topic_label,
                    criterion=self._rebrand(criterion),
                    examples="",
                )
            )

        for example_criterion in content.example_criteria or []:
            rows.append(
                ProgressionRow(
                    role=role,
                    topic=topic_label,
                    criterion=self._rebrand(example_criterion.criteria),
                    examples=self._rebrand(
                        EXAMPLES_SEPARATOR.join(example_criterion.examples)
                    ),
                )
            )

        return rows

    def _rebrand(self, value: str) -> str:
        return rebrand(value, self.brand_from, self.brand_to)
