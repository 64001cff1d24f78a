"""Schema models for framework documents and exported rows."""

from progression.models.framework import ExampleCriterion, Framework, Topic, TopicContent
from progression.models.rows import MergedRow, ProgressionRow

__all__ = [
    "ExampleCriterion",
    "Framework",
    "Topic",
    "TopicContent",
    "ProgressionRow",
    "MergedRow",
]
