"""Row transformers for the progression export."""

from progression.transformers.normalizers import dedupe, rebrand
from progression.transformers.row_merger import group_by_criterion, merge_group, merge_rows
from progression.transformers.row_projector import RowProjector

__all__ = [
    "dedupe",
    "rebrand",
    "RowProjector",
    "group_by_criterion",
    "merge_group",
    "merge_rows",
]
