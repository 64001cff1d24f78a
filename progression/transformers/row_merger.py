"""
Row merger.

Collapses rows from every framework that share the same criterion text.
"""

import logging
from typing import Dict, Iterable, List

from progression.models.rows import MergedRow, ProgressionRow
from progression.transformers.normalizers import dedupe

logger = logging.getLogger(__name__)

ROLE_SEPARATOR = ", "
TOPIC_SEPARATOR = ", "
EXAMPLES_SEPARATOR = "; "


def group_by_criterion(rows: Iterable[ProgressionRow]) -> Dict[str, List[ProgressionRow]]:
    """
    Group rows by exact criterion text.

    Groups, and rows within each group, keep first-seen order.
    """
    groups: Dict[str, List[ProgressionRow]] = {}
    for row in rows:
        groups.setdefault(row.criterion, []).append(row)
    return groups


def merge_group(criterion: str, rows: List[ProgressionRow]) -> MergedRow:
    """
    Collapse one criterion group into a single row.

    Roles are joined as-is; topics and examples are deduplicated first.
    """
    return MergedRow(
        criterion=criterion,
        role=ROLE_SEPARATOR.join(r.role for r in rows),
        topic=TOPIC_SEPARATOR.join(dedupe(r.topic for r in rows)),
        examples=EXAMPLES_SEPARATOR.join(dedupe(r.examples for r in rows)),
    )


def merge_rows(rows: Iterable[ProgressionRow]) -> List[MergedRow]:
    """
    Merge rows sharing a criterion into one MergedRow per criterion.

    Args:
        rows: Rows from all frameworks, in input order

    Returns:
        One MergedRow per distinct criterion, in first-seen order
    """
    groups = group_by_criterion(rows)
    merged = [merge_group(criterion, members) for criterion, members in groups.items()]
    logger.debug(f"Merged {sum(len(g) for g in groups.values())} rows into {len(merged)}")
    return merged
