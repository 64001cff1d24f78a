"""
Text normalization utilities for transformers.

Provides the rebranding substitution applied to criteria and examples,
and the order-preserving deduplication used when merging rows.
"""

from typing import Iterable, List

DEFAULT_BRAND_FROM = "Monzo"
DEFAULT_BRAND_TO = "Move"


def rebrand(
    value: str,
    brand_from: str = DEFAULT_BRAND_FROM,
    brand_to: str = DEFAULT_BRAND_TO,
) -> str:
    """
    Replace the first occurrence of one brand name with another.

    Matching is case-sensitive and only the first match is replaced:

        >>> rebrand("Monzo Monzo")
        'Move Monzo'
        >>> rebrand("monzo")
        'monzo'
    """
    return value.replace(brand_from, brand_to, 1)


def dedupe(values: Iterable[str]) -> List[str]:
    """
    Drop repeated values, keeping the first occurrence of each.

    Equality is exact string equality; empty strings are values too,
    so several empties collapse to one.
    """
    seen = set()
    unique: List[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique
