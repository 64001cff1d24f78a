"""
Flat row models for the CSV export.

Columns: criterion, role, topic, examples
"""

from typing import ClassVar, List

from pydantic import BaseModel, Field


class ProgressionRow(BaseModel):
    """One criterion at one level of one topic for one role."""

    role: str = Field(..., description="Sidebar title and group, e.g. 'Engineer Backend'")
    topic: str = Field(..., description="Topic name and level, e.g. 'Communication 1'")
    criterion: str = Field(..., min_length=1, description="Rebranded criterion text")
    examples: str = Field(default="", description="Rebranded examples joined with '; '")


class MergedRow(BaseModel):
    """All rows sharing one criterion, collapsed into a single record."""

    # CSV column order for export
    CSV_COLUMNS: ClassVar[List[str]] = [
        "criterion",
        "role",
        "topic",
        "examples",
    ]

    criterion: str = Field(..., min_length=1)
    role: str = Field(..., description="Every contributing role, joined with ', '")
    topic: str = Field(..., description="Distinct topics, joined with ', '")
    examples: str = Field(default="", description="Distinct examples, joined with '; '")
