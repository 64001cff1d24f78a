"""
Framework schema matching the YAML front matter of a framework document.

Keys are camelCase in the source files (sidebarTitle, exampleCriteria, ...);
the models expose snake_case attributes and accept either spelling.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExampleCriterion(BaseModel):
    """A criterion together with the examples that illustrate it."""

    criteria: str = Field(..., min_length=1, description="Criterion text")
    examples: List[str] = Field(default_factory=list, description="Example statements")


class TopicContent(BaseModel):
    """Criteria for one proficiency level of a topic."""

    model_config = ConfigDict(populate_by_name=True)

    level: int = Field(..., description="Proficiency level number")
    criteria: Optional[List[str]] = Field(None, description="Plain criterion statements")
    example_criteria: Optional[List[ExampleCriterion]] = Field(
        None,
        alias="exampleCriteria",
        description="Criteria with supporting examples",
    )

    @field_validator("criteria")
    @classmethod
    def criteria_not_blank(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None and any(not c for c in v):
            raise ValueError("criteria must not contain empty strings")
        return v


class Topic(BaseModel):
    """A named competency area with one content block per level."""

    name: str = Field(..., description="Topic name, e.g. 'Communication'")
    title: Optional[str] = Field(None, description="Display title")
    content: List[TopicContent] = Field(default_factory=list)


class Framework(BaseModel):
    """Parsed front matter of one framework document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = Field(None, description="Page title")
    sidebar_title: str = Field(..., alias="sidebarTitle", description="Role name")
    sidebar_group: str = Field(..., alias="sidebarGroup", description="Discipline group")
    levels: Optional[int] = Field(None, description="Number of proficiency levels")
    yaml: Optional[bool] = None
    homepage: Optional[bool] = None
    topics: List[Topic] = Field(..., description="Topics in document order")

    @property
    def role(self) -> str:
        """Role label used on every projected row."""
        return f"{self.sidebar_title} {self.sidebar_group}"
