"""Assessment catalog and taxonomy schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Assessment(BaseModel):
    """Skill-test definition drawn from the static catalog."""

    assessment_id: str
    title: str
    category: str
    brief: str = ""
    instructions: str = ""
    deliverables: list[str] = Field(default_factory=list)
    time_limit: str | None = None
    allowed_file_types: list[str] = Field(default_factory=list)
    tools_required: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class Taxonomy(BaseModel):
    """Fixed skill categories and tool names accepted on profiles."""

    skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
