from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class QualificationStatus(str, Enum):
    """Administrator-controlled vetting label."""

    NEW = "New"
    UNDER_REVIEW = "Under Review"
    SHORTLISTED = "Shortlisted"
    REJECTED = "Rejected"
    HIRED = "Hired"


VERIFIED_STATUSES: frozenset[QualificationStatus] = frozenset(
    {QualificationStatus.SHORTLISTED, QualificationStatus.HIRED}
)


class PortfolioLinks(BaseModel):
    """External portfolio locations."""

    dribbble: str | None = None
    behance: str | None = None
    website: str | None = None

    model_config = ConfigDict(extra="forbid")


class DesignerProfile(BaseModel):
    """Vetted specialist profile, one per designer id."""

    designer_id: str
    full_name: str = ""
    country: str | None = None
    primary_skill: str
    secondary_skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    bio: str = ""
    years_experience: float = Field(default=0, ge=0)
    availability_hours: int = Field(default=0, ge=0)
    portfolio_links: PortfolioLinks = Field(default_factory=PortfolioLinks)
    preferred_project_types: list[str] = Field(default_factory=list)
    credential_ref: str | None = None
    status: QualificationStatus = QualificationStatus.NEW

    model_config = ConfigDict(extra="forbid")

    @field_validator("secondary_skills", "tools")
    @classmethod
    def _dedupe(cls, values: list[str]) -> list[str]:
        return list(dict.fromkeys(value.strip() for value in values if value.strip()))


class StatusChange(BaseModel):
    """Append-only record of a qualification status change."""

    designer_id: str
    previous: QualificationStatus | None = None
    status: QualificationStatus
    actor: str = "admin"
    changed_at: datetime

    model_config = ConfigDict(extra="forbid")
