"""Submission schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SubmissionStatus(str, Enum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"


class Deliverable(BaseModel):
    """Where the submitted work lives: an external link or an uploaded file."""

    external_link: str | None = None
    file_ref: str | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("external_link", "file_ref")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @model_validator(mode="after")
    def _single_location(self) -> Deliverable:
        if self.external_link is not None and self.file_ref is not None:
            raise ValueError("Provide either an external link or a file reference, not both")
        return self

    @property
    def is_empty(self) -> bool:
        return self.external_link is None and self.file_ref is None


class Submission(BaseModel):
    """One designer's attempt at one assessment."""

    submission_id: str
    designer_id: str
    assessment_id: str
    deliverable: Deliverable
    status: SubmissionStatus = SubmissionStatus.PENDING
    score: int | None = Field(default=None, ge=0, le=100)
    admin_note: str | None = None
    submitted_at: datetime
    reviewed_at: datetime | None = None

    model_config = ConfigDict(extra="forbid")

    @property
    def is_graded(self) -> bool:
        return self.status is SubmissionStatus.REVIEWED and self.score is not None
