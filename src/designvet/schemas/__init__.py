"""Pydantic schema definitions for designers, assessments and submissions."""

from __future__ import annotations

from .assessment import Assessment, Taxonomy
from .designer import (
    VERIFIED_STATUSES,
    DesignerProfile,
    PortfolioLinks,
    QualificationStatus,
    StatusChange,
)
from .submission import Deliverable, Submission, SubmissionStatus

__all__ = [
    "Assessment",
    "Taxonomy",
    "DesignerProfile",
    "PortfolioLinks",
    "QualificationStatus",
    "StatusChange",
    "VERIFIED_STATUSES",
    "Deliverable",
    "Submission",
    "SubmissionStatus",
]
