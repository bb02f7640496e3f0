"""Entity store implementations backing the vetting engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import Assessment, DesignerProfile, StatusChange, Submission
from .json_file import JsonFileStore, SnapshotLoadError
from .memory import InMemoryStore


@runtime_checkable
class EntityStore(Protocol):
    """Persistence collaborator contract.

    Reads and writes are treated as atomic by the engine; implementations are
    responsible for serialising conflicting writes to the same record.
    """

    def list_assessments(self) -> list[Assessment]:
        """Return the assessment catalog in its configured order."""

    def get_assessment(self, assessment_id: str) -> Assessment | None:
        """Return an assessment by id, or None."""

    def list_profiles(self) -> list[DesignerProfile]:
        """Return every designer profile in insertion order."""

    def get_profile(self, designer_id: str) -> DesignerProfile | None:
        """Return a profile by designer id, or None."""

    def save_profile(self, profile: DesignerProfile) -> None:
        """Insert or replace the profile keyed by its designer id."""

    def list_all_submissions(self) -> list[Submission]:
        """Return every submission in insertion order."""

    def list_submissions_for(self, designer_id: str) -> list[Submission]:
        """Return the submissions made by a designer."""

    def get_submission(self, submission_id: str) -> Submission | None:
        """Return a submission by id, or None."""

    def save_submission(self, submission: Submission) -> None:
        """Insert or replace the submission keyed by its id."""

    def append_status_change(self, change: StatusChange) -> None:
        """Append an entry to the qualification history log."""

    def list_status_changes(self, designer_id: str) -> list[StatusChange]:
        """Return a designer's qualification history, oldest first."""


__all__ = ["EntityStore", "InMemoryStore", "JsonFileStore", "SnapshotLoadError"]
