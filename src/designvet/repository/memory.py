"""Process-local entity store."""

from __future__ import annotations

from typing import Iterable

from ..schemas import Assessment, DesignerProfile, StatusChange, Submission


class InMemoryStore:
    """Dict-backed store; insertion order is preserved for every collection."""

    def __init__(
        self,
        *,
        assessments: Iterable[Assessment] = (),
        profiles: Iterable[DesignerProfile] = (),
        submissions: Iterable[Submission] = (),
        status_changes: Iterable[StatusChange] = (),
    ) -> None:
        self._assessments = {item.assessment_id: item for item in assessments}
        self._profiles = {item.designer_id: item for item in profiles}
        self._submissions = {item.submission_id: item for item in submissions}
        self._status_changes = list(status_changes)

    def list_assessments(self) -> list[Assessment]:
        return list(self._assessments.values())

    def get_assessment(self, assessment_id: str) -> Assessment | None:
        return self._assessments.get(assessment_id)

    def list_profiles(self) -> list[DesignerProfile]:
        return list(self._profiles.values())

    def get_profile(self, designer_id: str) -> DesignerProfile | None:
        return self._profiles.get(designer_id)

    def save_profile(self, profile: DesignerProfile) -> None:
        self._profiles[profile.designer_id] = profile
        self._flush()

    def list_all_submissions(self) -> list[Submission]:
        return list(self._submissions.values())

    def list_submissions_for(self, designer_id: str) -> list[Submission]:
        return [s for s in self._submissions.values() if s.designer_id == designer_id]

    def get_submission(self, submission_id: str) -> Submission | None:
        return self._submissions.get(submission_id)

    def save_submission(self, submission: Submission) -> None:
        self._submissions[submission.submission_id] = submission
        self._flush()

    def append_status_change(self, change: StatusChange) -> None:
        self._status_changes.append(change)
        self._flush()

    def list_status_changes(self, designer_id: str) -> list[StatusChange]:
        return [c for c in self._status_changes if c.designer_id == designer_id]

    def snapshot(self) -> dict:
        """Serialise every collection into JSON-compatible primitives."""
        return {
            "assessments": [a.model_dump(mode="json") for a in self._assessments.values()],
            "profiles": [p.model_dump(mode="json") for p in self._profiles.values()],
            "submissions": [s.model_dump(mode="json") for s in self._submissions.values()],
            "status_changes": [c.model_dump(mode="json") for c in self._status_changes],
        }

    def _flush(self) -> None:
        """Hook for subclasses that persist after each write."""
