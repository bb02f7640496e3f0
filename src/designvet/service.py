"""Vetting service facade wiring the engine components to an entity store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

import pendulum
import structlog

from .core import (
    DesignerMetrics,
    LeaderboardEntry,
    MatchingEngine,
    MetricsAggregator,
    NotFoundError,
    QualificationWorkflow,
    SubmissionLifecycle,
    SystemMetrics,
)
from .core.matching import RankedAssessment
from .schemas import (
    Assessment,
    Deliverable,
    DesignerProfile,
    QualificationStatus,
    StatusChange,
    Submission,
)


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        entry = {"timestamp": pendulum.now("UTC").to_iso8601_string(), **record}
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, ensure_ascii=False))
            handle.write("\n")


class VettingService:
    """Operations exposed to the surrounding application."""

    def __init__(
        self,
        *,
        store: Any,
        matching: MatchingEngine,
        lifecycle: SubmissionLifecycle,
        qualification: QualificationWorkflow,
        metrics: MetricsAggregator,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self._store = store
        self._matching = matching
        self._lifecycle = lifecycle
        self._qualification = qualification
        self._metrics = metrics
        self._audit = audit_logger
        self._logger = structlog.get_logger(__name__)

    @property
    def store(self) -> Any:
        return self._store

    def recommend(
        self,
        profile: DesignerProfile,
        catalog: Iterable[Assessment] | None = None,
    ) -> list[Assessment]:
        if catalog is None:
            catalog = self._store.list_assessments()
        return self._matching.recommend(profile, catalog)

    def top_for(self, designer_id: str) -> list[RankedAssessment]:
        """Recommended assessments with their relevance breakdown."""
        return self._matching.top(self._require_profile(designer_id), self._store.list_assessments())

    def recommend_for(self, designer_id: str) -> list[Assessment]:
        return self.recommend(self._require_profile(designer_id))

    def open_assessments(self, designer_id: str) -> list[Assessment]:
        """Recommended assessments the designer has not submitted to yet."""
        submitted = {s.assessment_id for s in self._store.list_submissions_for(designer_id)}
        return [a for a in self.recommend_for(designer_id) if a.assessment_id not in submitted]

    def complete_profile(self, profile: DesignerProfile) -> DesignerProfile:
        return self._qualification.complete_profile(profile)

    def submit(
        self,
        designer_id: str,
        assessment_id: str,
        deliverable: Deliverable | Mapping[str, Any] | None,
    ) -> Submission:
        submission = self._lifecycle.submit(designer_id, assessment_id, deliverable)
        self._record(
            "submit",
            submission_id=submission.submission_id,
            designer_id=designer_id,
            assessment_id=assessment_id,
        )
        return submission

    def review(self, submission_id: str, score: int | float, note: str | None = "") -> Submission:
        submission = self._lifecycle.review(submission_id, score, note)
        self._record(
            "review",
            submission_id=submission_id,
            designer_id=submission.designer_id,
            score=score,
        )
        return submission

    def pending_queue(self) -> list[Submission]:
        return self._lifecycle.pending_queue()

    def set_qualification_status(
        self,
        designer_id: str,
        status: QualificationStatus | str,
        *,
        actor: str = "admin",
    ) -> None:
        self._qualification.set_status(designer_id, status, actor=actor)
        self._record(
            "set_status",
            designer_id=designer_id,
            status=QualificationStatus(status).value,
            actor=actor,
        )

    def status_history(self, designer_id: str) -> list[StatusChange]:
        return self._qualification.history(designer_id)

    def designer_metrics(self, designer_id: str) -> DesignerMetrics:
        return self._metrics.designer_metrics(designer_id)

    def system_metrics(self) -> SystemMetrics:
        return self._metrics.system_metrics()

    def leaderboard(self) -> list[LeaderboardEntry]:
        return self._metrics.leaderboard()

    def _require_profile(self, designer_id: str) -> DesignerProfile:
        profile = self._store.get_profile(designer_id)
        if profile is None:
            raise NotFoundError("designer", designer_id)
        return profile

    def _record(self, action: str, **fields: Any) -> None:
        self._logger.debug("audit.action", action=action, **fields)
        if self._audit:
            self._audit.append({"action": action, **fields})
