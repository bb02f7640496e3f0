"""Submission lifecycle: Pending -> Reviewed."""

from __future__ import annotations

import uuid
from typing import Any, Callable, Mapping
from urllib.parse import urlparse

import pendulum
import structlog
from pydantic import ValidationError as SchemaError

from ..schemas import Assessment, Deliverable, Submission, SubmissionStatus
from .errors import InvalidStateError, NotFoundError, ValidationError

SCORE_MIN = 0
SCORE_MAX = 100


def new_submission_id() -> str:
    return f"sub-{uuid.uuid4().hex[:9]}"


class SubmissionLifecycle:
    """Create submissions and record their single review.

    A designer holds at most one submission per assessment, and a reviewed
    submission is terminal.
    """

    def __init__(
        self,
        store: Any,
        *,
        now_provider: Callable[[], Any] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._now_provider = now_provider or pendulum.now
        self._id_factory = id_factory or new_submission_id
        self._logger = structlog.get_logger(__name__)

    def submit(
        self,
        designer_id: str,
        assessment_id: str,
        deliverable: Deliverable | Mapping[str, Any] | None,
    ) -> Submission:
        resolved = self._coerce_deliverable(deliverable)
        if self._store.get_profile(designer_id) is None:
            raise NotFoundError("designer", designer_id)
        assessment = self._store.get_assessment(assessment_id)
        if assessment is None:
            raise NotFoundError("assessment", assessment_id)
        resolved = self._normalise_deliverable(resolved, assessment)

        for existing in self._store.list_submissions_for(designer_id):
            if existing.assessment_id == assessment_id:
                raise InvalidStateError(
                    f"Designer {designer_id!r} already submitted {assessment_id!r} "
                    f"as {existing.submission_id!r}"
                )

        submission = Submission(
            submission_id=self._id_factory(),
            designer_id=designer_id,
            assessment_id=assessment_id,
            deliverable=resolved,
            status=SubmissionStatus.PENDING,
            submitted_at=self._now_provider(),
        )
        self._store.save_submission(submission)
        self._logger.info(
            "submission.created",
            submission_id=submission.submission_id,
            designer_id=designer_id,
            assessment_id=assessment_id,
        )
        return submission

    def review(self, submission_id: str, score: int | float, note: str | None = "") -> Submission:
        submission = self._store.get_submission(submission_id)
        if submission is None:
            raise NotFoundError("submission", submission_id)
        if submission.status is SubmissionStatus.REVIEWED:
            raise InvalidStateError(f"Submission {submission_id!r} has already been reviewed")
        if isinstance(score, float) and score.is_integer():
            score = int(score)
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValidationError(f"Score must be a whole number, got {score!r}")
        if not SCORE_MIN <= score <= SCORE_MAX:
            raise ValidationError(
                f"Score must be between {SCORE_MIN} and {SCORE_MAX}, got {score}"
            )

        reviewed = submission.model_copy(
            update={
                "score": score,
                "admin_note": note or "",
                "status": SubmissionStatus.REVIEWED,
                "reviewed_at": self._now_provider(),
            }
        )
        self._store.save_submission(reviewed)
        self._logger.info(
            "submission.reviewed",
            submission_id=submission_id,
            designer_id=reviewed.designer_id,
            score=score,
        )
        return reviewed

    def pending_queue(self) -> list[Submission]:
        """Pending submissions, oldest first."""
        pending = [
            s for s in self._store.list_all_submissions()
            if s.status is SubmissionStatus.PENDING
        ]
        return sorted(pending, key=lambda s: s.submitted_at)

    @staticmethod
    def _coerce_deliverable(
        deliverable: Deliverable | Mapping[str, Any] | None,
    ) -> Deliverable:
        if deliverable is None:
            raise ValidationError("A deliverable link or file reference is required")
        if not isinstance(deliverable, Deliverable):
            try:
                deliverable = Deliverable.model_validate(dict(deliverable))
            except SchemaError as exc:
                raise ValidationError(f"Invalid deliverable: {exc}") from exc
        if deliverable.is_empty:
            raise ValidationError("A deliverable link or file reference is required")
        return deliverable

    @staticmethod
    def _normalise_deliverable(deliverable: Deliverable, assessment: Assessment) -> Deliverable:
        link = deliverable.external_link
        if link is not None:
            # bare links such as "behance.net/gallery/1" are taken as https
            if "://" not in link:
                link = f"https://{link}"
            parsed = urlparse(link)
            if (
                parsed.scheme not in ("http", "https")
                or not parsed.netloc
                or any(ch.isspace() for ch in link)
            ):
                raise ValidationError(
                    f"Deliverable link must be a web address, got {deliverable.external_link!r}"
                )
            return deliverable.model_copy(update={"external_link": link})
        if deliverable.file_ref is not None and assessment.allowed_file_types:
            allowed = {ext.lower() for ext in assessment.allowed_file_types}
            if not any(deliverable.file_ref.lower().endswith(ext) for ext in allowed):
                raise ValidationError(
                    f"File {deliverable.file_ref!r} is not one of "
                    f"{', '.join(assessment.allowed_file_types)}"
                )
        return deliverable
