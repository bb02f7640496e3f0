from __future__ import annotations

import itertools

import pendulum
import pytest

from designvet.config import default_catalog
from designvet.core import InvalidStateError, NotFoundError, SubmissionLifecycle, ValidationError
from designvet.repository import InMemoryStore
from designvet.schemas import Deliverable, DesignerProfile, SubmissionStatus


def build_store() -> InMemoryStore:
    return InMemoryStore(
        assessments=default_catalog(),
        profiles=[DesignerProfile(designer_id="D-001", primary_skill="Web & UI/UX Design")],
    )


def build_lifecycle(store: InMemoryStore) -> SubmissionLifecycle:
    clock = itertools.count()
    counter = itertools.count(1)
    return SubmissionLifecycle(
        store,
        now_provider=lambda: pendulum.datetime(2026, 1, 1, tz="UTC").add(minutes=next(clock)),
        id_factory=lambda: f"sub-{next(counter):03d}",
    )


def test_submit_creates_pending_submission():
    store = build_store()
    lifecycle = build_lifecycle(store)

    submission = lifecycle.submit(
        "D-001",
        "asmt-uiux-001",
        {"external_link": "https://figma.com/file/abc"},
    )

    assert submission.submission_id == "sub-001"
    assert submission.status is SubmissionStatus.PENDING
    assert submission.score is None
    assert submission.admin_note is None
    assert submission.submitted_at == pendulum.datetime(2026, 1, 1, tz="UTC")
    assert store.get_submission("sub-001") == submission


@pytest.mark.parametrize(
    "deliverable",
    [None, {}, {"external_link": "  ", "file_ref": ""}, Deliverable()],
)
def test_submit_rejects_empty_deliverable(deliverable):
    lifecycle = build_lifecycle(build_store())

    with pytest.raises(ValidationError):
        lifecycle.submit("D-001", "asmt-uiux-001", deliverable)


def test_submit_checks_link_and_file_type():
    lifecycle = build_lifecycle(build_store())

    with pytest.raises(ValidationError):
        lifecycle.submit("D-001", "asmt-uiux-001", {"external_link": "not a url"})
    with pytest.raises(ValidationError):
        lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "uploads/work.docx"})

    with pytest.raises(ValidationError):
        lifecycle.submit("D-001", "asmt-uiux-001", {"external_link": "ftp://files.example.com/a.fig"})

    submission = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "uploads/Work.PDF"})
    assert submission.deliverable.file_ref == "uploads/Work.PDF"


def test_submit_accepts_bare_link_as_https():
    store = build_store()
    lifecycle = build_lifecycle(store)

    submission = lifecycle.submit("D-001", "asmt-uiux-001", {"external_link": "behance.net/gallery/123"})

    assert submission.deliverable.external_link == "https://behance.net/gallery/123"
    assert store.get_submission(submission.submission_id).deliverable.external_link.startswith("https://")
    assert submission.deliverable.file_ref is None


def test_submit_rejects_link_and_file_together():
    store = build_store()
    lifecycle = build_lifecycle(store)

    with pytest.raises(ValidationError):
        lifecycle.submit(
            "D-001",
            "asmt-uiux-001",
            {"external_link": "https://x.io/a", "file_ref": "a.pdf"},
        )
    assert store.list_submissions_for("D-001") == []


def test_submit_unknown_designer_or_assessment():
    lifecycle = build_lifecycle(build_store())

    with pytest.raises(NotFoundError):
        lifecycle.submit("D-404", "asmt-uiux-001", {"file_ref": "a.pdf"})
    with pytest.raises(NotFoundError) as exc:
        lifecycle.submit("D-001", "asmt-missing", {"file_ref": "a.pdf"})
    assert exc.value.kind == "assessment"


def test_submit_rejects_second_attempt_for_same_assessment():
    store = build_store()
    lifecycle = build_lifecycle(store)
    lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})

    with pytest.raises(InvalidStateError):
        lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "b.pdf"})
    assert len(store.list_submissions_for("D-001")) == 1


def test_review_sets_score_note_and_status():
    store = build_store()
    lifecycle = build_lifecycle(store)
    submission = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})

    reviewed = lifecycle.review(submission.submission_id, 85, "Strong hierarchy")

    assert reviewed.status is SubmissionStatus.REVIEWED
    assert reviewed.score == 85
    assert reviewed.admin_note == "Strong hierarchy"
    assert reviewed.reviewed_at is not None
    assert store.get_submission(submission.submission_id) == reviewed


@pytest.mark.parametrize("score", [150, -1, 101])
def test_review_rejects_out_of_range_score(score):
    store = build_store()
    lifecycle = build_lifecycle(store)
    submission = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})

    with pytest.raises(ValidationError):
        lifecycle.review(submission.submission_id, score, "")
    assert store.get_submission(submission.submission_id).status is SubmissionStatus.PENDING


def test_review_accepts_boundaries_and_empty_note():
    lifecycle = build_lifecycle(build_store())
    low = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})
    high = lifecycle.submit("D-001", "asmt-uiux-002", {"file_ref": "b.pdf"})

    assert lifecycle.review(low.submission_id, 0, None).admin_note == ""
    assert lifecycle.review(high.submission_id, 100).score == 100


def test_review_is_terminal():
    lifecycle = build_lifecycle(build_store())
    submission = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})
    lifecycle.review(submission.submission_id, 70, "")

    with pytest.raises(InvalidStateError):
        lifecycle.review(submission.submission_id, 90, "second look")


def test_review_unknown_submission():
    lifecycle = build_lifecycle(build_store())

    with pytest.raises(NotFoundError):
        lifecycle.review("sub-missing", 50, "")


def test_pending_queue_is_oldest_first():
    lifecycle = build_lifecycle(build_store())
    first = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})
    second = lifecycle.submit("D-001", "asmt-uiux-002", {"file_ref": "b.pdf"})
    third = lifecycle.submit("D-001", "asmt-mobile-001", {"file_ref": "c.mp4"})
    lifecycle.review(second.submission_id, 60, "")

    queue = lifecycle.pending_queue()

    assert [s.submission_id for s in queue] == [first.submission_id, third.submission_id]


def test_review_accepts_whole_number_floats():
    lifecycle = build_lifecycle(build_store())
    first = lifecycle.submit("D-001", "asmt-uiux-001", {"file_ref": "a.pdf"})
    second = lifecycle.submit("D-001", "asmt-uiux-002", {"file_ref": "b.pdf"})

    reviewed = lifecycle.review(first.submission_id, 85.0, "")

    assert reviewed.score == 85
    assert isinstance(reviewed.score, int)
    with pytest.raises(ValidationError):
        lifecycle.review(second.submission_id, 85.5, "")
    with pytest.raises(ValidationError):
        lifecycle.review(second.submission_id, True, "")
