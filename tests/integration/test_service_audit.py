from __future__ import annotations

import json
from pathlib import Path

import pytest

from designvet.container import create_container
from designvet.core import NotFoundError
from designvet.repository import JsonFileStore
from designvet.config import default_catalog
from designvet.schemas import DesignerProfile, QualificationStatus


def test_service_flow_writes_audit_log(tmp_path: Path) -> None:
    audit_path = tmp_path / "audit" / "actions.jsonl"
    store = JsonFileStore(tmp_path / "store.json", default_assessments=default_catalog())
    service = create_container(store=store, audit_log=audit_path).service()

    service.complete_profile(
        DesignerProfile(designer_id="D-1", primary_skill="Web & UI/UX Design", tools=["figma"])
    )
    service.complete_profile(
        DesignerProfile(designer_id="D-2", primary_skill="Branding & Identity")
    )

    top = service.top_for("D-1")
    assert [item.total for item in top] == [13, 13, 3, 3]
    open_before = service.open_assessments("D-1")
    assert [a.assessment_id for a in open_before][:2] == ["asmt-uiux-001", "asmt-uiux-002"]

    submission = service.submit("D-1", "asmt-uiux-001", {"external_link": "https://figma.com/f/1"})
    assert "asmt-uiux-001" not in [a.assessment_id for a in service.open_assessments("D-1")]
    assert service.system_metrics().pending_count == 1

    service.review(submission.submission_id, 85, "Clean hierarchy")
    service.set_qualification_status("D-1", QualificationStatus.SHORTLISTED)

    metrics = service.designer_metrics("D-1")
    assert metrics.average_score == 85
    assert metrics.percentile == pytest.approx(50.0)
    assert service.designer_metrics("D-1") == metrics

    system = service.system_metrics()
    assert (system.total_designers, system.pending_count) == (2, 0)
    assert (system.verification_rate, system.efficiency) == (50, 100)

    actions = [json.loads(line) for line in audit_path.read_text(encoding="utf-8").splitlines()]
    assert [a["action"] for a in actions] == ["submit", "review", "set_status"]
    assert actions[1]["score"] == 85
    assert actions[2]["status"] == "Shortlisted"
    assert all("timestamp" in a for a in actions)


def test_service_recommend_for_unknown_designer() -> None:
    service = create_container().service()

    with pytest.raises(NotFoundError):
        service.recommend_for("D-404")
