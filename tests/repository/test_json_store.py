from __future__ import annotations

import json
from pathlib import Path

import pendulum
import pytest

from designvet.config import default_catalog
from designvet.repository import EntityStore, InMemoryStore, JsonFileStore, SnapshotLoadError
from designvet.schemas import Deliverable, DesignerProfile, StatusChange, Submission


def test_stores_satisfy_protocol(tmp_path: Path):
    assert isinstance(InMemoryStore(), EntityStore)
    assert isinstance(JsonFileStore(tmp_path / "store.json"), EntityStore)


def test_missing_file_is_seeded_with_catalog(tmp_path: Path):
    path = tmp_path / "nested" / "store.json"

    store = JsonFileStore(path, default_assessments=default_catalog())

    assert path.exists()
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["assessments"]) == 9
    assert data["profiles"] == []
    assert store.get_assessment("asmt-motion-001").title == "Product Launch Reveal"


def test_writes_survive_reload(tmp_path: Path):
    path = tmp_path / "store.json"
    store = JsonFileStore(path, default_assessments=default_catalog())
    when = pendulum.datetime(2026, 2, 1, 9, 30, tz="UTC")
    store.save_profile(DesignerProfile(designer_id="D-1", primary_skill="Mobile App Design"))
    store.save_submission(
        Submission(
            submission_id="sub-1",
            designer_id="D-1",
            assessment_id="asmt-mobile-001",
            deliverable=Deliverable(external_link="https://dribbble.com/shots/1"),
            submitted_at=when,
        )
    )
    store.append_status_change(StatusChange(designer_id="D-1", status="Hired", changed_at=when))

    reloaded = JsonFileStore(path)

    assert reloaded.get_profile("D-1").primary_skill == "Mobile App Design"
    assert reloaded.list_submissions_for("D-1")[0].submitted_at == when
    assert reloaded.list_status_changes("D-1")[0].status.value == "Hired"
    assert len(reloaded.list_assessments()) == 9


def test_snapshot_is_replaced_without_leftover_staging_file(tmp_path: Path):
    path = tmp_path / "store.json"
    store = JsonFileStore(path, default_assessments=default_catalog())
    store.save_profile(DesignerProfile(designer_id="D-1", primary_skill="Mobile App Design"))
    store.save_profile(DesignerProfile(designer_id="D-2", primary_skill="Branding & Identity"))

    assert sorted(p.name for p in tmp_path.iterdir()) == ["store.json"]
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [p["designer_id"] for p in data["profiles"]] == ["D-1", "D-2"]


def test_invalid_snapshot_raises(tmp_path: Path):
    broken = tmp_path / "broken.json"
    broken.write_text("{invalid", encoding="utf-8")
    wrong_shape = tmp_path / "list.json"
    wrong_shape.write_text("[]", encoding="utf-8")
    bad_entity = tmp_path / "entity.json"
    bad_entity.write_text(json.dumps({"profiles": [{"designer_id": "D-1"}]}), encoding="utf-8")

    for path in (broken, wrong_shape, bad_entity):
        with pytest.raises(SnapshotLoadError):
            JsonFileStore(path)
