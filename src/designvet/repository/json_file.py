"""Single-file JSON snapshot store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

import structlog
from pydantic import ValidationError as SchemaError

from ..schemas import Assessment, DesignerProfile, StatusChange, Submission
from .memory import InMemoryStore


class SnapshotLoadError(ValueError):
    """Raised when a snapshot file cannot be parsed into entities."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid snapshot {path}: {reason}")
        self.path = path
        self.reason = reason


class JsonFileStore(InMemoryStore):
    """In-memory store rewritten to a JSON file after every write.

    A missing file is created from ``default_assessments``; no locking is
    performed, so a single writer is assumed.
    """

    def __init__(self, path: str | Path, *, default_assessments: Iterable[Assessment] = ()):
        self._path = Path(path)
        self._logger = structlog.get_logger(__name__)
        if not self._path.exists():
            super().__init__(assessments=default_assessments)
            self._flush()
            self._logger.info("store.created", path=str(self._path))
            return

        data = self._read()
        try:
            super().__init__(
                assessments=[Assessment.model_validate(a) for a in data.get("assessments", [])],
                profiles=[DesignerProfile.model_validate(p) for p in data.get("profiles", [])],
                submissions=[Submission.model_validate(s) for s in data.get("submissions", [])],
                status_changes=[
                    StatusChange.model_validate(c) for c in data.get("status_changes", [])
                ],
            )
        except SchemaError as exc:
            raise SnapshotLoadError(self._path, str(exc)) from exc

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict:
        with self._path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise SnapshotLoadError(self._path, f"invalid JSON ({exc})") from exc
        if not isinstance(data, dict):
            raise SnapshotLoadError(self._path, "top level must be an object")
        return data

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # readers never see a half-written snapshot
        staging = self._path.with_name(self._path.name + ".tmp")
        staging.write_text(
            json.dumps(self.snapshot(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        staging.replace(self._path)
