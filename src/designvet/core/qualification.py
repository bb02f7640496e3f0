"""Designer qualification workflow."""

from __future__ import annotations

from typing import Any, Callable

import pendulum
import structlog

from ..schemas import DesignerProfile, QualificationStatus, StatusChange
from .errors import NotFoundError, ValidationError
from .taxonomy import TaxonomyMatcher


class QualificationWorkflow:
    """Administrator-driven status changes over an unconstrained state graph.

    Every status may be set from every other; each change is appended to the
    store's history log while the profile keeps the current value.
    """

    def __init__(
        self,
        store: Any,
        *,
        matcher: TaxonomyMatcher | None = None,
        now_provider: Callable[[], Any] | None = None,
    ) -> None:
        self._store = store
        self._matcher = matcher
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    def set_status(
        self,
        designer_id: str,
        status: QualificationStatus | str,
        *,
        actor: str = "admin",
    ) -> None:
        try:
            target = QualificationStatus(status)
        except ValueError as exc:
            allowed = ", ".join(s.value for s in QualificationStatus)
            raise ValidationError(f"Unknown status {status!r}; expected one of {allowed}") from exc

        profile = self._store.get_profile(designer_id)
        if profile is None:
            raise NotFoundError("designer", designer_id)

        previous = profile.status
        self._store.save_profile(profile.model_copy(update={"status": target}))
        self._store.append_status_change(
            StatusChange(
                designer_id=designer_id,
                previous=previous,
                status=target,
                actor=actor,
                changed_at=self._now_provider(),
            )
        )
        self._logger.info(
            "qualification.status_changed",
            designer_id=designer_id,
            previous=previous.value,
            status=target.value,
            actor=actor,
        )

    def complete_profile(self, profile: DesignerProfile) -> DesignerProfile:
        """Insert or update a profile; new profiles always start as New."""
        if self._matcher is not None:
            profile = profile.model_copy(
                update={
                    "primary_skill": self._matcher.skill(profile.primary_skill),
                    "secondary_skills": list(
                        dict.fromkeys(self._matcher.skills(profile.secondary_skills))
                    ),
                    "tools": list(dict.fromkeys(self._matcher.tools(profile.tools))),
                }
            )

        existing = self._store.get_profile(profile.designer_id)
        status = existing.status if existing is not None else QualificationStatus.NEW
        saved = profile.model_copy(update={"status": status})
        self._store.save_profile(saved)
        if existing is None:
            self._store.append_status_change(
                StatusChange(
                    designer_id=saved.designer_id,
                    previous=None,
                    status=status,
                    actor=saved.designer_id,
                    changed_at=self._now_provider(),
                )
            )
        self._logger.info(
            "profile.completed",
            designer_id=saved.designer_id,
            created=existing is None,
            primary_skill=saved.primary_skill,
        )
        return saved

    def history(self, designer_id: str) -> list[StatusChange]:
        return self._store.list_status_changes(designer_id)
