"""Relevance scoring between designer profiles and the assessment catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..schemas import Assessment, DesignerProfile


@dataclass
class MatchingConfig:
    """Weights for each relevance term and the recommendation cap."""

    primary_weight: int = 10
    secondary_weight: int = 5
    tool_weight: int = 3
    limit: int = 4


@dataclass(slots=True)
class RankedAssessment:
    """Assessment with its relevance breakdown."""

    assessment: Assessment
    primary: int
    secondary: int
    tools: int

    @property
    def total(self) -> int:
        return self.primary + self.secondary + self.tools


class MatchingEngine:
    """Rank catalog assessments by relevance to a designer profile."""

    method = "skill_tool_match"

    def __init__(self, *, config: MatchingConfig | None = None) -> None:
        self._config = config or MatchingConfig()

    def score(self, profile: DesignerProfile, assessment: Assessment) -> RankedAssessment:
        category = assessment.category
        primary = self._config.primary_weight if category == profile.primary_skill else 0
        # secondary skills are deduplicated on the profile, so each matches at most once
        secondary = self._config.secondary_weight * sum(
            1 for skill in profile.secondary_skills if skill == category
        )
        owned = set(profile.tools)
        tools = self._config.tool_weight * sum(
            1 for tool in assessment.tools_required if tool in owned
        )
        return RankedAssessment(
            assessment=assessment,
            primary=primary,
            secondary=secondary,
            tools=tools,
        )

    def rank(
        self,
        profile: DesignerProfile,
        catalog: Iterable[Assessment],
    ) -> list[RankedAssessment]:
        """Score every assessment, highest first; ties keep catalog order."""
        scored = [self.score(profile, assessment) for assessment in catalog]
        # sorted() is stable, which keeps equal totals in catalog order
        return sorted(scored, key=lambda item: item.total, reverse=True)

    def top(
        self,
        profile: DesignerProfile,
        catalog: Iterable[Assessment],
    ) -> list[RankedAssessment]:
        """Highest-scoring assessments, capped at the configured limit."""
        return self.rank(profile, catalog)[: self._config.limit]

    def recommend(
        self,
        profile: DesignerProfile,
        catalog: Iterable[Assessment],
    ) -> list[Assessment]:
        return [item.assessment for item in self.top(profile, catalog)]
