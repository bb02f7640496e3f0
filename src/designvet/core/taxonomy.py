"""Canonicalisation of free-form skill and tool names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from rapidfuzz import fuzz, process, utils

from ..schemas import Taxonomy
from .errors import ValidationError


@dataclass
class TaxonomyConfig:
    """Fuzzy-match threshold used when no exact match exists."""

    min_similarity: float = 85.0


class TaxonomyMatcher:
    """Map user-entered labels onto the fixed skill and tool taxonomies."""

    def __init__(self, taxonomy: Taxonomy, *, config: TaxonomyConfig | None = None) -> None:
        self._taxonomy = taxonomy
        self._config = config or TaxonomyConfig()

    @property
    def taxonomy(self) -> Taxonomy:
        return self._taxonomy

    def skill(self, value: str) -> str:
        return self._canonical(value, self._taxonomy.skills, kind="skill")

    def skills(self, values: Iterable[str]) -> list[str]:
        return [self.skill(value) for value in values]

    def tools(self, values: Iterable[str]) -> list[str]:
        return [self._canonical(value, self._taxonomy.tools, kind="tool") for value in values]

    def _canonical(self, value: str, choices: Sequence[str], *, kind: str) -> str:
        if not choices:
            return value
        lowered = value.strip().lower()
        for choice in choices:
            if choice.lower() == lowered:
                return choice
        match = process.extractOne(
            value,
            choices,
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=self._config.min_similarity,
        )
        if match is None:
            raise ValidationError(f"Unknown {kind}: {value!r}")
        return match[0]
