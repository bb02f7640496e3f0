"""Pydantic configuration schema for YAML settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class MatchingSettings(BaseModel):
    primary_weight: int | None = None
    secondary_weight: int | None = None
    tool_weight: int | None = None
    limit: int | None = Field(default=None, ge=1)


class TaxonomySettings(BaseModel):
    min_similarity: float | None = Field(default=None, ge=0, le=100)


class AppConfig(BaseModel):
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    taxonomy: TaxonomySettings = Field(default_factory=TaxonomySettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        matching = self.matching.model_dump(exclude_none=True)
        if matching:
            settings["matching"] = matching
        taxonomy = self.taxonomy.model_dump(exclude_none=True)
        if taxonomy:
            settings["taxonomy"] = taxonomy
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
