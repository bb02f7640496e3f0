"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas import Assessment, Taxonomy

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path = DEFAULT_CONFIG_DIR):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        path = self._base_path / f"{name}.yaml"
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def load_catalog(self, name: str = "catalog") -> list[Assessment]:
        """Return the assessment catalog declared under ``assessments``."""
        raw = self.load(name)
        return [Assessment.model_validate(item) for item in raw.get("assessments", [])]

    def load_taxonomy(self, name: str = "catalog") -> Taxonomy:
        """Return the skill and tool taxonomies declared under ``taxonomy``."""
        raw = self.load(name)
        return Taxonomy.model_validate(raw.get("taxonomy", {}))


def default_catalog() -> list[Assessment]:
    return ConfigManager().load_catalog()


def default_taxonomy() -> Taxonomy:
    return ConfigManager().load_taxonomy()


__all__ = ["ConfigManager", "DEFAULT_CONFIG_DIR", "default_catalog", "default_taxonomy"]
