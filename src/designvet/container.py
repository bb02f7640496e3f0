"""Dependency injection container for the vetting engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dependency_injector import containers, providers

from .config import default_catalog, default_taxonomy
from .core import (
    MatchingEngine,
    MetricsAggregator,
    QualificationWorkflow,
    SubmissionLifecycle,
    TaxonomyMatcher,
)
from .core.matching import MatchingConfig
from .core.taxonomy import TaxonomyConfig
from .repository import InMemoryStore
from .service import AuditLogger, VettingService


class VettingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    store = providers.Singleton(
        InMemoryStore,
        assessments=providers.Callable(default_catalog),
    )

    taxonomy = providers.Singleton(default_taxonomy)
    taxonomy_matcher = providers.Singleton(TaxonomyMatcher, taxonomy)

    matching_engine = providers.Singleton(MatchingEngine)

    lifecycle = providers.Singleton(SubmissionLifecycle, store)
    qualification = providers.Singleton(
        QualificationWorkflow,
        store,
        matcher=taxonomy_matcher,
    )
    metrics = providers.Singleton(MetricsAggregator, store)

    audit_logger = providers.Object(None)

    service = providers.Factory(
        VettingService,
        store=store,
        matching=matching_engine,
        lifecycle=lifecycle,
        qualification=qualification,
        metrics=metrics,
        audit_logger=audit_logger,
    )


def create_container(
    *,
    settings: dict | None = None,
    store: Any | None = None,
    audit_log: str | Path | None = None,
) -> VettingContainer:
    """Instantiate container with optional overrides."""

    container = VettingContainer()

    if store is not None:
        container.store.override(providers.Object(store))

    if audit_log is not None:
        container.audit_logger.override(
            providers.Singleton(AuditLogger, Path(audit_log))
        )

    if not settings:
        return container

    matching_settings = settings.get("matching", {}) if isinstance(settings, dict) else {}
    if matching_settings:
        matching_config = MatchingConfig(**matching_settings)
        container.matching_engine.override(
            providers.Singleton(MatchingEngine, config=matching_config)
        )

    taxonomy_settings = settings.get("taxonomy", {}) if isinstance(settings, dict) else {}
    if taxonomy_settings:
        taxonomy_config = TaxonomyConfig(**taxonomy_settings)
        container.taxonomy_matcher.override(
            providers.Singleton(
                TaxonomyMatcher,
                container.taxonomy,
                config=taxonomy_config,
            )
        )

    return container
