"""Core vetting engine components."""

from __future__ import annotations

from .errors import InvalidStateError, NotFoundError, ValidationError, VettingError
from .lifecycle import SubmissionLifecycle
from .matching import MatchingConfig, MatchingEngine, RankedAssessment
from .metrics import (
    DesignerMetrics,
    LeaderboardEntry,
    MetricsAggregator,
    SystemMetrics,
)
from .qualification import QualificationWorkflow
from .taxonomy import TaxonomyConfig, TaxonomyMatcher

__all__ = [
    "VettingError",
    "ValidationError",
    "NotFoundError",
    "InvalidStateError",
    "MatchingConfig",
    "MatchingEngine",
    "RankedAssessment",
    "SubmissionLifecycle",
    "QualificationWorkflow",
    "TaxonomyConfig",
    "TaxonomyMatcher",
    "MetricsAggregator",
    "DesignerMetrics",
    "SystemMetrics",
    "LeaderboardEntry",
]
