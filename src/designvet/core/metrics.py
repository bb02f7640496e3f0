"""Per-designer and system-wide performance metrics."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from ..schemas import VERIFIED_STATUSES, Submission, SubmissionStatus


@dataclass(slots=True)
class DesignerMetrics:
    average_score: int
    percentile: float
    total_submissions: int


@dataclass(slots=True)
class SystemMetrics:
    total_designers: int
    pending_count: int
    verification_rate: int
    efficiency: int


@dataclass(slots=True)
class LeaderboardEntry:
    designer_id: str
    full_name: str
    status: str
    metrics: DesignerMetrics


def round_half_up(value: float, places: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def mean_graded_score(submissions: Iterable[Submission]) -> float:
    """Mean score of reviewed submissions, 0.0 when none are graded."""
    scores = [s.score for s in submissions if s.is_graded]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


class MetricsAggregator:
    """Recompute metrics from the store on every call.

    Nothing here raises on missing data: empty populations fall back to 0, or
    100 for the percentile, so dashboards always have a value to render.
    """

    def __init__(self, store: Any) -> None:
        self._store = store

    def designer_metrics(self, designer_id: str) -> DesignerMetrics:
        submissions = self._store.list_submissions_for(designer_id)
        mean = mean_graded_score(submissions)
        return DesignerMetrics(
            average_score=int(round_half_up(mean)),
            percentile=self._percentile(mean, self._population_means()),
            total_submissions=len(submissions),
        )

    def system_metrics(self) -> SystemMetrics:
        profiles = self._store.list_profiles()
        submissions = self._store.list_all_submissions()
        pending = sum(1 for s in submissions if s.status is SubmissionStatus.PENDING)
        reviewed = sum(1 for s in submissions if s.status is SubmissionStatus.REVIEWED)
        verified = sum(1 for p in profiles if p.status in VERIFIED_STATUSES)
        return SystemMetrics(
            total_designers=len(profiles),
            pending_count=pending,
            verification_rate=self._rate(verified, len(profiles)),
            efficiency=self._rate(reviewed, len(submissions)),
        )

    def leaderboard(self) -> list[LeaderboardEntry]:
        """Every designer with metrics, best average first."""
        population = self._population_means()
        entries: list[tuple[float, LeaderboardEntry]] = []
        for profile in self._store.list_profiles():
            submissions = self._store.list_submissions_for(profile.designer_id)
            mean = mean_graded_score(submissions)
            metrics = DesignerMetrics(
                average_score=int(round_half_up(mean)),
                percentile=self._percentile(mean, population),
                total_submissions=len(submissions),
            )
            entries.append(
                (
                    mean,
                    LeaderboardEntry(
                        designer_id=profile.designer_id,
                        full_name=profile.full_name,
                        status=profile.status.value,
                        metrics=metrics,
                    ),
                )
            )
        entries.sort(key=lambda item: item[0], reverse=True)
        return [entry for _, entry in entries]

    def _population_means(self) -> list[float]:
        means = [
            mean_graded_score(self._store.list_submissions_for(p.designer_id))
            for p in self._store.list_profiles()
        ]
        return sorted(means, reverse=True)

    @staticmethod
    def _percentile(mean: float, population: list[float]) -> float:
        if not population:
            return 100.0
        # first slot at or below the mean: ties share the best rank of their group
        index = next(
            (i for i, value in enumerate(population) if value <= mean),
            len(population) - 1,
        )
        ratio = (index + 1) / len(population) * 100
        return max(1.0, float(round_half_up(ratio, 1)))

    @staticmethod
    def _rate(part: int, whole: int) -> int:
        if whole == 0:
            return 0
        return int(round_half_up(part / whole * 100))
