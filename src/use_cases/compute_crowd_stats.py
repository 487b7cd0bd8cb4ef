"""Use case for summarising recent crowd reports of an attraction."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, Sequence

from src.core.entities import Observation, StatsSummary
from src.core.settings import EstimatorSettings
from src.use_cases.ports import ObservationRepository
from src.utils.logger import logger


class StatsCalculator(Protocol):
    @property
    def settings(self) -> EstimatorSettings:
        ...

    def now(self) -> datetime:
        ...

    def compute_stats(
        self,
        observations: Sequence[Observation],
        window_days: int | None = None,
        now: datetime | None = None,
    ) -> StatsSummary:
        ...


class ComputeCrowdStatsUseCase:
    """Load the trailing window from storage and compute hourly statistics."""

    def __init__(self, repository: ObservationRepository, estimator: StatsCalculator) -> None:
        self._repository = repository
        self._estimator = estimator

    def execute(
        self,
        attraction_id: str,
        window_days: int | None = None,
        now: datetime | None = None,
    ) -> StatsSummary:
        days = self._estimator.settings.stats_window_days if window_days is None else window_days
        reference = now or self._estimator.now()
        observations = self._repository.list_for_attraction(
            attraction_id, start=reference - timedelta(days=days)
        )
        logger.info("Computing stats for attraction {} over {} reports", attraction_id, len(observations))
        return self._estimator.compute_stats(observations, window_days=days, now=reference)


__all__ = ["ComputeCrowdStatsUseCase"]
