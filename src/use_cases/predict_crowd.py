"""Use case for estimating the crowd at one or more attractions."""
from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Protocol, Sequence

from src.core.entities import Observation, PredictionResult
from src.core.settings import EstimatorSettings
from src.use_cases.ports import ObservationRepository
from src.utils.logger import logger


class CrowdPredictor(Protocol):
    @property
    def settings(self) -> EstimatorSettings:
        ...

    def now(self) -> datetime:
        ...

    def prediction_window(self, target_date: datetime | date) -> tuple[datetime, datetime]:
        ...

    def predict_crowd_level(
        self, observations: Sequence[Observation], target_date: datetime | date
    ) -> str:
        ...


class PredictCrowdUseCase:
    """Fetch recent observations and turn them into a crowd prediction.

    ``attraction_names`` optionally maps attraction ids to display names; when
    a name is known it is attached to the result.
    """

    def __init__(
        self,
        repository: ObservationRepository,
        estimator: CrowdPredictor,
        attraction_names: Mapping[str, str] | None = None,
    ) -> None:
        self._repository = repository
        self._estimator = estimator
        self._attraction_names = dict(attraction_names or {})

    def execute(
        self, attraction_id: str, target_date: datetime | date | None = None
    ) -> PredictionResult:
        target = target_date or self._estimator.now()
        start, end = self._estimator.prediction_window(target)
        observations = self._repository.list_for_attraction(attraction_id, start=start, end=end)
        label = self._estimator.predict_crowd_level(observations, target)
        logger.info("Predicted '{}' crowd for attraction {} on {}", label, attraction_id, target)
        return PredictionResult(
            attraction_id=attraction_id,
            target_date=target,
            predicted_crowd_level=label,
            confidence=self._estimator.settings.prediction_confidence,
            attraction_name=self._attraction_names.get(attraction_id),
        )

    def execute_batch(
        self, attraction_ids: Sequence[str], target_date: datetime | date | None = None
    ) -> list[PredictionResult]:
        if not attraction_ids:
            raise ValueError("At least one attraction id is required for a batch prediction.")

        target = target_date or self._estimator.now()
        logger.info("Running batch prediction for {} attractions", len(attraction_ids))
        return [self.execute(attraction_id, target) for attraction_id in attraction_ids]


__all__ = ["PredictCrowdUseCase"]
