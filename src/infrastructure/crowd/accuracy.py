"""Compare predicted crowd values with what visitors actually observed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from src.core.entities import VisitRecord
from src.core.settings import EstimatorSettings
from src.utils.logger import logger

DEFAULT_TOLERANCE = 0.2


def prediction_accuracy(predicted: Optional[float], actual: Optional[float]) -> Optional[float]:
    """Absolute crowd-level error, or ``None`` when either value is missing."""

    if predicted is None or actual is None:
        return None
    return abs(predicted - actual)


def is_prediction_accurate(
    predicted: Optional[float],
    actual: Optional[float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    error = prediction_accuracy(predicted, actual)
    return error is not None and error < tolerance


def wait_time_accuracy(predicted: Optional[int], actual: Optional[int]) -> Optional[int]:
    if predicted is None or actual is None:
        return None
    return abs(predicted - actual)


@dataclass(frozen=True)
class AccuracyReport:
    """Aggregate accuracy of past predictions."""

    evaluated: int
    accurate: int
    accuracy_rate: float
    mean_absolute_error: float
    mean_wait_time_error: float


class PredictionAccuracyEvaluator:
    """Summarise how close stored predictions were to reported crowds."""

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self._tolerance = tolerance

    @classmethod
    def from_settings(cls, settings: EstimatorSettings) -> "PredictionAccuracyEvaluator":
        return cls(tolerance=settings.accuracy_tolerance)

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def evaluate(self, visits: Iterable[VisitRecord]) -> AccuracyReport:
        crowd_errors: list[float] = []
        wait_errors: list[int] = []
        accurate = 0
        for visit in visits:
            wait_error = wait_time_accuracy(visit.predicted_wait_time, visit.actual_wait_time)
            if wait_error is not None:
                wait_errors.append(wait_error)

            error = prediction_accuracy(visit.predicted_crowd_level, visit.actual_crowd_level)
            if error is None:
                continue
            crowd_errors.append(error)
            if error < self._tolerance:
                accurate += 1

        evaluated = len(crowd_errors)
        logger.debug("Evaluated {} visits, {} within tolerance", evaluated, accurate)
        return AccuracyReport(
            evaluated=evaluated,
            accurate=accurate,
            accuracy_rate=accurate / evaluated if evaluated else 0.0,
            mean_absolute_error=sum(crowd_errors) / evaluated if evaluated else 0.0,
            mean_wait_time_error=sum(wait_errors) / len(wait_errors) if wait_errors else 0.0,
        )


__all__ = [
    "AccuracyReport",
    "DEFAULT_TOLERANCE",
    "PredictionAccuracyEvaluator",
    "is_prediction_accurate",
    "prediction_accuracy",
    "wait_time_accuracy",
]
