"""Use case for scoring past predictions against reported visits."""
from __future__ import annotations

from typing import Iterable, Protocol

from src.core.entities import VisitRecord
from src.infrastructure.crowd.accuracy import AccuracyReport
from src.use_cases.ports import VisitRepository


class AccuracyEvaluator(Protocol):
    def evaluate(self, visits: Iterable[VisitRecord]) -> AccuracyReport:
        ...


class EvaluatePredictionsUseCase:
    """Thin wrapper that delegates to an accuracy evaluator."""

    def __init__(self, visits: VisitRepository, evaluator: AccuracyEvaluator) -> None:
        self._visits = visits
        self._evaluator = evaluator

    def execute(self, attraction_id: str) -> AccuracyReport:
        return self._evaluator.evaluate(self._visits.list_for_attraction(attraction_id))


__all__ = ["EvaluatePredictionsUseCase"]
