"""List-backed repositories used by scripts and tests."""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from src.core.entities import Observation, VisitRecord


def filter_observations(
    observations: Iterable[Observation],
    attraction_id: str,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    data_source: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[Observation]:
    """Apply the repository query contract: newest first, limit after filtering."""

    selected = [
        observation
        for observation in observations
        if observation.attraction_id == attraction_id
        and (start is None or observation.timestamp >= start)
        and (end is None or observation.timestamp <= end)
        and (data_source is None or observation.data_source == data_source)
    ]
    selected.sort(key=lambda observation: observation.timestamp, reverse=True)
    if limit is not None:
        selected = selected[:limit]
    return selected


class InMemoryObservationRepository:
    def __init__(self, observations: Iterable[Observation] = ()) -> None:
        self._observations: list[Observation] = list(observations)

    def list_for_attraction(
        self,
        attraction_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        data_source: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Observation]:
        return filter_observations(
            self._observations,
            attraction_id,
            start=start,
            end=end,
            data_source=data_source,
            limit=limit,
        )

    def add(self, observation: Observation) -> None:
        self._observations.append(observation)


class InMemoryVisitRepository:
    def __init__(self, visits: Iterable[VisitRecord] = ()) -> None:
        self._visits: list[VisitRecord] = list(visits)

    def list_for_attraction(self, attraction_id: str) -> list[VisitRecord]:
        return [visit for visit in self._visits if visit.attraction_id == attraction_id]

    def add(self, visit: VisitRecord) -> None:
        self._visits.append(visit)


__all__ = ["InMemoryObservationRepository", "InMemoryVisitRepository", "filter_observations"]
