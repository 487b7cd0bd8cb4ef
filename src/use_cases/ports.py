"""Storage protocols the crowd use cases depend on."""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from src.core.entities import Observation, VisitRecord


class ObservationRepository(Protocol):
    def list_for_attraction(
        self,
        attraction_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        data_source: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Observation]:
        ...

    def add(self, observation: Observation) -> None:
        ...


class VisitRepository(Protocol):
    def list_for_attraction(self, attraction_id: str) -> list[VisitRecord]:
        ...


__all__ = ["ObservationRepository", "VisitRepository"]
