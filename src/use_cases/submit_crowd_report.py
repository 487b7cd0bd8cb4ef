"""Use case for storing a crowd report submitted by a visitor."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from src.core.entities import Observation
from src.use_cases.ports import ObservationRepository
from src.utils.logger import logger


class SubmitCrowdReportUseCase:
    def __init__(self, repository: ObservationRepository) -> None:
        self._repository = repository

    def execute(
        self,
        attraction_id: str,
        crowd_level: float,
        wait_time: Optional[int] = None,
        notes: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> Observation:
        observation = Observation.from_report(
            attraction_id,
            crowd_level,
            wait_time=wait_time,
            timestamp=timestamp,
            notes=notes,
        )
        self._repository.add(observation)
        logger.info("Stored crowd report for attraction {}", attraction_id)
        return observation


__all__ = ["SubmitCrowdReportUseCase"]
