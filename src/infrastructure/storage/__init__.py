"""Repositories that supply observations and visits to the use cases."""

from .csv_repository import CsvObservationRepository, CsvVisitRepository
from .memory import InMemoryObservationRepository, InMemoryVisitRepository

__all__ = [
    "CsvObservationRepository",
    "CsvVisitRepository",
    "InMemoryObservationRepository",
    "InMemoryVisitRepository",
]
