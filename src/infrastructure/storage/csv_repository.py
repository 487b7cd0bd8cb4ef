"""Observation and visit storage backed by CSV files."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

import pandas as pd

from src.core.entities import Observation, VisitRecord, day_of_week
from src.infrastructure.storage.memory import filter_observations
from src.utils.logger import logger

REQUIRED_COLUMNS = {"attraction_id", "crowd_level", "timestamp"}
COLUMNS = (
    "attraction_id",
    "crowd_level",
    "wait_time",
    "timestamp",
    "day_of_week",
    "hour_of_day",
    "data_source",
    "confidence",
    "notes",
)
VISIT_REQUIRED_COLUMNS = {"attraction_id", "visit_date"}
VISIT_COLUMNS = (
    "attraction_id",
    "visit_date",
    "predicted_crowd_level",
    "actual_crowd_level",
    "predicted_wait_time",
    "actual_wait_time",
)


def _optional(value: Any) -> Any:
    return None if pd.isna(value) else value


class CsvObservationRepository:
    """Load and append crowd observations stored as CSV rows.

    Every row is turned into a validated :class:`Observation`, so malformed
    values surface as ``ValueError`` here rather than inside the estimator.
    """

    def __init__(self, csv_path: Path) -> None:
        self._csv_path = Path(csv_path)

    def load(self) -> list[Observation]:
        if not self._csv_path.exists():
            raise FileNotFoundError(f"Dataset not found: {self._csv_path}")

        data = pd.read_csv(self._csv_path, dtype={"attraction_id": str})
        missing = REQUIRED_COLUMNS - set(data.columns)
        if missing:
            raise ValueError(
                "Dataset is missing required columns: " + ", ".join(sorted(missing))
            )

        data["timestamp"] = pd.to_datetime(data["timestamp"], format="ISO8601")
        hours = data["timestamp"].dt.hour
        days = data["timestamp"].apply(lambda value: day_of_week(value.to_pydatetime()))
        data["hour_of_day"] = data["hour_of_day"].fillna(hours) if "hour_of_day" in data.columns else hours
        data["day_of_week"] = data["day_of_week"].fillna(days) if "day_of_week" in data.columns else days

        observations = [self._row_to_observation(row) for row in data.to_dict(orient="records")]
        logger.debug("Loaded {} observations from {}", len(observations), self._csv_path)
        return observations

    def list_for_attraction(
        self,
        attraction_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        data_source: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[Observation]:
        return filter_observations(
            self.load(),
            attraction_id,
            start=start,
            end=end,
            data_source=data_source,
            limit=limit,
        )

    def add(self, observation: Observation) -> None:
        """Append one observation, widening the file when its header lacks columns."""

        row = pd.DataFrame([self._observation_to_row(observation)], columns=list(COLUMNS))
        if self._csv_path.exists():
            header = list(pd.read_csv(self._csv_path, nrows=0).columns)
            if header == list(COLUMNS):
                row.to_csv(self._csv_path, mode="a", header=False, index=False)
                return
            existing = pd.read_csv(self._csv_path, dtype={"attraction_id": str})
            merged = pd.concat([existing, row], ignore_index=True)
            merged.to_csv(self._csv_path, index=False)
            logger.debug("Rewrote {} with columns {}", self._csv_path, list(merged.columns))
        else:
            self._csv_path.parent.mkdir(parents=True, exist_ok=True)
            row.to_csv(self._csv_path, index=False)

    def save_all(self, observations: list[Observation]) -> Path:
        frame = pd.DataFrame(
            [self._observation_to_row(observation) for observation in observations],
            columns=list(COLUMNS),
        )
        self._csv_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(self._csv_path, index=False)
        logger.info("Saved {} observations to {}", len(frame), self._csv_path)
        return self._csv_path

    @staticmethod
    def _row_to_observation(row: Mapping[str, Any]) -> Observation:
        wait_time = _optional(row.get("wait_time"))
        confidence = _optional(row.get("confidence"))
        notes = _optional(row.get("notes"))
        return Observation(
            attraction_id=str(row["attraction_id"]),
            crowd_level=float(row["crowd_level"]),
            timestamp=row["timestamp"].to_pydatetime(),
            day_of_week=int(row["day_of_week"]),
            hour_of_day=int(row["hour_of_day"]),
            wait_time=int(wait_time) if wait_time is not None else None,
            data_source=str(_optional(row.get("data_source")) or "user_report"),
            confidence=float(confidence) if confidence is not None else None,
            notes=str(notes) if notes is not None else None,
        )

    @staticmethod
    def _observation_to_row(observation: Observation) -> Mapping[str, Any]:
        return {
            "attraction_id": observation.attraction_id,
            "crowd_level": observation.crowd_level,
            "wait_time": observation.wait_time,
            "timestamp": observation.timestamp.isoformat(timespec="microseconds"),
            "day_of_week": observation.day_of_week,
            "hour_of_day": observation.hour_of_day,
            "data_source": observation.data_source,
            "confidence": observation.confidence,
            "notes": observation.notes,
        }



class CsvVisitRepository:
    """Read past visits, with their predicted and observed crowds, from a CSV file."""

    def __init__(self, csv_path: Path) -> None:
        self._csv_path = Path(csv_path)

    def load(self) -> list[VisitRecord]:
        if not self._csv_path.exists():
            raise FileNotFoundError(f"Dataset not found: {self._csv_path}")

        data = pd.read_csv(self._csv_path, dtype={"attraction_id": str})
        missing = VISIT_REQUIRED_COLUMNS - set(data.columns)
        if missing:
            raise ValueError(
                "Dataset is missing required columns: " + ", ".join(sorted(missing))
            )
        data = data.reindex(columns=list(VISIT_COLUMNS))
        data["visit_date"] = pd.to_datetime(data["visit_date"], format="ISO8601")

        visits = []
        for row in data.to_dict(orient="records"):
            predicted_wait = _optional(row["predicted_wait_time"])
            actual_wait = _optional(row["actual_wait_time"])
            predicted_level = _optional(row["predicted_crowd_level"])
            actual_level = _optional(row["actual_crowd_level"])
            visits.append(
                VisitRecord(
                    attraction_id=str(row["attraction_id"]),
                    visit_date=row["visit_date"].to_pydatetime(),
                    predicted_crowd_level=float(predicted_level) if predicted_level is not None else None,
                    actual_crowd_level=float(actual_level) if actual_level is not None else None,
                    predicted_wait_time=int(predicted_wait) if predicted_wait is not None else None,
                    actual_wait_time=int(actual_wait) if actual_wait is not None else None,
                )
            )
        logger.debug("Loaded {} visits from {}", len(visits), self._csv_path)
        return visits

    def list_for_attraction(self, attraction_id: str) -> list[VisitRecord]:
        return [visit for visit in self.load() if visit.attraction_id == attraction_id]


__all__ = ["CsvObservationRepository", "CsvVisitRepository"]
