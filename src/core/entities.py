"""Core entities for the crowd analytics domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

DATA_SOURCES = ("user_report", "api", "prediction", "sensor")
PREDICTION_LABELS = ("unknown", "low", "medium", "high")

USER_REPORT_CONFIDENCE = 0.7
MAX_NOTES_LENGTH = 500


def _check_unit_interval(name: str, value: Optional[float]) -> None:
    if value is not None and not 0.0 <= value <= 1.0:
        raise ValueError(f"'{name}' must be between 0 and 1, got {value}.")


def _check_non_negative(name: str, value: Optional[int]) -> None:
    if value is not None and value < 0:
        raise ValueError(f"'{name}' must be non-negative, got {value}.")


def day_of_week(moment: datetime) -> int:
    """Return the day index with Sunday as 0, as stored alongside observations."""

    return (moment.weekday() + 1) % 7


@dataclass(frozen=True)
class Observation:
    """A single crowd measurement for one attraction at one point in time."""

    attraction_id: str
    crowd_level: float
    timestamp: datetime
    day_of_week: int
    hour_of_day: int
    wait_time: Optional[int] = None
    data_source: str = "user_report"
    confidence: Optional[float] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.attraction_id:
            raise ValueError("Each observation must reference an attraction.")
        _check_unit_interval("crowd_level", self.crowd_level)
        _check_unit_interval("confidence", self.confidence)
        _check_non_negative("wait_time", self.wait_time)
        if not 0 <= self.day_of_week <= 6:
            raise ValueError(f"'day_of_week' must be between 0 and 6, got {self.day_of_week}.")
        if not 0 <= self.hour_of_day <= 23:
            raise ValueError(f"'hour_of_day' must be between 0 and 23, got {self.hour_of_day}.")
        if self.data_source not in DATA_SOURCES:
            raise ValueError(
                f"Unknown data source '{self.data_source}'. Expected one of: {', '.join(DATA_SOURCES)}."
            )
        if self.notes is not None and len(self.notes) > MAX_NOTES_LENGTH:
            raise ValueError(f"'notes' cannot exceed {MAX_NOTES_LENGTH} characters.")

    @classmethod
    def from_report(
        cls,
        attraction_id: str,
        crowd_level: float,
        wait_time: Optional[int] = None,
        timestamp: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> "Observation":
        """Build an observation submitted by a visitor."""

        moment = timestamp or datetime.now()
        return cls(
            attraction_id=attraction_id,
            crowd_level=crowd_level,
            timestamp=moment,
            day_of_week=day_of_week(moment),
            hour_of_day=moment.hour,
            wait_time=wait_time,
            data_source="user_report",
            confidence=USER_REPORT_CONFIDENCE,
            notes=notes,
        )


@dataclass(frozen=True)
class PredictionResult:
    """Crowd label estimated for an attraction on a given date."""

    attraction_id: str
    target_date: datetime | date
    predicted_crowd_level: str
    confidence: float
    attraction_name: Optional[str] = None


@dataclass(frozen=True)
class HourlyAverage:
    hour: int
    average_crowd_level: float


@dataclass(frozen=True)
class StatsSummary:
    """Descriptive statistics over a trailing window of observations."""

    total_reports: int
    average_crowd_level: float
    average_wait_time: float
    peak_hours: list[int] = field(default_factory=list)
    quiet_hours: list[int] = field(default_factory=list)
    hourly_averages: list[HourlyAverage] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "StatsSummary":
        return cls(total_reports=0, average_crowd_level=0.0, average_wait_time=0.0)


@dataclass(frozen=True)
class VisitRecord:
    """A past visit pairing the predicted crowd with what was observed."""

    attraction_id: str
    visit_date: datetime
    predicted_crowd_level: Optional[float] = None
    actual_crowd_level: Optional[float] = None
    predicted_wait_time: Optional[int] = None
    actual_wait_time: Optional[int] = None

    def __post_init__(self) -> None:
        _check_unit_interval("predicted_crowd_level", self.predicted_crowd_level)
        _check_unit_interval("actual_crowd_level", self.actual_crowd_level)
        _check_non_negative("predicted_wait_time", self.predicted_wait_time)
        _check_non_negative("actual_wait_time", self.actual_wait_time)


__all__ = [
    "DATA_SOURCES",
    "HourlyAverage",
    "Observation",
    "PREDICTION_LABELS",
    "PredictionResult",
    "StatsSummary",
    "VisitRecord",
    "day_of_week",
]
