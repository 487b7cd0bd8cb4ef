"""Trailing-window crowd estimation and hourly statistics."""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Callable, Iterable, Optional, Sequence

import pandas as pd

from src.core.entities import HourlyAverage, Observation, StatsSummary
from src.core.settings import EstimatorSettings
from src.utils.logger import logger

UNKNOWN_LABEL = "unknown"


def _as_datetime(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


class CrowdEstimator:
    """Reduce historical observations to a crowd label and summary statistics.

    The estimator works on already materialised observations and keeps no state
    between calls besides its immutable settings, so a single instance can be
    shared across threads. Inputs are trusted: range validation happens when
    :class:`~src.core.entities.Observation` instances are built.
    """

    def __init__(
        self,
        settings: EstimatorSettings | None = None,
        now_provider: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings or EstimatorSettings()
        self._now_provider = now_provider or datetime.now

    @property
    def settings(self) -> EstimatorSettings:
        return self._settings

    def now(self) -> datetime:
        return self._now_provider()

    def classify(self, average: float) -> str:
        if average < self._settings.low_threshold:
            return "low"
        if average < self._settings.high_threshold:
            return "medium"
        return "high"

    def prediction_window(self, target_date: datetime | date) -> tuple[datetime, datetime]:
        """Return the inclusive ``(start, end)`` bounds used for a prediction."""

        end = _as_datetime(target_date)
        start = end - timedelta(days=self._settings.prediction_window_days)
        return start, end

    def predict_crowd_level(
        self, observations: Iterable[Observation], target_date: datetime | date
    ) -> str:
        start, end = self.prediction_window(target_date)
        levels = [
            observation.crowd_level
            for observation in observations
            if start <= observation.timestamp <= end
        ]
        if not levels:
            logger.debug("No observations between {} and {}", start, end)
            return UNKNOWN_LABEL

        average = sum(levels) / len(levels)
        label = self.classify(average)
        logger.debug("Average crowd level {:.3f} over {} observations -> {}", average, len(levels), label)
        return label

    def compute_stats(
        self,
        observations: Iterable[Observation],
        window_days: int | None = None,
        now: datetime | None = None,
    ) -> StatsSummary:
        days = self._settings.stats_window_days if window_days is None else window_days
        reference = now or self.now()
        start = reference - timedelta(days=days)

        selected = [observation for observation in observations if observation.timestamp >= start]
        if not selected:
            return StatsSummary.empty()

        frame = self._to_frame(selected)
        wait_times = pd.to_numeric(frame["wait_time"], errors="coerce").dropna()
        average_wait_time = float(wait_times.mean()) if not wait_times.empty else 0.0

        hourly = (
            frame.groupby("hour_of_day")["crowd_level"]
            .mean()
            .sort_values(ascending=False, kind="stable")
        )
        hourly_averages = [
            HourlyAverage(hour=int(hour), average_crowd_level=float(average))
            for hour, average in hourly.items()
        ]
        hours = [entry.hour for entry in hourly_averages]
        count = self._settings.peak_hour_count

        return StatsSummary(
            total_reports=int(len(frame)),
            average_crowd_level=float(frame["crowd_level"].mean()),
            average_wait_time=average_wait_time,
            peak_hours=hours[:count],
            quiet_hours=hours[-count:],
            hourly_averages=hourly_averages,
        )

    @staticmethod
    def latest_crowd_level(observations: Iterable[Observation]) -> Optional[float]:
        latest: Observation | None = None
        for observation in observations:
            if latest is None or observation.timestamp > latest.timestamp:
                latest = observation
        return latest.crowd_level if latest is not None else None

    @staticmethod
    def _to_frame(observations: Sequence[Observation]) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "crowd_level": [observation.crowd_level for observation in observations],
                "wait_time": [observation.wait_time for observation in observations],
                "hour_of_day": [observation.hour_of_day for observation in observations],
            }
        )


__all__ = ["CrowdEstimator", "UNKNOWN_LABEL"]
