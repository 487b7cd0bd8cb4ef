"""Pytest configuration for the project."""
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for candidate in (ROOT, SRC):
    if str(candidate) not in sys.path:
        sys.path.insert(0, str(candidate))

from src.core.entities import Observation, day_of_week  # noqa: E402

NOW = datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_observation() -> Callable[..., Observation]:
    def _factory(
        crowd_level: float,
        timestamp: datetime = NOW,
        attraction_id: str = "central-park",
        wait_time: Optional[int] = None,
        hour_of_day: Optional[int] = None,
        data_source: str = "user_report",
    ) -> Observation:
        return Observation(
            attraction_id=attraction_id,
            crowd_level=crowd_level,
            timestamp=timestamp,
            day_of_week=day_of_week(timestamp),
            hour_of_day=timestamp.hour if hour_of_day is None else hour_of_day,
            wait_time=wait_time,
            data_source=data_source,
        )

    return _factory
