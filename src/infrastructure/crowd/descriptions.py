"""Human readable descriptions for crowd levels and wait times."""
from __future__ import annotations

from typing import Optional, Sequence

CROWD_LEVEL_BANDS: Sequence[tuple[float, str]] = (
    (0.2, "Very Low"),
    (0.4, "Low"),
    (0.6, "Moderate"),
    (0.8, "High"),
)

WAIT_TIME_BANDS: Sequence[tuple[int, str]] = (
    (10, "No Wait"),
    (30, "Short Wait"),
    (60, "Medium Wait"),
)


def describe_crowd_level(level: float) -> str:
    for upper, label in CROWD_LEVEL_BANDS:
        if level < upper:
            return label
    return "Very High"


def describe_wait_time(minutes: Optional[int]) -> str:
    if minutes is None:
        return "Unknown"
    for upper, label in WAIT_TIME_BANDS:
        if minutes < upper:
            return label
    return "Long Wait"


__all__ = ["describe_crowd_level", "describe_wait_time"]
