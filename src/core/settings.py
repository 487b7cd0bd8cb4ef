"""Tunable thresholds and windows used by the crowd estimator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class EstimatorSettings:
    """Named constants for the crowd estimator and the accuracy check."""

    low_threshold: float = 0.3
    high_threshold: float = 0.7
    prediction_window_days: int = 30
    stats_window_days: int = 30
    prediction_confidence: float = 0.8
    accuracy_tolerance: float = 0.2
    peak_hour_count: int = 3

    def __post_init__(self) -> None:
        for name in ("low_threshold", "high_threshold", "prediction_confidence", "accuracy_tolerance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"'{name}' must be between 0 and 1, got {value}.")
        if self.low_threshold >= self.high_threshold:
            raise ValueError(
                f"'low_threshold' ({self.low_threshold}) must be lower than 'high_threshold' ({self.high_threshold})."
            )
        for name in ("prediction_window_days", "stats_window_days", "peak_hour_count"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"'{name}' must be positive, got {value}.")

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> "EstimatorSettings":
        """Build settings from the ``estimator`` section of the YAML config.

        Missing keys fall back to the defaults; unknown keys are rejected so that
        typos in the configuration file do not go unnoticed.
        """

        if not config:
            return cls()

        known = set(cls.__dataclass_fields__)
        unknown = set(config) - known
        if unknown:
            raise ValueError("Unknown estimator settings: " + ", ".join(sorted(unknown)))

        values: dict[str, Any] = {}
        for name, value in config.items():
            if name.endswith("_days") or name == "peak_hour_count":
                values[name] = int(value)
            else:
                values[name] = float(value)
        return cls(**values)


__all__ = ["EstimatorSettings"]
