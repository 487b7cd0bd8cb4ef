"""Crowd estimation, accuracy scoring and response helpers."""

from .accuracy import (
    AccuracyReport,
    PredictionAccuracyEvaluator,
    is_prediction_accurate,
    prediction_accuracy,
    wait_time_accuracy,
)
from .descriptions import describe_crowd_level, describe_wait_time
from .estimator import UNKNOWN_LABEL, CrowdEstimator
from .serialization import accuracy_to_payload, prediction_to_payload, stats_to_payload

__all__ = [
    "AccuracyReport",
    "CrowdEstimator",
    "PredictionAccuracyEvaluator",
    "UNKNOWN_LABEL",
    "accuracy_to_payload",
    "describe_crowd_level",
    "describe_wait_time",
    "is_prediction_accurate",
    "prediction_accuracy",
    "prediction_to_payload",
    "stats_to_payload",
    "wait_time_accuracy",
]
