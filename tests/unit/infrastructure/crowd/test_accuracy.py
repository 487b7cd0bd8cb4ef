"""Unit tests for prediction accuracy scoring and crowd descriptions."""
from __future__ import annotations

from datetime import datetime

import pytest

from src.core.entities import VisitRecord
from src.core.settings import EstimatorSettings
from src.infrastructure.crowd.accuracy import (
    PredictionAccuracyEvaluator,
    is_prediction_accurate,
    prediction_accuracy,
    wait_time_accuracy,
)
from src.infrastructure.crowd.descriptions import describe_crowd_level, describe_wait_time


def test_prediction_accuracy_is_absolute_difference() -> None:
    assert prediction_accuracy(0.6, 0.45) == pytest.approx(0.15)
    assert prediction_accuracy(0.9, 0.1) == pytest.approx(0.8)
    assert prediction_accuracy(0.1, 0.9) == pytest.approx(0.8)


def test_prediction_accuracy_requires_both_values() -> None:
    assert prediction_accuracy(None, 0.5) is None
    assert prediction_accuracy(0.5, None) is None
    assert prediction_accuracy(0.0, 0.0) == 0.0


def test_accuracy_tolerance_is_strict() -> None:
    assert is_prediction_accurate(0.6, 0.45) is True
    assert is_prediction_accurate(0.9, 0.1) is False
    assert is_prediction_accurate(0.5, 0.75) is False
    assert is_prediction_accurate(None, 0.3) is False


def test_wait_time_accuracy() -> None:
    assert wait_time_accuracy(30, 45) == 15
    assert wait_time_accuracy(None, 45) is None


def test_evaluator_summarises_visits() -> None:
    visit_date = datetime(2024, 6, 1, 10, 0)
    visits = [
        VisitRecord("met", visit_date, predicted_crowd_level=0.6, actual_crowd_level=0.45),
        VisitRecord("met", visit_date, predicted_crowd_level=0.9, actual_crowd_level=0.1),
        VisitRecord("met", visit_date, predicted_wait_time=20, actual_wait_time=35),
    ]

    report = PredictionAccuracyEvaluator().evaluate(visits)

    assert report.evaluated == 2
    assert report.accurate == 1
    assert report.accuracy_rate == pytest.approx(0.5)
    assert report.mean_absolute_error == pytest.approx(0.475)
    assert report.mean_wait_time_error == pytest.approx(15)


def test_evaluator_without_comparable_visits_reports_zero() -> None:
    report = PredictionAccuracyEvaluator().evaluate([])

    assert report.evaluated == 0
    assert report.accuracy_rate == 0.0
    assert report.mean_absolute_error == 0.0


@pytest.mark.parametrize(
    ("level", "label"),
    [(0.0, "Very Low"), (0.2, "Low"), (0.45, "Moderate"), (0.79, "High"), (0.8, "Very High")],
)
def test_describe_crowd_level(level: float, label: str) -> None:
    assert describe_crowd_level(level) == label


@pytest.mark.parametrize(
    ("minutes", "label"),
    [(None, "Unknown"), (5, "No Wait"), (10, "Short Wait"), (45, "Medium Wait"), (60, "Long Wait")],
)
def test_describe_wait_time(minutes, label: str) -> None:
    assert describe_wait_time(minutes) == label


def test_evaluator_from_settings_applies_configured_tolerance() -> None:
    visit_date = datetime(2024, 6, 1, 10, 0)
    visits = [
        VisitRecord("met", visit_date, predicted_crowd_level=0.6, actual_crowd_level=0.45),
        VisitRecord("met", visit_date, predicted_crowd_level=0.5, actual_crowd_level=0.25),
    ]

    default = PredictionAccuracyEvaluator.from_settings(EstimatorSettings())
    strict = PredictionAccuracyEvaluator.from_settings(EstimatorSettings(accuracy_tolerance=0.1))
    lenient = PredictionAccuracyEvaluator.from_settings(EstimatorSettings(accuracy_tolerance=0.3))

    assert default.tolerance == 0.2
    assert default.evaluate(visits).accurate == 1
    assert strict.evaluate(visits).accurate == 0
    assert lenient.evaluate(visits).accurate == 2
