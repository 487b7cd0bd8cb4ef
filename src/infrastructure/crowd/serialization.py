"""Convert estimator results into JSON-ready response bodies."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from src.core.entities import PredictionResult, StatsSummary
from src.infrastructure.crowd.accuracy import AccuracyReport


def _format_date(value: datetime | date) -> str:
    return value.isoformat()


def prediction_to_payload(result: PredictionResult) -> Mapping[str, Any]:
    payload: dict[str, Any] = {
        "attractionId": result.attraction_id,
        "date": _format_date(result.target_date),
        "predictedCrowdLevel": result.predicted_crowd_level,
        "confidence": result.confidence,
    }
    if result.attraction_name is not None:
        payload["attractionName"] = result.attraction_name
    return payload


def stats_to_payload(attraction_id: str, summary: StatsSummary) -> Mapping[str, Any]:
    return {
        "attractionId": attraction_id,
        "stats": {
            "averageCrowdLevel": summary.average_crowd_level,
            "averageWaitTime": summary.average_wait_time,
            "totalReports": summary.total_reports,
            "peakHours": list(summary.peak_hours),
            "quietHours": list(summary.quiet_hours),
            "hourlyAverages": [
                {"hour": entry.hour, "averageCrowdLevel": entry.average_crowd_level}
                for entry in summary.hourly_averages
            ],
        },
    }


def accuracy_to_payload(attraction_id: str, report: AccuracyReport) -> Mapping[str, Any]:
    return {
        "attractionId": attraction_id,
        "accuracy": {
            "evaluatedVisits": report.evaluated,
            "accurateVisits": report.accurate,
            "accuracyRate": report.accuracy_rate,
            "meanAbsoluteError": report.mean_absolute_error,
            "meanWaitTimeError": report.mean_wait_time_error,
        },
    }


__all__ = ["accuracy_to_payload", "prediction_to_payload", "stats_to_payload"]
