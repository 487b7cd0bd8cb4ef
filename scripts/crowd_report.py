"""Command-line entry point printing crowd predictions and statistics as JSON."""
from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Sequence

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project, load_config, resolve_path

_PROJECT_ROOT = bootstrap_project()

from src.core.settings import EstimatorSettings  # noqa: E402
from src.infrastructure.crowd import (  # noqa: E402
    CrowdEstimator,
    PredictionAccuracyEvaluator,
    accuracy_to_payload,
    prediction_to_payload,
    stats_to_payload,
)
from src.infrastructure.storage import CsvObservationRepository, CsvVisitRepository  # noqa: E402
from src.use_cases.compute_crowd_stats import ComputeCrowdStatsUseCase  # noqa: E402
from src.use_cases.evaluate_predictions import EvaluatePredictionsUseCase  # noqa: E402
from src.use_cases.predict_crowd import PredictCrowdUseCase  # noqa: E402
from src.utils.logger import configure_logging, logger  # noqa: E402


def build_report(
    config: Mapping[str, Any],
    command: str,
    attraction_ids: Sequence[str],
    target_date: date | None = None,
    window_days: int | None = None,
) -> Any:
    repository = CsvObservationRepository(resolve_path(Path(config["paths"]["observations"])))
    settings = EstimatorSettings.from_config(config.get("estimator"))
    estimator = CrowdEstimator(settings)

    if command == "predict":
        use_case = PredictCrowdUseCase(repository, estimator, attraction_names=config.get("attractions"))
        results = use_case.execute_batch(attraction_ids, target_date)
        predictions = [prediction_to_payload(result) for result in results]
        if len(predictions) == 1:
            return predictions[0]
        return {
            "predictions": predictions,
            "date": results[0].target_date.isoformat(),
            "total": len(predictions),
        }

    if command == "stats":
        stats_use_case = ComputeCrowdStatsUseCase(repository, estimator)
        payloads = [
            stats_to_payload(attraction_id, stats_use_case.execute(attraction_id, window_days=window_days))
            for attraction_id in attraction_ids
        ]
        return payloads[0] if len(payloads) == 1 else payloads

    if command == "accuracy":
        visits = CsvVisitRepository(resolve_path(Path(config["paths"]["visits"])))
        evaluate = EvaluatePredictionsUseCase(visits, PredictionAccuracyEvaluator.from_settings(settings))
        reports = [
            accuracy_to_payload(attraction_id, evaluate.execute(attraction_id))
            for attraction_id in attraction_ids
        ]
        return reports[0] if len(reports) == 1 else reports

    raise ValueError(f"Unsupported command: {command}")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Crowd predictions and statistics for attractions")
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    predict = subparsers.add_parser("predict", help="Estimate the crowd label for a date")
    predict.add_argument("attraction_ids", nargs="+")
    predict.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Target date in YYYY-MM-DD format (defaults to now)",
    )

    stats = subparsers.add_parser("stats", help="Summarise recent reports")
    stats.add_argument("attraction_ids", nargs="+")
    stats.add_argument("--days", type=int, default=None, help="Trailing window length in days")

    accuracy = subparsers.add_parser("accuracy", help="Score past predictions against visits")
    accuracy.add_argument("attraction_ids", nargs="+")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    config = load_config(resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    report = build_report(
        config,
        args.command,
        args.attraction_ids,
        target_date=getattr(args, "date", None),
        window_days=getattr(args, "days", None),
    )
    logger.debug("Report generated for {}", ", ".join(args.attraction_ids))
    print(json.dumps(report, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
