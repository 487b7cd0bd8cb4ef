"""Generate synthetic crowd observations for local experiments."""
from __future__ import annotations

import argparse
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Sequence

import numpy as np

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project, load_config, resolve_path

_PROJECT_ROOT = bootstrap_project()

from src.core.entities import Observation, day_of_week
from src.infrastructure.storage import CsvObservationRepository
from src.utils.logger import configure_logging, logger

SEED_HOURS = range(9, 21, 2)
SEED_CONFIDENCE = 0.8


def crowd_band(hour: int) -> tuple[float, float]:
    """Return ``(base, spread)`` for the synthetic crowd level at ``hour``."""

    if hour < 11 or hour > 18:
        return 0.2, 0.3
    if hour <= 14:
        return 0.6, 0.3
    return 0.4, 0.4


def generate_observations(
    attraction_ids: Sequence[str],
    days: int = 7,
    now: datetime | None = None,
    random_state: int | None = None,
) -> list[Observation]:
    rng = np.random.default_rng(random_state)
    reference = now or datetime.now()
    observations: list[Observation] = []
    for attraction_id in attraction_ids:
        for offset in range(days):
            day = reference - timedelta(days=offset)
            for hour in SEED_HOURS:
                timestamp = day.replace(hour=hour, minute=0, second=0, microsecond=0)
                base, spread = crowd_band(hour)
                crowd_level = round(base + float(rng.random()) * spread, 2)
                observations.append(
                    Observation(
                        attraction_id=attraction_id,
                        crowd_level=crowd_level,
                        timestamp=timestamp,
                        day_of_week=day_of_week(timestamp),
                        hour_of_day=hour,
                        wait_time=int(rng.integers(0, 60)),
                        data_source="prediction",
                        confidence=SEED_CONFIDENCE,
                    )
                )
    logger.info("Generated {} observations for {} attractions", len(observations), len(attraction_ids))
    return observations


def seed(config: dict) -> Path:
    seed_cfg = config.get("seed", {})
    output_path = resolve_path(Path(config["paths"]["observations"]))
    observations = generate_observations(
        list(config.get("attractions", {})),
        days=int(seed_cfg.get("days", 7)),
        random_state=seed_cfg.get("random_state"),
    )
    return CsvObservationRepository(output_path).save_all(observations)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the observation store with synthetic crowd data")
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))
    seed(config)


if __name__ == "__main__":
    main()
