"""Tests for the CSV and in-memory observation repositories."""
from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")

from scripts.seed_crowd_data import generate_observations
from src.core.entities import Observation
from src.infrastructure.storage.csv_repository import CsvObservationRepository, CsvVisitRepository
from src.infrastructure.storage.memory import InMemoryObservationRepository


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        CsvObservationRepository(tmp_path / "missing.csv").load()


def test_load_validates_required_columns(tmp_path: Path) -> None:
    csv_path = tmp_path / "observations.csv"
    pd.DataFrame({"attraction_id": ["met"], "crowd_level": [0.5]}).to_csv(csv_path, index=False)

    with pytest.raises(ValueError, match="timestamp"):
        CsvObservationRepository(csv_path).load()


def test_load_derives_calendar_columns_and_optional_values(tmp_path: Path) -> None:
    csv_path = tmp_path / "observations.csv"
    pd.DataFrame(
        {
            "attraction_id": ["met", "met"],
            "crowd_level": [0.5, 0.7],
            "timestamp": ["2024-06-16T10:00:00", "2024-06-17T15:00:00"],
            "wait_time": [None, 25],
        }
    ).to_csv(csv_path, index=False)

    observations = CsvObservationRepository(csv_path).load()

    assert observations[0].wait_time is None
    assert observations[0].day_of_week == 0
    assert observations[0].hour_of_day == 10
    assert observations[1].wait_time == 25
    assert observations[1].data_source == "user_report"


def test_load_rejects_out_of_range_rows(tmp_path: Path) -> None:
    csv_path = tmp_path / "observations.csv"
    pd.DataFrame(
        {"attraction_id": ["met"], "crowd_level": [1.4], "timestamp": ["2024-06-16T10:00:00"]}
    ).to_csv(csv_path, index=False)

    with pytest.raises(ValueError):
        CsvObservationRepository(csv_path).load()


def test_add_appends_and_queries_filter(tmp_path: Path) -> None:
    repository = CsvObservationRepository(tmp_path / "store" / "observations.csv")
    base = datetime(2024, 6, 10, 9, 0)
    for offset in range(3):
        repository.add(Observation.from_report("met", 0.2 * (offset + 1), timestamp=base + timedelta(days=offset)))
    repository.add(Observation.from_report("moma", 0.9, wait_time=40, timestamp=base))

    recent = repository.list_for_attraction("met", start=base + timedelta(days=1))
    limited = repository.list_for_attraction("met", limit=1)

    assert [observation.timestamp for observation in recent] == [
        base + timedelta(days=2),
        base + timedelta(days=1),
    ]
    assert limited[0].timestamp == base + timedelta(days=2)
    assert repository.list_for_attraction("moma")[0].wait_time == 40


def test_memory_repository_filters_by_source(make_observation, now) -> None:
    repository = InMemoryObservationRepository(
        [
            make_observation(0.3, timestamp=now, data_source="sensor"),
            make_observation(0.6, timestamp=now, data_source="api"),
        ]
    )

    sensors = repository.list_for_attraction("central-park", data_source="sensor")

    assert [observation.crowd_level for observation in sensors] == [0.3]


def test_seeded_store_accepts_live_reports_with_microseconds(tmp_path: Path) -> None:
    repository = CsvObservationRepository(tmp_path / "observations.csv")
    repository.save_all(generate_observations(["met"], days=2, now=datetime(2024, 6, 15, 22, 0), random_state=3))
    reported_at = datetime(2024, 6, 15, 12, 30, 5, 123456)
    repository.add(Observation.from_report("met", 0.4, timestamp=reported_at))

    observations = repository.list_for_attraction("met")

    assert len(observations) == 2 * 6 + 1
    assert reported_at in [observation.timestamp for observation in observations]


def test_add_to_file_with_only_required_columns(tmp_path: Path) -> None:
    csv_path = tmp_path / "observations.csv"
    pd.DataFrame(
        {"attraction_id": ["met"], "crowd_level": [0.3], "timestamp": ["2024-06-16T10:00:00"]}
    ).to_csv(csv_path, index=False)
    repository = CsvObservationRepository(csv_path)

    repository.add(Observation.from_report("met", 0.6, wait_time=15, timestamp=datetime(2024, 6, 17, 15, 0)))
    observations = repository.list_for_attraction("met")

    assert [observation.crowd_level for observation in observations] == [0.6, 0.3]
    assert observations[0].wait_time == 15
    assert observations[1].hour_of_day == 10
    assert observations[1].day_of_week == 0
    assert observations[1].wait_time is None


def test_visit_repository_reads_optional_values(tmp_path: Path) -> None:
    csv_path = tmp_path / "visits.csv"
    pd.DataFrame(
        {
            "attraction_id": ["met", "met", "moma"],
            "visit_date": ["2024-06-01T10:00:00", "2024-06-02T11:30:00", "2024-06-02T12:00:00"],
            "predicted_crowd_level": [0.6, None, 0.2],
            "actual_crowd_level": [0.45, 0.5, 0.3],
            "predicted_wait_time": [20, None, None],
            "actual_wait_time": [35, 10, None],
        }
    ).to_csv(csv_path, index=False)

    visits = CsvVisitRepository(csv_path).list_for_attraction("met")

    assert len(visits) == 2
    assert visits[0].predicted_crowd_level == 0.6
    assert visits[0].predicted_wait_time == 20
    assert visits[1].predicted_crowd_level is None
    assert visits[1].predicted_wait_time is None


def test_visit_repository_requires_visit_date(tmp_path: Path) -> None:
    csv_path = tmp_path / "visits.csv"
    pd.DataFrame({"attraction_id": ["met"]}).to_csv(csv_path, index=False)

    with pytest.raises(ValueError, match="visit_date"):
        CsvVisitRepository(csv_path).load()
