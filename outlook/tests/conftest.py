"""Shared test fixtures."""

from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path

import pytest
import yaml

from outlook.config.schema import OutlookConfig
from outlook.models.common import Variable
from outlook.models.dataset import DailyRecord, RawDataset

SYNTHETIC_START_YEAR = 2015
SYNTHETIC_END_YEAR = 2024


def build_dataset(
    rows: dict[date, dict[Variable, float | None]],
    latitude: float = 41.01,
    longitude: float = 28.98,
) -> RawDataset:
    records = tuple(
        DailyRecord(date=d, readings=readings) for d, readings in sorted(rows.items())
    )
    years = [d.year for d in rows] or [SYNTHETIC_START_YEAR]
    return RawDataset(
        latitude=latitude,
        longitude=longitude,
        start_year=min(years),
        end_year=max(years),
        records=records,
    )


def synthetic_power_payload(
    start_year: int = SYNTHETIC_START_YEAR, end_year: int = SYNTHETIC_END_YEAR
) -> dict:
    """A POWER-shaped payload with simple, hand-checkable series.

    T2M rises 0.5 C per year from 10.0, WS2M is a flat 3.0, precipitation
    alternates 0.0 / 2.0 by year, RH2M is 60 and SNODP is 0.01.
    """
    parameter: dict[str, dict[str, float]] = {v.value: {} for v in Variable}
    d = date(start_year, 1, 1)
    while d.year <= end_year:
        key = d.strftime("%Y%m%d")
        offset = d.year - start_year
        parameter["T2M"][key] = 10.0 + 0.5 * offset
        parameter["WS2M"][key] = 3.0
        parameter["PRECTOTCORR"][key] = 2.0 if offset % 2 else 0.0
        parameter["RH2M"][key] = 60.0
        parameter["SNODP"][key] = 0.01
        d += timedelta(days=1)
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [28.98, 41.01, 100.0]},
        "properties": {"parameter": parameter},
    }


@pytest.fixture
def dataset_factory() -> Callable[..., RawDataset]:
    return build_dataset


@pytest.fixture
def default_config() -> OutlookConfig:
    return OutlookConfig()


@pytest.fixture
def synthetic_config() -> OutlookConfig:
    """Config whose date range matches synthetic_power_payload."""
    return OutlookConfig(
        api={
            "start_date": f"{SYNTHETIC_START_YEAR}0101",
            "end_date": f"{SYNTHETIC_END_YEAR}1231",
            "max_retries": 0,
        }
    )


@pytest.fixture
def power_payload() -> dict:
    return synthetic_power_payload()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "analysis": {"day_window": 3, "weights": {"target_day": 5}},
        "cache": {"directory": str(tmp_path / "cache")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
