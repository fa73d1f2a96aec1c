"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from nimbus.config.defaults import DEFAULT_LOCATIONS
from nimbus.config.schema import NimbusConfig
from nimbus.models.forecast import Location


@pytest.fixture
def default_config() -> NimbusConfig:
    """Return default NimbusConfig with default locations."""
    return NimbusConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"active": "met_no", "met_no": {"timeout": 10.0}},
        "assembly": {"incomplete_hourly_threshold": 35},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def oslo() -> Location:
    return Location(name="Oslo", latitude=59.9139, longitude=10.7522, timezone="Europe/Oslo")


@pytest.fixture
def utc_location() -> Location:
    return Location(name="Null Island", latitude=0.0, longitude=0.0, timezone="UTC")


@pytest.fixture
def met_no_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "met_no_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def met_no_sun_moon(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "met_no_sun_moon.json") as f:
        return json.load(f)


@pytest.fixture
def open_weather_one_call(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "open_weather_one_call.json") as f:
        return json.load(f)
