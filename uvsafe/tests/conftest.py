"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from uvsafe.config.defaults import DEFAULT_LOCATIONS
from uvsafe.config.schema import AppConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _no_api_key_env(monkeypatch):
    """Keep a developer's OPENUV_API_KEY out of config tests."""
    monkeypatch.delenv("OPENUV_API_KEY", raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def uv_payload() -> dict:
    with open(FIXTURE_DIR / "openuv_uv_sydney.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "openuv_forecast_sydney.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with the preset locations."""
    return AppConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "openuv": {"api_key": "test-key", "max_retries": 0},
        "display": {"timezone": "UTC", "time_format": "%H:%M"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
