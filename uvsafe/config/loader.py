"""YAML config loader with environment override and runtime get/set."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from uvsafe.config.defaults import DEFAULT_LOCATIONS
from uvsafe.config.schema import AppConfig, LocationConfig

API_KEY_ENV = "OPENUV_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, starts from an empty document. If no locations are
    specified, injects DEFAULT_LOCATIONS. OPENUV_API_KEY in the environment
    takes precedence over the YAML api key.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        raw.setdefault("openuv", {})
        raw["openuv"]["api_key"] = env_key

    return AppConfig(**raw)


def find_location(config: AppConfig, slug: str) -> LocationConfig:
    """Look up a configured location by slug (case-insensitive)."""
    wanted = slug.strip().lower()
    for loc in config.locations:
        if loc.slug == wanted:
            return loc
    raise KeyError(f"Unknown location: {slug}")


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.timezone'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if isinstance(target, list):
            target = target[int(part)]
        else:
            target = target[part]
    if not isinstance(target, dict) or parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.strip().lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return AppConfig(**data)
