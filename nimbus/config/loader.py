"""YAML config loader with runtime get/set by dotted key."""

import json
from pathlib import Path
from typing import Any

import yaml

from nimbus.config.defaults import DEFAULT_LOCATIONS
from nimbus.config.schema import NimbusConfig


def load_config(path: str | Path) -> NimbusConfig:
    """Load and validate config from a YAML file.

    If no locations are specified in the YAML, injects DEFAULT_LOCATIONS.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    return NimbusConfig(**raw)


def default_config() -> NimbusConfig:
    return NimbusConfig(locations=DEFAULT_LOCATIONS)


def save_config(config: NimbusConfig, path: str | Path) -> None:
    """Write a validated config back to YAML, locations included."""
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)


def get_config_value(config: NimbusConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.met_no.timeout'."""
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


def set_config_value(config: NimbusConfig, dotted_key: str, value: Any) -> NimbusConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new NimbusConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return NimbusConfig(**data)
