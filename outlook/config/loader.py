"""YAML config loader with runtime get/set by dotted key."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from outlook.config.schema import OutlookConfig


def load_config(path: str | Path | None) -> OutlookConfig:
    """Load and validate config from a YAML file.

    A missing path (None or nonexistent file) yields the built-in defaults.
    """
    if path is None:
        return OutlookConfig()
    path = Path(path)
    if not path.exists():
        return OutlookConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return OutlookConfig(**raw)


def config_hash(config: OutlookConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: OutlookConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'analysis.weights.target_day'."""
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


def set_config_value(config: OutlookConfig, dotted_key: str, value: Any) -> OutlookConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new OutlookConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return OutlookConfig(**data)
