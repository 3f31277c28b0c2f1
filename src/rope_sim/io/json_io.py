# MIT License (see LICENSE)
"""
JSON files for simulation parameters.

Only configuration is stored; simulation state is never persisted. Every
key is optional and falls back to the SimConfig default.

JSON Schema Overview:
---------------------
{
  "node_count": int,               # Default: 10
  "rest_distance": float,          # Default: 50
  "node_mass": float,              # Default: 1
  "break_threshold": float,        # Default: 5 * rest_distance
  "dt": float,                     # Default: 0.15
  "gravity": [gx, gy],             # Default: [0, 18] (y points down)
  "stiffness": float,              # Default: 1
  "drag": float,                   # Default: 0.5
  "relaxation_iters": int,         # Default: 5
  "wind_radius": float,            # Default: 30
  "wind_scale": float              # Default: 50
}
"""
from __future__ import annotations
from dataclasses import fields
import json
import logging
from typing import Any

from ..config import SimConfig
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_INT_FIELDS = {"node_count", "relaxation_iters"}


def config_from_json(d: dict[str, Any]) -> SimConfig:
    """
    Build a SimConfig from a dictionary.
    
    Unknown keys are ignored with a warning so newer files still load.
    
    Raises:
        ConfigurationError: If a value has the wrong type or fails validation.
    """
    known = {f.name for f in fields(SimConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in d.items():
        if key not in known:
            logger.warning("Ignoring unknown config key '%s'", key)
            continue
        try:
            if key == "gravity":
                kwargs[key] = tuple(float(g) for g in value)
            elif key == "break_threshold" and value is None:
                kwargs[key] = None
            elif key in _INT_FIELDS:
                kwargs[key] = int(value)
            else:
                kwargs[key] = float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid value for '{key}': {value!r}") from e
    return SimConfig(**kwargs)


def config_to_json(config: SimConfig) -> dict[str, Any]:
    """
    Serialize a SimConfig to a dictionary (round-trip compatible).
    
    break_threshold is omitted while it follows rest_distance.
    """
    result: dict[str, Any] = {}
    for f in fields(SimConfig):
        value = getattr(config, f.name)
        if f.name == "break_threshold" and value is None:
            continue
        result[f.name] = list(value) if f.name == "gravity" else value
    return result


def load_config(path: str) -> SimConfig:
    """
    Load simulation parameters from a JSON file.
    
    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ConfigurationError: If the file holds invalid parameters.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return config_from_json(data)


def save_config(config: SimConfig, path: str, indent: int = 2) -> None:
    """Write simulation parameters to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)
