# MIT License (see LICENSE)
"""
Input/Output utilities for simulation parameters.

Typical usage:
    from rope_sim.io import load_config, save_config
    
    config = load_config("rope.json")
    save_config(config.replace(drag=0.2), "rope_low_drag.json")
"""
from .json_io import (
    load_config,
    save_config,
    config_from_json,
    config_to_json,
)

__all__ = [
    "load_config",
    "save_config",
    "config_from_json",
    "config_to_json",
]
