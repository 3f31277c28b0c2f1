# MIT License (see LICENSE)
"""
Exception types raised by the rope simulation.

All of them signal programming or configuration mistakes detected while
building a simulation. A valid simulation never raises during step().
"""
from __future__ import annotations


class SimulationError(Exception):
    """Base class for rope simulation errors."""


class ConfigurationError(SimulationError, ValueError):
    """A parameter or constraint definition was rejected at construction time."""


class TopologyError(SimulationError, IndexError):
    """A constraint references a node index outside the node collection."""
