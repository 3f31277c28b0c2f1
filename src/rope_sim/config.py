# MIT License (see LICENSE)
"""
Simulation parameters.

SimConfig gathers every tunable value of the rope simulation so tests and
frontends can vary them without touching module-level constants. All
values are validated when the config is created; a bad value raises
ConfigurationError immediately instead of surfacing mid-simulation.
"""
from __future__ import annotations
from dataclasses import dataclass, replace

from .constants import (
    BREAK_FACTOR,
    DRAG,
    DT,
    GRAVITY,
    NODE_MASS,
    NUM_NODES,
    RELAX_ITERS,
    RIGIDITY,
    TARGET_DIST,
    WIND_RADIUS,
    WIND_SCALE,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class SimConfig:
    """
    Rope simulation parameters.

    Attributes:
        node_count: Number of nodes in the initial chain.
        rest_distance: Rest length of each segment and initial node spacing.
        node_mass: Mass of every node created by the chain layout.
        break_threshold: Span at which a segment snaps. None means
                         BREAK_FACTOR * rest_distance.
        dt: Fixed timestep.
        gravity: Gravitational acceleration [gx, gy]. y points down.
        stiffness: Relaxation rigidity (fraction of error removed per solve).
        drag: Linear drag coefficient.
        relaxation_iters: Constraint passes per tick.
        wind_radius: Pointer pickup radius for the wind force.
        wind_scale: Wind force per unit of pointer displacement.
    """
    node_count: int = NUM_NODES
    rest_distance: float = TARGET_DIST
    node_mass: float = NODE_MASS
    break_threshold: float | None = None
    dt: float = DT
    gravity: tuple[float, float] = (0.0, GRAVITY)
    stiffness: float = RIGIDITY
    drag: float = DRAG
    relaxation_iters: int = RELAX_ITERS
    wind_radius: float = WIND_RADIUS
    wind_scale: float = WIND_SCALE

    def __post_init__(self) -> None:
        object.__setattr__(self, "gravity", tuple(float(g) for g in self.gravity))
        self.validate()

    def validate(self) -> None:
        """
        Check parameter ranges.

        Raises:
            ConfigurationError: On the first invalid value found.
        """
        if self.node_count < 1:
            raise ConfigurationError(f"node_count must be at least 1, got {self.node_count}")
        if not self.rest_distance > 0:
            raise ConfigurationError(f"rest_distance must be positive, got {self.rest_distance}")
        if not self.node_mass > 0:
            raise ConfigurationError(f"node_mass must be positive, got {self.node_mass}")
        if self.break_threshold is not None and not self.break_threshold > 0:
            raise ConfigurationError(f"break_threshold must be positive, got {self.break_threshold}")
        if not self.dt > 0:
            raise ConfigurationError(f"dt must be positive, got {self.dt}")
        if len(self.gravity) != 2:
            raise ConfigurationError(f"gravity must have 2 components, got {self.gravity}")
        if not self.stiffness >= 0:
            raise ConfigurationError(f"stiffness must be non-negative, got {self.stiffness}")
        if not self.drag >= 0:
            raise ConfigurationError(f"drag must be non-negative, got {self.drag}")
        if not self.relaxation_iters >= 0:
            raise ConfigurationError(
                f"relaxation_iters must be non-negative, got {self.relaxation_iters}"
            )
        if not self.wind_radius >= 0:
            raise ConfigurationError(f"wind_radius must be non-negative, got {self.wind_radius}")

    @property
    def effective_break_threshold(self) -> float:
        """Break threshold with the rest-distance default applied."""
        if self.break_threshold is None:
            return BREAK_FACTOR * self.rest_distance
        return float(self.break_threshold)

    def replace(self, **changes) -> "SimConfig":
        """Return a validated copy with some fields changed."""
        return replace(self, **changes)
