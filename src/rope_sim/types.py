# MIT License (see LICENSE)
"""
Core type definitions for the rope simulation.

Defines the fundamental data structures:
- Node: a point mass with position history, velocity and a force accumulator.
- PointerInput: the per-tick snapshot of pointer position and button state.
- Segment, NodePoint, RenderFrame: read-only output handed to renderers.

The equations of motion are the usual point-mass ones:
  - a = F/m
  - v += a·dt,  x += v·dt   (integration)
  - v = (x - x_prev)/dt     (velocity recovery after constraint relaxation)
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import NODE_MASS
from .errors import ConfigurationError
from .util import f64


# =============================================================================
# Point Mass
# =============================================================================

@dataclass
class Node:
    """
    A point mass in the rope.
    
    Attributes:
        position: Current position [x, y].
        mass: Mass, must be positive.
        fixed: Pinned nodes never move; forces on them are ignored.
        velocity: Velocity [vx, vy]. Recomputed from positions every tick.
        last_position: Position at the start of the previous integration.
        force: Accumulated force [Fx, Fy] (cleared each tick).
    
    Note:
        Vectors are converted to float64 numpy arrays on init. When
        last_position is omitted it starts equal to position.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    mass: float = NODE_MASS
    fixed: bool = False
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    last_position: np.ndarray | tuple[float, float] | None = None
    force: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))

    def __post_init__(self) -> None:
        """Convert vectors to float64 arrays and reject non-positive masses."""
        if not self.mass > 0:
            raise ConfigurationError(f"Node mass must be positive, got {self.mass}")
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.force = f64(self.force)
        if self.last_position is None:
            self.last_position = self.position.copy()
        else:
            self.last_position = f64(self.last_position)

    def add_offset(self, delta: np.ndarray) -> None:
        """Displace the node by delta unless it is fixed."""
        if not self.fixed:
            self.position += delta

    def clear_forces(self) -> None:
        """Reset the force accumulator for the next tick."""
        self.force[:] = 0.0


# =============================================================================
# Input / Output snapshots
# =============================================================================

@dataclass
class PointerInput:
    """
    Pointer state polled once per tick.
    
    Attributes:
        position: Pointer position in simulation coordinates.
        cutting: Cutting-gesture button held. Swept segments cut the rope
                 and no wind is applied.
        suppress_wind: Primary button held; only disables wind.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    cutting: bool = False
    suppress_wind: bool = False

    def __post_init__(self) -> None:
        self.position = f64(self.position)

    @property
    def wind_enabled(self) -> bool:
        return not (self.cutting or self.suppress_wind)


@dataclass(frozen=True)
class Segment:
    """One active constraint, as a line from a to b."""
    a: tuple[float, float]
    b: tuple[float, float]


@dataclass(frozen=True)
class NodePoint:
    """One node, with its fixed/free classification for visual distinction."""
    position: tuple[float, float]
    fixed: bool


@dataclass(frozen=True)
class RenderFrame:
    """
    Everything a renderer needs to draw one frame.
    
    Segments follow constraint order, points follow node order.
    """
    time: float
    segments: tuple[Segment, ...]
    points: tuple[NodePoint, ...]
