# MIT License (see LICENSE)
"""
Default tuning constants for the rope simulation.

Units are screen units (pixels) and simulation time units. The y axis
points down, so a positive gravity value pulls nodes towards the bottom
of the viewport.
"""
from __future__ import annotations

# Fixed integration timestep.
DT: float = 0.15

# Gravitational acceleration along +y.
GRAVITY: float = 18.0

# Rest length of every rope segment, also the initial node spacing.
TARGET_DIST: float = 50.0

# Fraction of the distance error removed by one constraint solve.
RIGIDITY: float = 1.0

# Linear drag coefficient, F = -DRAG * v.
DRAG: float = 0.5

NUM_NODES: int = 10
NODE_MASS: float = 1.0

# A segment snaps once its span reaches BREAK_FACTOR * TARGET_DIST.
BREAK_FACTOR: float = 5.0

# Gauss-Seidel passes over all constraints per tick.
RELAX_ITERS: int = 5

# Pointer "wind": nodes closer than WIND_RADIUS to the pointer receive
# WIND_SCALE * (pointer displacement since the last tick).
WIND_RADIUS: float = 30.0
WIND_SCALE: float = 50.0

# Corrections for compressed segments are scaled by this factor.
COMPRESSION_SOFTENING: float = 0.5

# Initial chain layout as fractions of the viewport size.
ANCHOR_X_FRACTION: float = 1.0 / 3.0
ANCHOR_Y_FRACTION: float = 1.0 / 5.0
