# MIT License (see LICENSE)
"""
Force generators for the rope simulation.

All force functions modify node.force in-place and are called during the
force accumulation phase of a tick, before integration.

Key concepts:
- Forces are accumulated in node.force and cleared by differentiate().
- Fixed nodes receive no gravity or drag. Wind may still accumulate on
  them; integration ignores it.
"""
from __future__ import annotations

import numpy as np

from ..types import Node
from ..util import norm2


def apply_gravity(node: Node, g: np.ndarray) -> None:
    """
    Apply gravitational force F = m * g.
    
    Args:
        node: The node to pull.
        g: Gravitational acceleration [gx, gy]. y points down on screen.
    """
    if node.fixed:
        return
    node.force += node.mass * g


def apply_linear_drag(node: Node, c: float) -> None:
    """
    Apply linear drag F = -c * v.
    
    Uses the velocity recovered at the end of the previous tick.
    """
    if node.fixed or c == 0.0:
        return
    node.force += -c * node.velocity


def apply_wind(
    nodes: list[Node],
    pointer: np.ndarray,
    last_pointer: np.ndarray,
    radius: float,
    scale: float,
) -> None:
    """
    Push nodes near the pointer along the pointer's motion.
    
    Every node strictly closer than `radius` to the current pointer position
    receives F = (pointer - last_pointer) * scale, so a fast drag across the
    rope pushes harder than a slow one.
    
    Args:
        nodes: All nodes of the simulation.
        pointer: Pointer position this tick.
        last_pointer: Pointer position at the end of the previous tick.
        radius: Pickup radius around the pointer.
        scale: Force per unit of pointer displacement.
    """
    f = (pointer - last_pointer) * scale
    r2 = radius * radius
    for node in nodes:
        if norm2(node.position - pointer) < r2:
            node.force += f
