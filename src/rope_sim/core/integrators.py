# MIT License (see LICENSE)
"""
Time stepping for point masses.

The scheme is split in two halves around constraint relaxation:

    integrate():      a = F/m;  x_prev = x;  v += a*dt;  x += v*dt
    (relaxation moves x directly)
    differentiate():  v = (x - x_prev)/dt;  F = 0

Recovering velocity from the position delta makes positional corrections
carry momentum into the next tick, which is what gives position-based
constraints their Verlet-like behaviour.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration
"""
from __future__ import annotations

from ..types import Node


def integrate(node: Node, dt: float) -> None:
    """
    Advance a node by one force-driven semi-implicit Euler step.
    
    Args:
        node: Node to integrate (modified in-place). No-op if fixed.
        dt: Timestep.
    """
    if node.fixed:
        return

    acc = node.force / node.mass

    node.last_position = node.position.copy()
    node.velocity = node.velocity + acc * dt
    node.position = node.position + node.velocity * dt


def differentiate(node: Node, dt: float) -> None:
    """
    Recompute velocity from the displacement since integrate() and clear forces.
    
    This velocity is authoritative: it feeds the next tick's drag and the
    renderer. No-op if fixed.
    """
    if node.fixed:
        return

    node.velocity = (node.position - node.last_position) / dt
    node.clear_forces()
