# MIT License (see LICENSE)
"""
Diagnostics for verifying simulation behaviour.

Used by tests and benchmarks to watch energy, momentum and how well the
relaxation solver keeps segments at their rest length.
"""
from __future__ import annotations
import numpy as np

from ..types import Node
from ..constraints.solver import DistanceConstraint


def kinetic_energy(nodes: list[Node]) -> float:
    """
    Total kinetic energy T = Σ 0.5 * m * v² of the free nodes.
    """
    ke = 0.0
    for n in nodes:
        if n.fixed:
            continue
        ke += 0.5 * n.mass * float(np.dot(n.velocity, n.velocity))
    return ke


def linear_momentum(nodes: list[Node]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v of the free nodes.
    
    Returns:
        Momentum vector [Px, Py].
    """
    p = np.zeros(2, dtype=np.float64)
    for n in nodes:
        if n.fixed:
            continue
        p += n.mass * n.velocity
    return p


def constraint_errors(constraints: list[DistanceConstraint], nodes: list[Node]) -> list[float]:
    """Absolute deviation of each constraint's span from its rest length."""
    return [abs(c.span(nodes) - c.length) for c in constraints]


def max_constraint_error(constraints: list[DistanceConstraint], nodes: list[Node]) -> float:
    """Largest rest-length deviation, 0 when there are no constraints."""
    return max(constraint_errors(constraints, nodes), default=0.0)
