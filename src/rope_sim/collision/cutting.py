# MIT License (see LICENSE)
"""
Cutting test for pointer gestures.

While the cutting button is held, the pointer sweeps a segment from its
previous to its current position every tick. Any constraint whose current
segment properly crosses that sweep is removed.

The test is the classic orientation check: segments AB and CD intersect
iff A and B lie on opposite sides of CD and C and D lie on opposite sides
of AB. Collinear configurations never count as crossings; a sweep that
only touches the rope (a T-junction) counts or not depending on its
orientation, since one endpoint lies exactly on the other segment.

Reference:
    https://stackoverflow.com/questions/3838329/how-can-i-check-if-two-segments-intersect
"""
from __future__ import annotations
import logging

import numpy as np

from ..constraints.solver import DistanceConstraint
from ..types import Node
from ..util import cross2

logger = logging.getLogger(__name__)


def ccw(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> bool:
    """
    Orientation predicate: True if the turn a -> b -> c is strictly one-handed.
    
    Equivalent to (c.y - a.y)(b.x - a.x) > (b.y - a.y)(c.x - a.x).
    """
    return cross2(b - a, c - a) > 0.0


def segments_intersect(a: np.ndarray, b: np.ndarray, c: np.ndarray, d: np.ndarray) -> bool:
    """
    True if segment AB properly crosses segment CD.
    
    Args:
        a, b: Endpoints of the constraint segment.
        c, d: Endpoints of the cutting segment.
    """
    return (ccw(a, c, d) != ccw(b, c, d)) and (ccw(a, b, c) != ccw(a, b, d))


def cut_constraints(
    constraints: list[DistanceConstraint],
    nodes: list[Node],
    cut_start: np.ndarray,
    cut_end: np.ndarray,
) -> list[DistanceConstraint]:
    """
    Return the constraints not crossed by the cutting segment.
    
    A pure filter over the current node positions; the input list is left
    untouched.
    
    Args:
        constraints: Active constraints.
        nodes: Node list the constraint indices refer to.
        cut_start: Pointer position at the previous tick.
        cut_end: Pointer position this tick.
    """
    kept = [
        c for c in constraints
        if not segments_intersect(nodes[c.a].position, nodes[c.b].position, cut_end, cut_start)
    ]
    if len(kept) != len(constraints):
        logger.debug("%d constraint(s) cut", len(constraints) - len(kept))
    return kept
