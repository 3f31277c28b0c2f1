# MIT License (see LICENSE)
"""
Distance constraints and the position-based relaxation solver.

Constraints reference nodes by index into the simulation's node list, so
the node list is the single owner of all point masses and removing a
constraint never touches a node.

Key concepts:
- Relaxation: each solve() moves both endpoints along the segment to shrink
  the distance error, weighted by inverse mass.
- Gauss-Seidel passes: global convergence comes from repeating the sweep
  over all constraints a few times per tick, each pass seeing the previous
  pass's corrected positions.
- Compression softening: compressed segments are corrected at half
  strength, so collapsing rope settles instead of popping back.
- Breaking: segments stretched to their break threshold are removed by a
  pure filter.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

import numpy as np

from ..constants import COMPRESSION_SOFTENING, RIGIDITY, TARGET_DIST
from ..errors import ConfigurationError, TopologyError
from ..types import Node
from ..util import norm, unit

logger = logging.getLogger(__name__)


@dataclass
class DistanceConstraint:
    """
    Keeps two nodes at a rest distance until it snaps.
    
    Attributes:
        a: Index of the first node.
        b: Index of the second node.
        break_threshold: Span at which the constraint is removed.
        length: Rest length the solver relaxes towards.
        stiffness: Fraction of the distance error removed per solve().
    """
    a: int
    b: int
    break_threshold: float
    length: float = TARGET_DIST
    stiffness: float = RIGIDITY

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise ConfigurationError(f"Constraint endpoints must differ, got {self.a} twice")
        if not self.break_threshold > 0:
            raise ConfigurationError(
                f"break_threshold must be positive, got {self.break_threshold}"
            )
        if not self.length > 0:
            raise ConfigurationError(f"length must be positive, got {self.length}")
        if not self.stiffness >= 0:
            raise ConfigurationError(f"stiffness must be non-negative, got {self.stiffness}")

    def span(self, nodes: list[Node]) -> float:
        """Current distance between the two endpoints."""
        return norm(nodes[self.b].position - nodes[self.a].position)

    def is_broken(self, nodes: list[Node]) -> bool:
        """True once the span has reached the break threshold."""
        return self.span(nodes) >= self.break_threshold

    def solve(self, nodes: list[Node]) -> None:
        """
        Apply one relaxation step to this constraint.
        
        With r = pos_b - pos_a and n = r/|r|:
            offs = n * (|r| - length) * stiffness / (m_a + m_b)
            (halved when |r| < length)
            pos_a += offs / m_a,   pos_b -= offs / m_b
        
        Both corrections are computed from the positions read before either
        write. Coincident endpoints give n = 0 and therefore no correction.
        Fixed endpoints ignore their share.
        """
        node_a = nodes[self.a]
        node_b = nodes[self.b]

        r = node_b.position - node_a.position
        dist = norm(r)

        diff = dist - self.length
        offs = unit(r) * diff * self.stiffness / (node_a.mass + node_b.mass)

        if dist < self.length:
            offs *= COMPRESSION_SOFTENING

        a_offs = offs / node_a.mass
        b_offs = -offs / node_b.mass

        node_a.add_offset(a_offs)
        node_b.add_offset(b_offs)


def relax_constraints(
    constraints: list[DistanceConstraint],
    nodes: list[Node],
    iters: int,
) -> None:
    """
    Run `iters` Gauss-Seidel sweeps over all constraints, in list order.
    
    More sweeps bring spans closer to their rest lengths at proportional cost.
    """
    for _ in range(iters):
        for c in constraints:
            c.solve(nodes)


def break_constraints(
    constraints: list[DistanceConstraint],
    nodes: list[Node],
) -> list[DistanceConstraint]:
    """
    Return the constraints whose span is still below their break threshold.
    
    A pure filter: the input list is not modified and applying it twice
    gives the same result as applying it once.
    """
    kept = [c for c in constraints if not c.is_broken(nodes)]
    if len(kept) != len(constraints):
        logger.debug("%d constraint(s) snapped", len(constraints) - len(kept))
    return kept


def validate_constraints(constraints: list[DistanceConstraint], node_count: int) -> None:
    """
    Check that every constraint references existing nodes.
    
    Raises:
        TopologyError: If an index is not an integer or is outside [0, node_count).
        ConfigurationError: If two constraints join the same pair of nodes.
    """
    seen: set[tuple[int, int]] = set()
    for i, c in enumerate(constraints):
        for idx in (c.a, c.b):
            if isinstance(idx, bool) or not isinstance(idx, (int, np.integer)):
                raise TopologyError(f"Constraint {i} has non-integer node index {idx!r}")
            if not 0 <= idx < node_count:
                raise TopologyError(
                    f"Constraint {i} references node {idx}, but there are only {node_count} nodes"
                )
        pair = (min(c.a, c.b), max(c.a, c.b))
        if pair in seen:
            raise ConfigurationError(f"Duplicate constraint between nodes {pair[0]} and {pair[1]}")
        seen.add(pair)
