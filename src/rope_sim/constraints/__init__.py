# MIT License (see LICENSE)
"""
Constraint types and the relaxation solver.

This subpackage provides:
    - DistanceConstraint: Breakable rest-length link between two node indices.
    - relax_constraints: Gauss-Seidel position relaxation over all constraints.
    - break_constraints: Filter removing over-stretched constraints.
    - validate_constraints: Index and duplicate checks run at construction.

Typical usage:
    from rope_sim.constraints import DistanceConstraint, relax_constraints
    
    constraints = [DistanceConstraint(a=0, b=1, break_threshold=250.0)]
    relax_constraints(constraints, nodes, iters=5)
"""
from .solver import (
    DistanceConstraint,
    relax_constraints,
    break_constraints,
    validate_constraints,
)

__all__ = [
    "DistanceConstraint",
    "relax_constraints",
    "break_constraints",
    "validate_constraints",
]
