# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Force generators: gravity, linear drag, pointer wind.
    - Integrators: force-driven integrate() and position-driven differentiate().
    - Invariants: energy, momentum and constraint error diagnostics.

Typical usage:
    from rope_sim.core import apply_gravity, integrate, differentiate
    
    apply_gravity(node, np.array([0.0, 18.0]))
    integrate(node, dt=0.15)
    # ... relax constraints ...
    differentiate(node, dt=0.15)
"""
from .forces import apply_gravity, apply_linear_drag, apply_wind
from .integrators import integrate, differentiate
from .invariants import (
    kinetic_energy,
    linear_momentum,
    constraint_errors,
    max_constraint_error,
)

__all__ = [
    # Forces
    "apply_gravity",
    "apply_linear_drag",
    "apply_wind",
    # Integrators
    "integrate",
    "differentiate",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
    "constraint_errors",
    "max_constraint_error",
]
