# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

All functions operate on 2D vectors represented as numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.
    
    Allows tuple/list inputs for positions, velocities and pointer coordinates.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for radius checks."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.
    
    Returns the zero vector if v has zero length, so callers never divide
    by zero for coincident points.
    """
    n = norm(v)
    if n == 0.0:
        return np.zeros(2, dtype=np.float64)
    return v / n


def cross2(a: np.ndarray, b: np.ndarray) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.
    
    Positive result means b is counterclockwise from a in a y-up frame.
    """
    return float(a[0] * b[1] - a[1] * b[0])
