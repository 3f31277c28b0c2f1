# MIT License (see LICENSE)
"""
Geometric tests between the rope and pointer gestures.

This subpackage provides:
    - ccw: Orientation predicate for three points.
    - segments_intersect: Proper segment/segment crossing test.
    - cut_constraints: Filter removing constraints crossed by a cutting sweep.
"""
from .cutting import ccw, segments_intersect, cut_constraints

__all__ = [
    "ccw",
    "segments_intersect",
    "cut_constraints",
]
