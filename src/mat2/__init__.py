"""
Small immutable 2x2 matrix and 2D vector value types.

`Mat2` carries the usual closed-form algebra (transpose, products, trace,
determinant, rank); `rotation_matrix` builds counter-clockwise rotations; the
`apply_to_points` / `rotate_points` helpers apply a matrix to NumPy batches.
"""

from .vec import Vec2
from .mat import (
    IDENTITY,
    ONES,
    ZERO,
    Mat2,
    apply_to_points,
    rotate_points,
    rotation_matrix,
)

__all__ = [
    "Mat2",
    "Vec2",
    "ZERO",
    "IDENTITY",
    "ONES",
    "rotation_matrix",
    "apply_to_points",
    "rotate_points",
]
