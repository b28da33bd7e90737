from .core import IDENTITY, ONES, ZERO, Mat2
from .rotation import rotation_matrix
from .batch import apply_to_points, rotate_points

__all__ = [
    "Mat2",
    "ZERO",
    "IDENTITY",
    "ONES",
    "rotation_matrix",
    "apply_to_points",
    "rotate_points",
]
