from __future__ import annotations

import math

from .core import Mat2


def rotation_matrix(theta: float) -> Mat2:
    """
    Rotation matrix for a counter-clockwise turn of `theta` radians
    (x right, y up). Any real angle is accepted.

    Returns [[cos t, -sin t], [sin t, cos t]].
    """
    c = math.cos(theta)
    s = math.sin(theta)
    return Mat2(c, -s, s, c)
