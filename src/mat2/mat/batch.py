from __future__ import annotations

import logging

import numpy as np

from .core import Mat2
from .rotation import rotation_matrix

logger = logging.getLogger("mat2.batch")


def apply_to_points(m: Mat2, points: np.ndarray) -> np.ndarray:
    """
    Apply `m` to every point in `points` (N,2), or to a single point (2,).
    Returns an array of the same shape: row k equals m @ points[k].
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim not in (1, 2) or pts.shape[-1] != 2:
        raise ValueError(f"points must have shape (N, 2) or (2,). Got {pts.shape}")
    logger.debug("Applying %r to %d point(s) of shape %s", m, 1 if pts.ndim == 1 else pts.shape[0], pts.shape)
    return pts @ m.to_numpy().T


def rotate_points(points: np.ndarray, theta: float) -> np.ndarray:
    """Rotate points (N,2) counter-clockwise by `theta` radians about the origin."""
    return apply_to_points(rotation_matrix(theta), points)
