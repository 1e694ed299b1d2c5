"""Planar rotation matrices."""

import numpy as np


def rotate_xy(angle: float) -> np.ndarray:
    """2×2 matrix rotating the xy-plane counterclockwise by angle (radians)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s],
                     [s, c]])
