"""
Radial Explode Projections
==========================

Scan the point set along its first coordinate (the "depth" axis) and
flatten each slice onto a circle (3D) or sphere (N-D) whose radius grows
linearly with depth:

    r(x) = r_min + (r_max - r_min) · (x - x_min) / (x_max - x_min)

Low depth → small radius, high depth → large radius. The remaining
coordinates keep their direction and are rescaled to length r.

ZERO-LENGTH TAIL:
    A point on the depth axis (all other coordinates 0) has no direction.
    Both transforms raise ValueError for such points.
"""

import numpy as np
from typing import List, Optional, Sequence

from ..spec.constants import EPS_ZERO
from ..spec.structures import LabeledPoint
from .common import as_point_array, check_labels, interpolation_params, to_labeled
from .rotation import rotate_xy


def _tail_lengths(tails: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(tails, axis=1)
    bad = np.nonzero(lengths < EPS_ZERO)[0]
    if len(bad) > 0:
        raise ValueError(
            f"Point {int(bad[0])} lies on the depth axis (zero-length tail); "
            f"cannot choose a direction for it"
        )
    return lengths


def explode_3d_points(points,
                      labels: Optional[Sequence[str]],
                      r_min: float,
                      r_max: float,
                      a_min: Optional[float] = None,
                      a_max: Optional[float] = None,
                      keep_coords: bool = False) -> List[LabeledPoint]:
    """
    Flatten xyz points to 2D, mapping x to radius.

    Args:
        points: (N, 3) xyz points; x is the depth axis
        labels: N labels (or None)
        r_min, r_max: radius for the lowest and highest x
        a_min, a_max: if BOTH are given, rotate each output point by an angle
            that goes from a_min to a_max as x goes from x_min to x_max
        keep_coords: if True output (y, z) directions; otherwise (-z, y),
            a quarter turn

    Returns:
        N LabeledPoints with 2D coordinates, labels carried through

    Raises:
        ValueError: if some point has y = z = 0
    """
    pts = as_point_array(points, 3)
    labels = check_labels(labels, len(pts))

    t = interpolation_params(pts[:, 0])
    radii = r_min + (r_max - r_min) * t
    lengths = _tail_lengths(pts[:, 1:3])

    y = pts[:, 1] / lengths * radii
    z = pts[:, 2] / lengths * radii
    if keep_coords:
        new_pts = np.column_stack([y, z])
    else:
        new_pts = np.column_stack([-z, y])

    if a_min is not None and a_max is not None:
        angles = a_min + (a_max - a_min) * t
        new_pts = np.array([rotate_xy(a) @ p for a, p in zip(angles, new_pts)])

    return to_labeled(new_pts, labels)


def explode_nd_points(points,
                      labels: Optional[Sequence[str]],
                      r_min: float,
                      r_max: float) -> List[LabeledPoint]:
    """
    Map N-dimensional points to (N-1)-dimensional points, first coordinate to radius.

    The tail (coordinates 1..N-1) keeps its direction and gets length r.

    Args:
        points: (M, N) points, N >= 2
        labels: M labels (or None)
        r_min, r_max: radius for the lowest and highest first coordinate

    Returns:
        M LabeledPoints with N-1 coordinates

    Raises:
        ValueError: if some point has a zero-length tail
    """
    pts = as_point_array(points, 2)
    labels = check_labels(labels, len(pts))

    radii = r_min + (r_max - r_min) * interpolation_params(pts[:, 0])
    tails = pts[:, 1:]
    lengths = _tail_lengths(tails)

    new_pts = tails / lengths[:, None] * radii[:, None]
    return to_labeled(new_pts, labels)
