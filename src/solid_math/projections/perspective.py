"""
Perspective Projection
======================

Camera-style perspective divide with the first coordinate as depth:

    z' = z - z_min + min_z        (so z' >= min_z > 0)
    (z, tail) -> tail / z'

Maps N-dimensional points to (N-1)-dimensional points.
"""

from typing import List, Optional, Sequence

from ..spec.constants import DEFAULT_MIN_Z
from ..spec.structures import LabeledPoint
from .common import as_point_array, check_labels, to_labeled


def perspective_project_points(points,
                               labels: Optional[Sequence[str]] = None,
                               min_z: float = DEFAULT_MIN_Z) -> List[LabeledPoint]:
    """
    Translate depth so its minimum is min_z, then divide the tail by depth.

    Args:
        points: (M, N) points, N >= 2
        labels: M labels (or None)
        min_z: translated depth of the nearest point; must be > 0

    Returns:
        M LabeledPoints with N-1 coordinates
    """
    if min_z <= 0:
        raise ValueError(f"min_z must be positive, got {min_z}")

    pts = as_point_array(points, 2)
    labels = check_labels(labels, len(pts))

    z = pts[:, 0] - pts[:, 0].min() + min_z
    new_pts = pts[:, 1:] / z[:, None]
    return to_labeled(new_pts, labels)
