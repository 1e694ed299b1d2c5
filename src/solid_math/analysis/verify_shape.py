"""
Shape Verification Functions
============================

Verify structural properties of a built solid:
    - (V, E, F) counts and Euler characteristic χ = V - E + F = 2
    - uniform edge length
    - face sizes histogram
    - face planarity (SVD) and faces lying on the convex hull
    - central symmetry (every vertex has an opposite)
"""

import numpy as np
from collections import Counter
from scipy.spatial import ConvexHull
from typing import Any, Dict, Optional

from ..builders.common import are_opposite, dist
from ..spec.constants import EPS_CLOSE, EXPECTED_COUNTS, EXPECTED_FACE_SIZES
from ..spec.structures import Shape, validate_shape


def face_plane_deviation(points: np.ndarray, face) -> float:
    """
    Max distance of the face's vertices from their best-fit plane.

    Uses SVD of the centered coordinates: smallest singular direction = normal.
    """
    coords = np.asarray(points, dtype=float)[list(face)]
    centered = coords - coords.mean(axis=0)
    _, _, vh = np.linalg.svd(centered)
    normal = vh[-1]
    return float(np.max(np.abs(centered @ normal)))


def hull_face_deviation(hull: ConvexHull, points: np.ndarray, face) -> float:
    """
    Distance of the face from the closest supporting plane of the hull.

    hull.equations rows are [n, offset] with |n| = 1 and n·p + offset <= 0
    inside. A face on the boundary sits exactly on one of those planes.
    """
    coords = np.asarray(points, dtype=float)[list(face)]
    residuals = np.abs(coords @ hull.equations[:, :-1].T + hull.equations[:, -1])
    return float(np.min(np.max(residuals, axis=0)))


def verify_shape(shape: Shape, name: Optional[str] = None) -> Dict[str, Any]:
    """
    Verify a shape's structure.

    Args:
        shape: Shape from a build_* function
        name: solid name; enables the expected-count checks

    Returns:
        dict with V, E, F, chi, edge lengths, face sizes, planarity,
        symmetry and (if name is known) expected-count results
    """
    validate_shape(shape, strict=True)
    points, edges, faces = shape

    V = len(points)
    E = len(edges)
    F = len(faces)
    chi = V - E + F

    edge_lengths = np.array([dist(points[i], points[j]) for i, j in edges])
    edge_len = float(edge_lengths.mean()) if E else 0.0
    edge_spread = float(edge_lengths.max() - edge_lengths.min()) if E else 0.0

    face_sizes = dict(Counter(len(f) for f in faces))

    hull = ConvexHull(np.array(points, dtype=float))
    max_plane_dev = max((face_plane_deviation(points, f) for f in faces), default=0.0)
    max_hull_dev = max((hull_face_deviation(hull, points, f) for f in faces), default=0.0)

    pts_list = [tuple(p) for p in points]
    is_centrosymmetric = all(
        any(are_opposite(p, q) for q in pts_list) for p in pts_list
    )

    result = {
        'V': V, 'E': E, 'F': F, 'chi': chi,
        'edge_len': edge_len,
        'edge_len_uniform': edge_spread < EPS_CLOSE,
        'face_sizes': face_sizes,
        'max_plane_deviation': max_plane_dev,
        'max_hull_deviation': max_hull_dev,
        'faces_on_hull': max_hull_dev < EPS_CLOSE,
        'n_hull_vertices': len(hull.vertices),
        'is_centrosymmetric': is_centrosymmetric,
    }

    if name is not None:
        if name not in EXPECTED_COUNTS:
            raise ValueError(f"No expected counts for solid {name!r}")
        result['counts_match'] = (V, E, F) == EXPECTED_COUNTS[name]
        result['face_sizes_match'] = face_sizes == EXPECTED_FACE_SIZES[name]

    return result
