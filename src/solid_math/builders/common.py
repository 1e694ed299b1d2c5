"""
Shared Numeric Helpers for Builders
===================================

Distance/closeness tests and the matching strategies used to derive
edges and faces from vertex coordinates.

EDGE STRATEGY (distance matching):
    (i, j) with i < j is an edge iff |dist(p_i, p_j) - edge_len| < EPS_CLOSE.
    Absolute tolerance: coordinates are O(1), so no relative scaling is needed.

FACE STRATEGIES:
    - Triangle closure: all i < j < k whose three pairwise distances are
      edge_len. O(n³), fine for n ≤ 30.
    - Plane membership: all i with <v, p_i> ≈ c.
"""

import numpy as np
from scipy.spatial.distance import pdist, squareform
from typing import Dict, List, Tuple

from ..spec.constants import EPS_CLOSE


def is_close(a: float, b: float) -> bool:
    """Absolute closeness test, |a - b| < EPS_CLOSE."""
    return abs(a - b) < EPS_CLOSE


def dist(a, b) -> float:
    """Euclidean distance between two points of equal dimension."""
    return float(np.linalg.norm(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)))


def push(mapping: Dict, key, item) -> None:
    """Append item to mapping[key], creating the list on first use."""
    mapping.setdefault(key, []).append(item)


def are_opposite(a, b) -> bool:
    """True if b == -a coordinate by coordinate (exact)."""
    return len(a) == len(b) and all(x == -y for x, y in zip(a, b))


def distance_matrix(points: np.ndarray) -> np.ndarray:
    """(N, N) matrix of pairwise Euclidean distances."""
    return squareform(pdist(np.asarray(points, dtype=float)))


def edges_by_length(points: np.ndarray, edge_len: float) -> List[Tuple[int, int]]:
    """
    All pairs (i, j), i < j, at distance edge_len.

    Returns:
        edges in ascending (i, j) order
    """
    D = distance_matrix(points)
    n = len(D)
    edges = []
    for i in range(n - 1):
        for j in range(i + 1, n):
            if is_close(D[i, j], edge_len):
                edges.append((i, j))
    return edges


def triangles_by_length(points: np.ndarray, edge_len: float) -> List[List[int]]:
    """
    All triples i < j < k whose three pairwise distances equal edge_len.

    Returns:
        triangular faces in ascending (i, j, k) order
    """
    D = distance_matrix(points)
    n = len(D)
    faces = []
    for i in range(n - 2):
        for j in range(i + 1, n - 1):
            if not is_close(D[i, j], edge_len):
                continue
            for k in range(j + 1, n):
                if is_close(D[i, k], edge_len) and is_close(D[j, k], edge_len):
                    faces.append([i, j, k])
    return faces


def find_pts_in_plane(points: np.ndarray, v, c: float) -> List[int]:
    """Indices i (ascending) with <v, points[i]> ≈ c."""
    dots = np.asarray(points, dtype=float) @ np.asarray(v, dtype=float)
    return [i for i, d in enumerate(dots) if is_close(d, c)]


def check_counts(name: str, points, edges, faces, expected: Tuple[int, int, int]) -> None:
    """Raise ValueError if (V, E, F) does not match the expected counts."""
    n_V, n_E, n_F = expected
    if len(points) != n_V:
        raise ValueError(f"{name}: expected {n_V} vertices, got {len(points)}")
    if len(edges) != n_E:
        raise ValueError(f"{name}: expected {n_E} edges, got {len(edges)}")
    if len(faces) != n_F:
        raise ValueError(f"{name}: expected {n_F} faces, got {len(faces)}")
