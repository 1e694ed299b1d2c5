"""
Platonic Solid Construction
===========================

Build four of the Platonic solids from closed-form coordinates.

SOLIDS:
    - Cube (V=8, E=12, F=6)
    - Tetrahedron (V=4, E=6, F=4)
    - Dodecahedron (V=20, E=30, F=12)
    - Icosahedron (V=12, E=30, F=20)

All are centered at the origin, not normalized. Faces are listed in
generation order (ascending vertex index), NOT as CCW rings.
"""

from typing import Dict, List, Tuple

from ..spec.constants import PHI, PHI_INV, PHI_SQ, SQRT2_INV, EDGE_LEN, EXPECTED_COUNTS
from ..spec.structures import Shape, create_shape
from .common import (
    push,
    edges_by_length,
    triangles_by_length,
    is_close,
    check_counts,
)

SIGNS = (-1, 1)


def build_cube() -> Shape:
    """
    Build a cube centered at origin with vertices in {-1, 1}³.

    TOPOLOGY:
        V = 8 vertices (corners of cube)
        E = 12 edges
        F = 6 faces (squares)
        χ = V - E + F = 8 - 12 + 6 = 2

    CONSTRUCTION:
        Edges are added while walking the triple sign loop. Indices with
        x = -1 (resp. y = -1) are queued; each x = 1 (resp. y = 1) vertex
        closes an edge with the oldest queued index. z-edges join
        consecutive indices. Faces group vertices by (axis, value).

    Returns:
        Shape(points (8, 3), edges (12), faces (6))
    """
    points = []
    edges = []

    idx = 0
    x_stack: List[int] = []
    y_stack: List[int] = []
    face_map: Dict[str, List[int]] = {}
    for x in SIGNS:
        for y in SIGNS:
            for z in SIGNS:
                if x == -1:
                    x_stack.append(idx)
                if y == -1:
                    y_stack.append(idx)
                pt = (x, y, z)
                points.append(pt)
                for axis in range(3):
                    push(face_map, f"{axis}:{pt[axis]}", idx)
                if x == 1:
                    edges.append((x_stack.pop(0), idx))
                if y == 1:
                    edges.append((y_stack.pop(0), idx))
                if z == 1:
                    edges.append((idx - 1, idx))
                idx += 1
    faces = list(face_map.values())

    check_counts("cube", points, edges, faces, EXPECTED_COUNTS["cube"])
    return create_shape(points, edges, faces)


def build_tetrahedron() -> Shape:
    """
    Build a regular tetrahedron centered at origin.

    TOPOLOGY:
        V = 4 vertices
        E = 6 edges
        F = 4 faces (triangles)
        χ = V - E + F = 4 - 6 + 4 = 2

    GEOMETRY:
        Vertices (±1, 0, -1/√2) and (0, ±1, 1/√2)
        Edge length = 2

    Returns:
        Shape(points (4, 3), edges (6), faces (4))
    """
    points = []
    for a in SIGNS:
        points.append((a, 0, -SQRT2_INV))
        points.append((0, a, SQRT2_INV))

    # All pairs are edges (complete graph K4)
    edges = [(i, j) for i in range(3) for j in range(i + 1, 4)]

    # Face i is every vertex except i
    faces = [[j for j in range(4) if j != i] for i in range(4)]

    check_counts("tetrahedron", points, edges, faces, EXPECTED_COUNTS["tetrahedron"])
    return create_shape(points, edges, faces)


def build_dodecahedron() -> Shape:
    """
    Build a regular dodecahedron centered at origin.

    TOPOLOGY:
        V = 20 vertices
        E = 30 edges
        F = 12 faces (pentagons)
        χ = V - E + F = 20 - 30 + 12 = 2

    GEOMETRY:
        8 cube vertices (±1, ±1, ±1)
        12 vertices (0, ±φ, ±1/φ) and cyclic shifts
        Edge length = 2/φ

    FACE PLANES:
        p[c1] + s1·φ·p[c2] = s2·φ²,  c2 = (c1 + 1) mod 3,  s1, s2 = ±1

    Returns:
        Shape(points (20, 3), edges (30), faces (12))
    """
    points = []
    for s1 in SIGNS:
        for s2 in SIGNS:
            for s3 in SIGNS:
                points.append((s1, s2, s3))
    for s1 in SIGNS:
        for s2 in SIGNS:
            points.append((0, s1 * PHI, s2 * PHI_INV))
            points.append((s1 * PHI_INV, 0, s2 * PHI))
            points.append((s1 * PHI, s2 * PHI_INV, 0))

    edges = edges_by_length(points, EDGE_LEN["dodecahedron"])

    faces = []
    for c1 in range(3):
        c2 = (c1 + 1) % 3
        for s1 in SIGNS:
            for s2 in SIGNS:
                face = [i for i, pt in enumerate(points)
                        if is_close(pt[c1] + s1 * PHI * pt[c2], s2 * PHI_SQ)]
                faces.append(face)

    check_counts("dodecahedron", points, edges, faces, EXPECTED_COUNTS["dodecahedron"])
    return create_shape(points, edges, faces)


def build_icosahedron() -> Shape:
    """
    Build a regular icosahedron centered at origin.

    TOPOLOGY:
        V = 12 vertices
        E = 30 edges
        F = 20 faces (triangles)
        χ = V - E + F = 12 - 30 + 20 = 2

    GEOMETRY:
        Vertices (0, ±1, ±φ) and cyclic shifts
        Edge length = 2

    FACE PLANES (for reference):
        normals 2·(±1, ±1, ±1) and 2·(0, ±φ, ±1/φ) (cyclic), offset 2φ²

    Returns:
        Shape(points (12, 3), edges (30), faces (20))
    """
    points = []
    for c1 in range(3):
        c2 = (c1 + 1) % 3
        for s1 in SIGNS:
            for s2 in SIGNS:
                pt = [0.0, 0.0, 0.0]
                pt[c1] = s1
                pt[c2] = s2 * PHI
                points.append(tuple(pt))

    edge_len = EDGE_LEN["icosahedron"]
    edges = edges_by_length(points, edge_len)
    faces = triangles_by_length(points, edge_len)

    check_counts("icosahedron", points, edges, faces, EXPECTED_COUNTS["icosahedron"])
    return create_shape(points, edges, faces)
