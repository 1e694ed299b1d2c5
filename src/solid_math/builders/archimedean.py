"""
Archimedean Solid Construction
==============================

SOLIDS:
    - Cuboctahedron (V=12, E=24, F=14: 6 squares + 8 triangles)
    - Icosidodecahedron (V=30, E=60, F=32: 20 triangles + 12 pentagons)

Both are quasi-regular: every edge separates two different face types.
"""

from ..spec.constants import PHI, PHI_SQ, EDGE_LEN, EXPECTED_COUNTS
from ..spec.structures import Shape, create_shape
from .common import edges_by_length, triangles_by_length, find_pts_in_plane, check_counts

SIGNS = (-1, 1)


def build_cuboctahedron() -> Shape:
    """
    Build a cuboctahedron centered at origin.

    TOPOLOGY:
        V = 12 vertices (edge midpoints of the {-1, 1}³ cube, scaled)
        E = 24 edges
        F = 14 faces (6 squares + 8 triangles)
        χ = V - E + F = 12 - 24 + 14 = 2

    GEOMETRY:
        Vertices (±1, ±1, 0) and cyclic shifts
        Edge length = √2

    FACES:
        Squares: vertices with p[c] = s (one per axis and sign)
        Triangles: vertices agreeing with octant sign s in exactly 2 coords

    Returns:
        Shape(points (12, 3), edges (24), faces (14))
    """
    points = []
    for c1 in range(3):
        c2 = (c1 + 1) % 3
        for s1 in SIGNS:
            for s2 in SIGNS:
                pt = [0, 0, 0]
                pt[c1] = s1
                pt[c2] = s2
                points.append(tuple(pt))

    edges = edges_by_length(points, EDGE_LEN["cuboctahedron"])

    faces = []
    # 6 squares
    for c in range(3):
        for s in SIGNS:
            faces.append([i for i, pt in enumerate(points) if pt[c] == s])
    # 8 triangles (one per octant)
    for s1 in SIGNS:
        for s2 in SIGNS:
            for s3 in SIGNS:
                s = (s1, s2, s3)
                face = []
                for i, pt in enumerate(points):
                    n_matches = sum(1 for j in range(3) if pt[j] == s[j])
                    if n_matches == 2:
                        face.append(i)
                faces.append(face)

    check_counts("cuboctahedron", points, edges, faces, EXPECTED_COUNTS["cuboctahedron"])
    return create_shape(points, edges, faces)


def build_icosidodecahedron() -> Shape:
    """
    Build an icosidodecahedron centered at origin.

    TOPOLOGY:
        V = 30 vertices
        E = 60 edges
        F = 32 faces (20 triangles + 12 pentagons)
        χ = V - E + F = 30 - 60 + 32 = 2

    GEOMETRY:
        6 vertices (0, 0, ±φ) and cyclic shifts
        24 vertices ½(±1, ±φ, ±φ²) and cyclic shifts
        Edge length = 1

    PENTAGON PLANES:
        <v, p> = φ²/2 with v[c1] = ±φ/2, v[c2] = ±1/2, c2 = (c1 + 1) mod 3

    Returns:
        Shape(points (30, 3), edges (60), faces (32))
    """
    points = []
    # (0, 0, ±φ), all shifts
    for c in range(3):
        for s in SIGNS:
            pt = [0.0, 0.0, 0.0]
            pt[c] = s * PHI
            points.append(tuple(pt))
    # ½(±1, ±φ, ±φ²), all shifts
    for c1 in range(3):
        c2 = (c1 + 1) % 3
        c3 = (c1 + 2) % 3
        for s1 in SIGNS:
            for s2 in SIGNS:
                for s3 in SIGNS:
                    pt = [0.0, 0.0, 0.0]
                    pt[c1] = s1 / 2
                    pt[c2] = s2 * PHI / 2
                    pt[c3] = s3 * PHI_SQ / 2
                    points.append(tuple(pt))

    edge_len = EDGE_LEN["icosidodecahedron"]
    edges = edges_by_length(points, edge_len)

    # 20 triangles
    faces = triangles_by_length(points, edge_len)

    # 12 pentagons
    c = PHI_SQ / 2
    for c1 in range(3):
        c2 = (c1 + 1) % 3
        for s1 in SIGNS:
            for s2 in SIGNS:
                v = [0.0, 0.0, 0.0]
                v[c1] = s1 * PHI / 2
                v[c2] = s2 / 2
                faces.append(find_pts_in_plane(points, v, c))

    check_counts("icosidodecahedron", points, edges, faces, EXPECTED_COUNTS["icosidodecahedron"])
    return create_shape(points, edges, faces)
