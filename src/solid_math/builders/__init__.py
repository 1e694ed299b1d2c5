"""
Geometry builders - pure construction, no projection dependency.

EXPORTS:
- Platonic: build_cube, build_tetrahedron, build_dodecahedron, build_icosahedron
- Archimedean: build_cuboctahedron, build_icosidodecahedron
- Registry: SOLIDS (name -> builder), build_solid(name)

All builders take no arguments and return a Shape (points, edges, faces).
"""

from typing import Callable, Dict

from ..spec.structures import Shape
from .platonic import build_cube, build_tetrahedron, build_dodecahedron, build_icosahedron
from .archimedean import build_cuboctahedron, build_icosidodecahedron

SOLIDS: Dict[str, Callable[[], Shape]] = {
    "cube": build_cube,
    "tetrahedron": build_tetrahedron,
    "dodecahedron": build_dodecahedron,
    "icosahedron": build_icosahedron,
    "cuboctahedron": build_cuboctahedron,
    "icosidodecahedron": build_icosidodecahedron,
}


def build_solid(name: str) -> Shape:
    """Build a solid by name (case-insensitive)."""
    key = name.strip().lower()
    if key not in SOLIDS:
        raise ValueError(f"Unknown solid: {name!r}. Known solids: {sorted(SOLIDS)}")
    return SOLIDS[key]()
