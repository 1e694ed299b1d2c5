"""
Solid Summary
=============

Build one (or every) solid and print its structure, optionally followed
by a 2D projection of its vertices.

OUTPUTS
-------

  - V, E, F, χ and face sizes
  - edge length (uniformity check) and face planarity
  - with --project: one line per vertex, label + 2D coordinates

EXPECTED OUTPUT (--solid dodecahedron):
    dodecahedron
      V=20, E=30, F=12, χ=2  ✓ counts
      faces: {5: 12}
      edge length 1.236068 (uniform ✓)
      max face-plane deviation 1.1e-16, faces on hull ✓
      centrosymmetric: True

Usage:
    python3 scripts/01_solid_summary.py --solid cube
    python3 scripts/01_solid_summary.py --solid icosahedron --project perspective
    python3 scripts/01_solid_summary.py --all
"""

import sys
from pathlib import Path

# Find src directory robustly (works from any location)
def _find_src():
    """Find src/ by looking for solid_math/ subdirectory."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # max 10 levels up
        if (current / 'solid_math').is_dir():
            return current
        candidate = current / 'src'
        if (candidate / 'solid_math').is_dir():
            return candidate
        current = current.parent
    raise RuntimeError("Cannot find src/solid_math directory")

sys.path.insert(0, str(_find_src()))

from solid_math.builders import SOLIDS, build_solid
from solid_math.analysis import verify_shape
from solid_math.projections import (
    explode_3d_points,
    perspective_project_points,
)


def print_summary(name: str) -> dict:
    """Print and return the verification result for one solid."""
    shape = build_solid(name)
    result = verify_shape(shape, name)

    mark = lambda ok: "✓" if ok else "✗"
    print(name)
    print(f"  V={result['V']}, E={result['E']}, F={result['F']}, χ={result['chi']}  "
          f"{mark(result['counts_match'])} counts")
    print(f"  faces: {result['face_sizes']}")
    print(f"  edge length {result['edge_len']:.6f} (uniform {mark(result['edge_len_uniform'])})")
    print(f"  max face-plane deviation {result['max_plane_deviation']:.1e}, "
          f"faces on hull {mark(result['faces_on_hull'])}")
    print(f"  centrosymmetric: {result['is_centrosymmetric']}")
    return result


def print_projection(name: str, method: str, r_min: float, r_max: float) -> None:
    """Print the 2D projection of a solid's vertices, labeled by index."""
    points, _, _ = build_solid(name)
    labels = [f"v{i}" for i in range(len(points))]

    if method == "perspective":
        projected = perspective_project_points(points, labels)
    else:
        projected = explode_3d_points(points, labels, r_min, r_max)

    print(f"  {method} projection:")
    for p in projected:
        x, y = p.coordinates
        print(f"    {p.label:>4}  {x:+.4f}  {y:+.4f}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Print the structure of a polyhedron")
    parser.add_argument("--solid", choices=sorted(SOLIDS), default="cube", help="Solid to build")
    parser.add_argument("--all", action="store_true", help="Summarize every solid")
    parser.add_argument("--project", choices=["explode", "perspective"],
                        help="Also print a 2D projection of the vertices")
    parser.add_argument("--r-min", type=float, default=1.0, help="Explode: innermost radius")
    parser.add_argument("--r-max", type=float, default=3.0, help="Explode: outermost radius")
    args = parser.parse_args()

    names = sorted(SOLIDS) if args.all else [args.solid]
    n_ok = 0
    for name in names:
        result = print_summary(name)
        n_ok += result['counts_match'] and result['faces_on_hull']
        if args.project:
            try:
                print_projection(name, args.project, args.r_min, args.r_max)
            except ValueError as e:
                print(f"  projection skipped: {e}")
        print()

    print(f"SUMMARY: {n_ok}/{len(names)} solids verified")
