"""
SOLID_MATH - Polyhedron geometry and display projections
========================================================

NO rendering. NO scene graph. NO file formats.

Structure:
    builders/     - Solid construction (cube ... icosidodecahedron)
    projections/  - Radial explode (3D, N-D), perspective divide
    analysis/     - Structure verification
    spec/         - Constants and Shape contract
    color         - Hex color parsing/formatting

All builders return a Shape (points, edges, faces).
"""

from . import builders
from . import projections
from . import analysis
from . import spec
from . import color

__version__ = "0.1.0"
