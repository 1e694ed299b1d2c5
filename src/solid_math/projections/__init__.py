"""Projection transforms - flatten labeled N-D point sets for 2D display."""

from .explode import explode_3d_points, explode_nd_points
from .perspective import perspective_project_points
from .rotation import rotate_xy
