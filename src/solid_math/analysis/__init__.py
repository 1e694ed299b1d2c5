"""
Analysis functions - depend on builders layer.

Separated from builders to maintain clean layering:
    builders → spec
    analysis → builders → spec
"""

from .verify_shape import verify_shape, face_plane_deviation, hull_face_deviation
