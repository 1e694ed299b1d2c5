"""Constants and the Shape contract."""

from .constants import (
    EPS_ZERO,
    EPS_CLOSE,
    PLANAR_TOL,
    PHI,
    PHI_INV,
    PHI_SQ,
    SQRT2,
    SQRT2_INV,
    EDGE_LEN,
    EXPECTED_COUNTS,
    EXPECTED_FACE_SIZES,
    DEFAULT_MIN_Z,
    DEFAULT_COLOR,
)
from .structures import Shape, LabeledPoint, validate_shape, create_shape
