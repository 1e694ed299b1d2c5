"""
Shared input handling for projection transforms.

Every transform takes (points, labels, ...) and returns one LabeledPoint
per input point, in input order.
"""

import warnings
import numpy as np
from typing import List, Optional, Sequence

from ..spec.structures import LabeledPoint


def as_point_array(points, min_dim: int) -> np.ndarray:
    """
    Convert points to an (N, d) float array, d >= min_dim.

    Raises:
        ValueError: if points are not 2D or have fewer than min_dim coordinates
    """
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f"Expected an (N, d) point array, got shape {arr.shape}")
    if len(arr) == 0:
        raise ValueError("Expected at least one point, got none")
    if arr.shape[1] < min_dim:
        raise ValueError(f"Expected points of dimension >= {min_dim}, got {arr.shape[1]}")
    return arr


def check_labels(labels: Optional[Sequence[str]], n: int) -> List[Optional[str]]:
    """Labels as a list of length n (all None when labels is None)."""
    if labels is None:
        return [None] * n
    labels = list(labels)
    if len(labels) != n:
        raise ValueError(f"Got {len(labels)} labels for {n} points")
    return labels


def interpolation_params(values: np.ndarray) -> np.ndarray:
    """
    Map values linearly from [min, max] to [0, 1].

    A degenerate range (all values equal) maps everything to 0, with a warning.
    """
    v_min = values.min()
    v_max = values.max()
    if v_max == v_min:
        warnings.warn(
            f"Degenerate depth range: all first coordinates equal {v_min}. "
            f"Mapping every point to the lower bound.",
            UserWarning
        )
        return np.zeros_like(values)
    return (values - v_min) / (v_max - v_min)


def to_labeled(coords: np.ndarray, labels: List[Optional[str]]) -> List[LabeledPoint]:
    return [LabeledPoint(tuple(float(x) for x in row), label)
            for row, label in zip(coords, labels)]
