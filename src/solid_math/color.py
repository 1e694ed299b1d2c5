"""
Color Helpers
=============

Standard color = [r, g, b] with each channel in [0, 1].

    parse_color('#ff8000')  -> [1.0, 0.50196..., 0.0]
    parse_color('#f80')     -> [1.0, 0.53333..., 0.0]   (digits doubled)
    format_color([1, 0.5, 0]) -> '#ff8000'

format_color() rounds each channel UP (ceil) to an 8-bit value, so
format_color(parse_color(s)) == s for any lowercase '#rrggbb'.
Values within 1e-9 of an integer snap to it before the ceil.
"""

import math
import string
from typing import List, Optional, Sequence

from .spec.constants import DEFAULT_COLOR


def parse_color(color_str: str) -> List[float]:
    """
    Derive [r, g, b] from '#rrggbb' or '#rgb'. No alpha.

    Raises:
        ValueError: if color_str does not start with '#', has the wrong
            length, or contains non-hex digits
    """
    if not color_str.startswith('#'):
        raise ValueError(f"Color string must start with '#', got {color_str!r}")
    if len(color_str) not in (4, 7):
        raise ValueError(f"Expected '#rgb' or '#rrggbb', got {color_str!r}")

    bad = [ch for ch in color_str[1:] if ch not in string.hexdigits]
    if bad:
        raise ValueError(f"Invalid hex digit {bad[0]!r} in {color_str!r}")

    n_digits = 2 if len(color_str) == 7 else 1
    color = []
    for i in range(3):
        channel_str = color_str[1 + n_digits * i: 1 + n_digits * (i + 1)]
        if n_digits == 1:
            channel_str = channel_str + channel_str
        color.append(int(channel_str, 16) / 255)
    return color


def _hex(c: float) -> str:
    # round() first: k/255*255 can land a few ulps above k
    return f"{math.ceil(round(c * 255, 9)):02x}"


def format_color(color: Optional[Sequence[float]] = None,
                 default: Sequence[float] = DEFAULT_COLOR) -> str:
    """'#rrggbb' for a standard color; uses default when color is None."""
    if color is None:
        color = default
    return '#' + ''.join(_hex(c) for c in color)
