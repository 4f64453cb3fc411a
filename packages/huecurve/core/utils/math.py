"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from negative infinity.

    Python's ``round`` uses banker's rounding (``round(0.5) == 0``); color
    channels and hue buckets need ``floor(x + 0.5)`` instead.

    Example:
        >>> round_half_up(10.5)
        11
        >>> round_half_up(2.5)
        3
    """
    return int(math.floor(x + 0.5))


def squared_distances(
    origin: tuple[float, float], xs: np.ndarray, ys: np.ndarray
) -> np.ndarray:
    """Squared Euclidean distance from origin to each (x, y) point.

    Args:
        origin: Reference point (x, y)
        xs: Point x coordinates
        ys: Point y coordinates

    Returns:
        Array of squared distances, same shape as xs
    """
    ox, oy = origin
    result: np.ndarray = (xs - ox) ** 2 + (ys - oy) ** 2
    return result
