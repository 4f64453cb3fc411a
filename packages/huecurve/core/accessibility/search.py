"""Brightness boundary search at a fixed hue and saturation.

With hue and saturation fixed, every RGB channel scales linearly with the
HSV value, so foreground luminance rises monotonically with brightness.
Contrast against a background therefore falls until the foreground matches
the background's luminance and rises after it. Against light backgrounds the
accessible brightnesses form a prefix [0, b]; against dark ones a suffix
[a, 100]. Both searches below return the inner end of that range.

Every probe measures the hex color ``hsv_to_hex(hue, saturation, v)``, so a
returned point reproduces exactly when converted again later.
"""

from __future__ import annotations

from collections.abc import Callable

from huecurve.core.accessibility.contrast import contrast_ratio
from huecurve.core.accessibility.convert import hsv_to_hex
from huecurve.core.config.models import SearchStrategy

MIN_VALUE = 0
MAX_VALUE = 100

__all__ = [
    "MAX_VALUE",
    "MIN_VALUE",
    "SearchStrategy",
    "find_threshold",
    "find_threshold_linear",
]


def _meets_at(
    background: str, hue: float, saturation: int, threshold: float
) -> Callable[[int], bool]:
    def meets(value: int) -> bool:
        color = hsv_to_hex(hue, saturation, value)
        return contrast_ratio(background, color) >= threshold

    return meets


def find_threshold(
    background: str,
    hue: float,
    saturation: int,
    threshold: float,
    background_is_light: bool,
) -> int | None:
    """Binary-search the brightness where contrast crosses threshold.

    Args:
        background: Background hex color
        hue: Hue in degrees
        saturation: Saturation 0-100
        threshold: Contrast ratio to reach
        background_is_light: ``is_light(background)``, precomputed by the caller

    Returns:
        Light background: highest brightness that still meets threshold.
        Dark background: lowest brightness that meets threshold.
        None when even the extreme brightness at this saturation fails.
    """
    meets = _meets_at(background, hue, saturation, threshold)

    if background_is_light:
        # Dark foregrounds needed; contrast falls as brightness rises
        if not meets(MIN_VALUE):
            return None
        if meets(MAX_VALUE):
            return MAX_VALUE

        # low meets, high fails
        low, high = MIN_VALUE, MAX_VALUE
        while high - low > 1:
            mid = (low + high) // 2
            if meets(mid):
                low = mid
            else:
                high = mid
        return low

    # Light foregrounds needed; contrast rises with brightness
    if not meets(MAX_VALUE):
        return None
    if meets(MIN_VALUE):
        return MIN_VALUE

    # low fails, high meets
    low, high = MIN_VALUE, MAX_VALUE
    while high - low > 1:
        mid = (low + high) // 2
        if meets(mid):
            high = mid
        else:
            low = mid
    return high


def find_threshold_linear(
    background: str,
    hue: float,
    saturation: int,
    threshold: float,
    background_is_light: bool,
    start: int = MIN_VALUE,
) -> int | None:
    """Locate the same boundary as ``find_threshold`` by stepping one unit at a time.

    The scan starts at ``start`` (typically the previous saturation's result
    minus a small backtrack) and walks toward the boundary in whichever
    direction the probe at ``start`` indicates. It makes no bisection
    assumption beyond the boundary being reachable from ``start``, and every
    value it returns has been probed and meets the threshold.

    Returns:
        Same contract as ``find_threshold``.
    """
    meets = _meets_at(background, hue, saturation, threshold)
    value = min(max(start, MIN_VALUE), MAX_VALUE)

    if background_is_light:
        if meets(value):
            while value < MAX_VALUE and meets(value + 1):
                value += 1
            return value
        while value > MIN_VALUE:
            value -= 1
            if meets(value):
                return value
        return None

    if meets(value):
        while value > MIN_VALUE and meets(value - 1):
            value -= 1
        return value
    while value < MAX_VALUE:
        value += 1
        if meets(value):
            return value
    return None
