"""Multiple accessible color suggestions.

Two sampling modes over a hue's accessibility curve:
- clustered (spread == 0): the ``count`` points closest to the foreground,
  nearest first
- spread (spread > 0): points ``spread`` saturation units apart, fanning
  out from the nearest point, ordered by saturation

Preconditions: ``count >= 1`` and ``spread >= 0``; other values are not
checked.
"""

from __future__ import annotations

import numpy as np

from huecurve.core.accessibility.contrast import AA_NORMAL, meets_threshold
from huecurve.core.accessibility.curve import CurveBuilder
from huecurve.core.accessibility.nearest import fallback_color, locate
from huecurve.core.caching import CurveCache
from huecurve.core.config.models import EngineConfig


def clustered_indices(distances: np.ndarray, count: int) -> list[int]:
    """Indices of the ``count`` smallest distances, ascending; ties keep index order."""
    order = np.argsort(distances, kind="stable")
    return [int(i) for i in order[:count]]


def spread_indices(curve_length: int, nearest: int, count: int, spread: int) -> list[int]:
    """Indices ``nearest +/- k*spread`` for k = 1, 2, ... until ``count`` are collected.

    Stops early once both directions leave [0, curve_length). Returned
    ascending and truncated to ``count``.

    Example:
        >>> spread_indices(50, nearest=20, count=5, spread=10)
        [0, 10, 20, 30, 40]
    """
    sampled = {nearest}
    offset = spread
    while len(sampled) < count:
        lower = nearest - offset
        upper = nearest + offset
        if lower < 0 and upper >= curve_length:
            break
        if lower >= 0:
            sampled.add(lower)
        if upper < curve_length:
            sampled.add(upper)
        offset += spread
    return sorted(sampled)[:count]


def nearest_accessible_colors(
    foreground: str,
    background: str,
    count: int,
    threshold: float = AA_NORMAL,
    spread: int = 0,
    *,
    cache: CurveCache | None = None,
    config: EngineConfig | None = None,
) -> list[str]:
    """Suggest up to ``count`` accessible colors of the foreground's hue.

    Args:
        foreground: Foreground hex color
        background: Background hex color
        count: Maximum number of suggestions
        threshold: Contrast ratio to reach
        spread: 0 for clustered sampling, otherwise the saturation step
        cache: Optional curve cache
        config: Optional engine config

    Returns:
        ``[foreground]`` if it already meets threshold; the black/white
        fallback alone if the hue has no accessible color; otherwise between
        1 and ``min(count, len(curve))`` hex colors.
    """
    if meets_threshold(foreground, background, threshold):
        return [foreground]

    query = locate(foreground, background, threshold, CurveBuilder(config, cache))
    if not query.curve:
        return [fallback_color(background)]

    distances = query.distances()
    if spread > 0 and len(query.curve) > 1:
        nearest = int(np.argmin(distances))
        indices = spread_indices(len(query.curve), nearest, count, spread)
    else:
        indices = clustered_indices(distances, count)

    return [query.color_at(i) for i in indices]
