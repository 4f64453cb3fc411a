"""Nearest accessible color on an accessibility curve."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from huecurve.core.accessibility.contrast import (
    AA_NORMAL,
    BLACK,
    WHITE,
    is_light,
    meets_threshold,
)
from huecurve.core.accessibility.convert import hex_to_hsv, hsv_to_hex
from huecurve.core.accessibility.curve import CurveBuilder
from huecurve.core.caching import CurveCache
from huecurve.core.config.models import EngineConfig
from huecurve.core.utils.math import squared_distances


@dataclass(frozen=True)
class CurveQuery:
    """A failing foreground located against its hue's curve."""

    hue: int
    saturation: float
    value: float
    curve: list[int]

    def distances(self) -> np.ndarray:
        """Squared (saturation, value) distance from the foreground to each curve point."""
        return curve_distances(self.curve, self.saturation, self.value)

    def color_at(self, index: int) -> str:
        return hsv_to_hex(self.hue, index, self.curve[index])


def curve_distances(curve: Sequence[int], saturation: float, value: float) -> np.ndarray:
    """Squared distance from (saturation, value) to every (index, curve[index])."""
    return squared_distances(
        (saturation, value),
        np.arange(len(curve), dtype=float),
        np.asarray(curve, dtype=float),
    )


def nearest_index(curve: Sequence[int], saturation: float, value: float) -> int:
    """Index of the curve point closest to (saturation, value); lowest index on ties."""
    if not curve:
        raise ValueError("curve is empty")
    # argmin returns the first occurrence of the minimum
    return int(np.argmin(curve_distances(curve, saturation, value)))


def fallback_color(background: str) -> str:
    """Maximum-contrast extreme for a background: black on light, white on dark."""
    return BLACK if is_light(background) else WHITE


def locate(foreground: str, background: str, threshold: float, builder: CurveBuilder) -> CurveQuery:
    """Decompose foreground and fetch the curve for its hue.

    Achromatic foregrounds use hue 0. The query carries the quantized hue
    the curve was computed at, so colors rebuilt from it match the curve.
    """
    hsv = hex_to_hsv(foreground)
    key = builder.key_for(background, hsv.h, threshold)
    curve = builder.build(background, hsv.h, threshold)
    return CurveQuery(hue=key.hue, saturation=hsv.s, value=hsv.v, curve=curve)


def nearest_accessible_color(
    foreground: str,
    background: str,
    threshold: float = AA_NORMAL,
    *,
    cache: CurveCache | None = None,
    config: EngineConfig | None = None,
) -> str | None:
    """Find the closest same-hue color that meets the contrast threshold.

    Args:
        foreground: Foreground hex color
        background: Background hex color
        threshold: Contrast ratio to reach
        cache: Optional curve cache
        config: Optional engine config

    Returns:
        None when foreground already meets threshold (no change needed);
        otherwise a hex color that meets it. When no saturation of the hue
        can reach the threshold, the black/white fallback is returned.
    """
    if meets_threshold(foreground, background, threshold):
        return None

    query = locate(foreground, background, threshold, CurveBuilder(config, cache))
    if not query.curve:
        return fallback_color(background)

    return query.color_at(nearest_index(query.curve, query.saturation, query.value))
