"""Accessibility curve construction.

A curve maps saturation (list index, 0-100) to the brightness at which a
color of the given hue crosses the contrast threshold against a background.
For light backgrounds everything above the curve is too light; for dark
backgrounds everything below it is too dark.

The sweep stops at the first saturation without an accessible brightness, so
``len(curve) <= 101`` and an empty curve means the hue has no accessible
color at all. Against light backgrounds the stop condition (black fails) is
identical at every saturation; against dark backgrounds higher saturations
only darken the brightest color, so later saturations are not revisited.
"""

from __future__ import annotations

import logging

from huecurve.core.accessibility.contrast import is_light
from huecurve.core.accessibility.convert import normalize_hex
from huecurve.core.accessibility.search import (
    MIN_VALUE,
    find_threshold,
    find_threshold_linear,
)
from huecurve.core.caching import CurveCache, CurveKey, NullCurveCache
from huecurve.core.config.models import EngineConfig, SearchStrategy
from huecurve.core.utils.logging import log_performance
from huecurve.core.utils.math import round_half_up

logger = logging.getLogger(__name__)

MAX_SATURATION = 100


def quantize_hue(hue: float, step: int = 1) -> int:
    """Round hue to the nearest multiple of ``step`` degrees, wrapped to [0, 360).

    Near-identical hues (e.g. while dragging a color picker) share one cached
    curve at the cost of up to ``step / 2`` degrees of drift.

    Example:
        >>> quantize_hue(10.5)
        11
        >>> quantize_hue(359.6)
        0
        >>> quantize_hue(44.0, step=15)
        45
    """
    return (round_half_up(hue / step) * step) % 360


class CurveBuilder:
    """Builds and memoizes accessibility curves.

    Args:
        config: Engine tuning (hue step, search strategy)
        cache: Curve cache; a NullCurveCache (no memoization) when omitted
    """

    def __init__(
        self, config: EngineConfig | None = None, cache: CurveCache | None = None
    ) -> None:
        self.config = config or EngineConfig()
        self.cache: CurveCache = cache if cache is not None else NullCurveCache()

    def key_for(self, background: str, hue: float, threshold: float) -> CurveKey:
        return CurveKey(
            background=normalize_hex(background),
            hue=quantize_hue(hue, self.config.hue_step),
            threshold=float(threshold),
        )

    def build(self, background: str, hue: float, threshold: float) -> list[int]:
        """Return the curve for (background, hue, threshold), computing it on a miss.

        The returned list may be shared with the cache and must not be mutated.
        """
        key = self.key_for(background, hue, threshold)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Curve cache hit: %s", key)
            return cached

        logger.debug("Curve cache miss: %s", key)
        curve = self._compute(key)
        self.cache.put(key, curve)
        return curve

    @log_performance
    def _compute(self, key: CurveKey) -> list[int]:
        background_is_light = is_light(key.background)
        linear = self.config.search_strategy is SearchStrategy.LINEAR

        curve: list[int] = []
        for saturation in range(MAX_SATURATION + 1):
            if linear:
                start = MIN_VALUE
                if curve:
                    start = max(MIN_VALUE, curve[-1] - self.config.linear_backtrack)
                value = find_threshold_linear(
                    key.background,
                    key.hue,
                    saturation,
                    key.threshold,
                    background_is_light,
                    start=start,
                )
            else:
                value = find_threshold(
                    key.background,
                    key.hue,
                    saturation,
                    key.threshold,
                    background_is_light,
                )

            if value is None:
                break
            curve.append(value)

        if not curve:
            logger.debug("No accessible color for %s", key)
        return curve


def build_curve(
    background: str,
    hue: float,
    threshold: float,
    *,
    cache: CurveCache | None = None,
    config: EngineConfig | None = None,
) -> list[int]:
    """Build the accessibility curve for a background, hue and threshold.

    Args:
        background: Background hex color
        hue: Hue in degrees (quantized per ``config.hue_step``)
        threshold: Contrast ratio to reach
        cache: Optional curve cache to read from and store into
        config: Optional engine config

    Returns:
        Brightness boundary per saturation, at most 101 entries
    """
    return CurveBuilder(config, cache).build(background, hue, threshold)
