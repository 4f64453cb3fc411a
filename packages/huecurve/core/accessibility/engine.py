"""Accessibility engine facade.

Bundles an EngineConfig with an owned curve cache so callers (UI code, the
CLI) hold one object instead of threading ``cache=`` and ``config=`` through
every call.
"""

from __future__ import annotations

import logging

from huecurve.core.accessibility.contrast import contrast_ratio, meets_threshold
from huecurve.core.accessibility.curve import CurveBuilder
from huecurve.core.accessibility.nearest import nearest_accessible_color
from huecurve.core.accessibility.sampling import nearest_accessible_colors
from huecurve.core.caching import CacheStats, CurveCache, MemoryCurveCache
from huecurve.core.config.models import AppConfig, EngineConfig

logger = logging.getLogger(__name__)


class AccessibilityEngine:
    """Accessible-color adjustment with an owned, bounded curve cache.

    Thresholds default to ``config.default_threshold`` when omitted.

    Example:
        >>> engine = AccessibilityEngine()
        >>> engine.nearest_accessible_color("#000000", "#ffffff") is None
        True
    """

    def __init__(
        self, config: EngineConfig | None = None, cache: CurveCache | None = None
    ) -> None:
        self.config = config or EngineConfig()
        if cache is None:
            cache = MemoryCurveCache(max_entries=self.config.cache_max_entries)
        self.cache = cache
        self._builder = CurveBuilder(self.config, self.cache)
        logger.debug(
            "AccessibilityEngine ready (strategy=%s, hue_step=%d, cache=%s)",
            self.config.search_strategy.value,
            self.config.hue_step,
            type(self.cache).__name__,
        )

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> AccessibilityEngine:
        return cls(config=app_config.engine)

    def _threshold(self, threshold: float | None) -> float:
        return self.config.default_threshold if threshold is None else threshold

    def contrast_ratio(self, color_a: str, color_b: str) -> float:
        return contrast_ratio(color_a, color_b)

    def meets_threshold(
        self, foreground: str, background: str, threshold: float | None = None
    ) -> bool:
        return meets_threshold(foreground, background, self._threshold(threshold))

    def build_curve(self, background: str, hue: float, threshold: float | None = None) -> list[int]:
        return self._builder.build(background, hue, self._threshold(threshold))

    def nearest_accessible_color(
        self, foreground: str, background: str, threshold: float | None = None
    ) -> str | None:
        return nearest_accessible_color(
            foreground,
            background,
            self._threshold(threshold),
            cache=self.cache,
            config=self.config,
        )

    def nearest_accessible_colors(
        self,
        foreground: str,
        background: str,
        count: int,
        threshold: float | None = None,
        spread: int = 0,
    ) -> list[str]:
        return nearest_accessible_colors(
            foreground,
            background,
            count,
            self._threshold(threshold),
            spread,
            cache=self.cache,
            config=self.config,
        )

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()
