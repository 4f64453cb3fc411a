"""Tests for the AccessibilityEngine facade."""

from __future__ import annotations

from huecurve.core.accessibility.curve import build_curve
from huecurve.core.accessibility.engine import AccessibilityEngine
from huecurve.core.accessibility.nearest import nearest_accessible_color
from huecurve.core.accessibility.sampling import nearest_accessible_colors
from huecurve.core.caching import MemoryCurveCache, NullCurveCache
from huecurve.core.config.models import AppConfig, EngineConfig, SearchStrategy


class TestConstruction:
    """Tests for engine setup."""

    def test_default_cache_is_bounded_memory_cache(self):
        engine = AccessibilityEngine()
        assert isinstance(engine.cache, MemoryCurveCache)
        assert engine.cache.max_entries == EngineConfig().cache_max_entries

    def test_cache_size_from_config(self):
        engine = AccessibilityEngine(EngineConfig(cache_max_entries=3))
        assert engine.cache_stats().max_entries == 3

    def test_explicit_cache_is_used(self):
        cache = NullCurveCache()
        engine = AccessibilityEngine(cache=cache)
        assert engine.cache is cache

    def test_from_app_config(self):
        app = AppConfig(engine=EngineConfig(search_strategy=SearchStrategy.LINEAR, hue_step=5))
        engine = AccessibilityEngine.from_app_config(app)
        assert engine.config.search_strategy is SearchStrategy.LINEAR
        assert engine.config.hue_step == 5


class TestOperations:
    """Engine methods agree with the module-level functions."""

    def test_contrast_and_threshold(self, engine: AccessibilityEngine):
        assert engine.contrast_ratio("#000000", "#000000") == 1.0
        assert engine.meets_threshold("#000000", "#ffffff")
        assert not engine.meets_threshold("#777777", "#ffffff")

    def test_default_threshold_from_config(self):
        engine = AccessibilityEngine(EngineConfig(default_threshold=3.0))
        assert engine.meets_threshold("#777777", "#ffffff")
        assert engine.nearest_accessible_color("#777777", "#ffffff") is None
        assert not engine.meets_threshold("#777777", "#ffffff", 4.5)

    def test_build_curve(self, engine: AccessibilityEngine):
        assert engine.build_curve("#ffffff", 217, 4.5) == build_curve("#ffffff", 217, 4.5)

    def test_nearest_accessible_color(self, engine: AccessibilityEngine):
        assert engine.nearest_accessible_color("#3b82f6", "#ffffff") == nearest_accessible_color(
            "#3b82f6", "#ffffff"
        )

    def test_nearest_accessible_colors(self, engine: AccessibilityEngine):
        assert engine.nearest_accessible_colors(
            "#3b82f6", "#ffffff", 5, spread=10
        ) == nearest_accessible_colors("#3b82f6", "#ffffff", 5, spread=10)


class TestCaching:
    """Tests for the engine-owned cache."""

    def test_repeated_queries_hit_cache(self, engine: AccessibilityEngine):
        engine.nearest_accessible_color("#3b82f6", "#ffffff")
        engine.nearest_accessible_colors("#3b82f6", "#ffffff", 3)
        engine.build_curve("#ffffff", 217.3, 4.5)

        stats = engine.cache_stats()
        assert stats.misses == 1
        assert stats.hits == 2
        assert stats.size == 1
        assert stats.hit_rate == 2 / 3

    def test_clear_cache(self, engine: AccessibilityEngine):
        engine.build_curve("#ffffff", 217, 4.5)
        engine.clear_cache()
        assert engine.cache_stats().size == 0

    def test_passing_foreground_skips_curve(self, engine: AccessibilityEngine):
        engine.nearest_accessible_color("#000000", "#ffffff")
        assert engine.cache_stats().misses == 0
