"""Shared pytest fixtures for huecurve tests."""

from __future__ import annotations

import pytest

from huecurve.core.accessibility.engine import AccessibilityEngine
from huecurve.core.caching import MemoryCurveCache
from huecurve.core.config.models import EngineConfig, SearchStrategy

# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def curve_cache() -> MemoryCurveCache:
    """Fresh bounded curve cache."""
    return MemoryCurveCache(max_entries=16)


@pytest.fixture
def linear_config() -> EngineConfig:
    """Engine config using the seeded linear scan."""
    return EngineConfig(search_strategy=SearchStrategy.LINEAR)


@pytest.fixture
def engine(curve_cache: MemoryCurveCache) -> AccessibilityEngine:
    """Engine with default config and an inspectable cache."""
    return AccessibilityEngine(cache=curve_cache)
