"""Curve caching for the accessibility engine.

Curves are expensive (up to 101 boundary searches) and deterministic, so they
are memoized per (background, quantized hue, threshold). Caches are explicit
objects owned by the caller:
- MemoryCurveCache: bounded LRU, thread-safe
- NullCurveCache: no-op, for uncached computation and tests
"""

from huecurve.core.caching.backends.memory import MemoryCurveCache
from huecurve.core.caching.backends.null import NullCurveCache
from huecurve.core.caching.models import CacheStats, CurveKey
from huecurve.core.caching.protocols import CurveCache

__all__ = [
    # Core
    "CacheStats",
    "CurveCache",
    "CurveKey",
    # Backends
    "MemoryCurveCache",
    "NullCurveCache",
]
