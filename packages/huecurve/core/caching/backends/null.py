"""No-op curve cache.

Always reports a miss and discards all stores.
"""

import threading

from huecurve.core.caching.models import CacheStats, CurveKey


class NullCurveCache:
    """
    No-op cache: every lookup misses, every store is discarded.

    Used when callers do not supply a cache, so curves are recomputed on
    every call without any hidden shared state.
    """

    def __init__(self) -> None:
        self._misses = 0
        self._lock = threading.Lock()

    def get(self, key: CurveKey) -> list[int] | None:
        """Always returns None."""
        with self._lock:
            self._misses += 1
        return None

    def put(self, key: CurveKey, curve: list[int]) -> None:
        """Discard."""

    def clear(self) -> None:
        """No-op."""

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(misses=self._misses, max_entries=0)

    def __len__(self) -> int:
        return 0
