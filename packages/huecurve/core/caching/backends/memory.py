"""In-process LRU cache for accessibility curves."""

from collections import OrderedDict
import logging
import threading

from huecurve.core.caching.models import CacheStats, CurveKey

logger = logging.getLogger(__name__)


class MemoryCurveCache:
    """
    Thread-safe in-memory curve cache with least-recently-used eviction.

    The lock only protects the mapping; curve computation happens outside it.
    """

    def __init__(self, max_entries: int | None = 512) -> None:
        """
        Initialize memory cache.

        Args:
            max_entries: Capacity before the least recently used curve is
                         evicted. None disables eviction (unbounded).
        """
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive or None, got {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[CurveKey, list[int]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get(self, key: CurveKey) -> list[int] | None:
        """Return cached curve and mark it most recently used, or None on miss."""
        with self._lock:
            curve = self._entries.get(key)
            if curve is None:
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return curve

    def put(self, key: CurveKey, curve: list[int]) -> None:
        """Store curve, evicting the least recently used entries beyond capacity."""
        with self._lock:
            self._entries[key] = curve
            self._entries.move_to_end(key)
            if self._max_entries is None:
                return
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug("Evicted curve %s", evicted)

    def clear(self) -> None:
        """Drop all entries (counters are kept)."""
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                max_entries=self._max_entries,
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
