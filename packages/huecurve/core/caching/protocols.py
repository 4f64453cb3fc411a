"""Protocol for curve cache backends."""

from typing import Protocol

from .models import CacheStats, CurveKey


class CurveCache(Protocol):
    """
    Protocol for accessibility curve caches.

    Implementations must be safe to call from several threads. Two threads
    computing the same key concurrently is harmless: curves are deterministic,
    so the last store wins with an identical value.
    """

    def get(self, key: CurveKey) -> list[int] | None:
        """
        Return the cached curve for key.

        Args:
            key: Curve key

        Returns:
            Cached curve (possibly empty), or None on miss
        """
        ...

    def put(self, key: CurveKey, curve: list[int]) -> None:
        """
        Store a curve.

        Args:
            key: Curve key
            curve: Computed curve
        """
        ...

    def clear(self) -> None:
        """Drop all entries."""
        ...

    def stats(self) -> CacheStats:
        """Return current counters."""
        ...

    def __len__(self) -> int: ...
