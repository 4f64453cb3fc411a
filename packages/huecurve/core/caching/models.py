"""Models for the curve cache.

Provides the cache key and the statistics snapshot.
"""

from pydantic import BaseModel, ConfigDict, Field


class CurveKey(BaseModel):
    """
    Stable identifier for a cached accessibility curve.

    A curve is a pure function of (background, hue, threshold); the hue is
    stored already quantized so near-identical queries share one entry.
    """

    background: str = Field(description="Normalized background hex (#rrggbb)")
    hue: int = Field(ge=0, lt=360, description="Quantized hue in degrees")
    threshold: float = Field(gt=0.0, description="Contrast ratio threshold")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.background}:{self.hue}:{self.threshold:g}"


class CacheStats(BaseModel):
    """Point-in-time cache counters."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    max_entries: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups served from cache (0.0 when unused)."""
        total = self.hits + self.misses
        return self.hits / total if total else 0.0
