"""Configuration models for huecurve."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from huecurve.core.logging.models import LogLevel


class SearchStrategy(str, Enum):
    """How the brightness boundary is located at each saturation."""

    BINARY = "binary"
    LINEAR = "linear"


class EngineConfig(BaseModel):
    """Accessibility engine tuning."""

    hue_step: int = Field(
        default=1,
        ge=1,
        le=360,
        description="Hue quantization step in degrees for curve cache keys",
    )

    cache_max_entries: int | None = Field(
        default=512,
        gt=0,
        description="Maximum cached curves before LRU eviction (None = unbounded)",
    )

    search_strategy: SearchStrategy = Field(
        default=SearchStrategy.BINARY,
        description="Boundary search: 'binary' (bisection) or 'linear' (seeded scan)",
    )

    linear_backtrack: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Linear scan starts this many units below the previous saturation's result",
    )

    default_threshold: float = Field(
        default=4.5, gt=0.0, description="Contrast threshold used when none is given"
    )

    model_config = ConfigDict(frozen=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.WARNING, description="Root log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Text log format (ignored when structured)",
    )
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (None = stderr)")


class AppConfig(BaseModel):
    """Top-level application configuration."""

    engine: EngineConfig = Field(default_factory=EngineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
