"""Configuration models and loaders."""

from huecurve.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from huecurve.core.config.models import AppConfig, EngineConfig, LoggingConfig, SearchStrategy

__all__ = [
    "AppConfig",
    "EngineConfig",
    "LoggingConfig",
    "SearchStrategy",
    "configure_logging_from_config",
    "detect_format",
    "load_app_config",
    "load_config",
]
