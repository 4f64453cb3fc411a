"""Structured logging models."""

from huecurve.core.logging.models import LogEntry, LogLevel

__all__ = ["LogEntry", "LogLevel"]
