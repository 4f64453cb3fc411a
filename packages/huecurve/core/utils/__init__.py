"""Shared utilities for huecurve."""

from huecurve.core.utils.json import read_json, write_json
from huecurve.core.utils.math import clamp, round_half_up, squared_distances

__all__ = [
    "clamp",
    "read_json",
    "round_half_up",
    "squared_distances",
    "write_json",
]
