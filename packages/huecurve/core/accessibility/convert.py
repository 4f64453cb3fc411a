"""Hex / RGB / HSV conversion helpers.

Hex strings are accepted as ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (the ``#``
is optional, case-insensitive) and always produced as lowercase ``#rrggbb``
(``#rrggbbaa`` for the RGBA helpers).
"""

from __future__ import annotations

import colorsys
import re

from huecurve.core.accessibility.models import HSV, RGB, RGBA
from huecurve.core.utils.math import clamp, round_half_up

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class ColorFormatError(ValueError):
    """Raised when a string cannot be parsed as a hex color."""


def _split_hex(value: str) -> tuple[int, int, int, int]:
    if not isinstance(value, str):
        raise ColorFormatError(f"Color must be a hex string: {value!r}")
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise ColorFormatError(f"Invalid hex color: {value!r}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        int(digits[6:8], 16),
    )


def _channel(unit: float) -> int:
    return clamp(round_half_up(unit * 255.0), 0, 255)


def parse_hex(value: str) -> RGB:
    """Parse a hex color string (alpha, if any, is dropped).

    Raises:
        ColorFormatError: If value is not a hex color
    """
    r, g, b, _ = _split_hex(value)
    return RGB(r=r, g=g, b=b)


def is_valid_hex(value: str) -> bool:
    """Check whether value parses as a hex color."""
    try:
        _split_hex(value)
    except ColorFormatError:
        return False
    return True


def normalize_hex(value: str) -> str:
    """Return value as lowercase ``#rrggbb``, or unchanged if it does not parse."""
    try:
        return rgb_to_hex(*_split_hex(value)[:3])
    except ColorFormatError:
        return value


def hex_to_rgb(value: str) -> RGB:
    return parse_hex(value)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{clamp(int(r), 0, 255):02x}{clamp(int(g), 0, 255):02x}{clamp(int(b), 0, 255):02x}"


def hex_to_hsv(value: str) -> HSV:
    """Convert a hex color to HSV (hue 0-360, saturation and value 0-100).

    Achromatic colors have no defined hue; it is reported as 0.
    """
    r, g, b = parse_hex(value).as_unit()
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    hue = (h * 360.0) % 360.0 if s > 0 else 0.0
    return HSV(h=hue, s=s * 100.0, v=v * 100.0)


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Convert HSV components (hue degrees, saturation and value 0-100) to hex."""
    r, g, b = colorsys.hsv_to_rgb(
        (h % 360.0) / 360.0,
        clamp(s, 0.0, 100.0) / 100.0,
        clamp(v, 0.0, 100.0) / 100.0,
    )
    return rgb_to_hex(_channel(r), _channel(g), _channel(b))


def hex_to_rgba(value: str) -> RGBA:
    """Parse a hex color including alpha (``#rrggbbaa``; opaque otherwise)."""
    r, g, b, a = _split_hex(value)
    return RGBA(r=r, g=g, b=b, a=a / 255.0)


def rgba_to_hex(r: int, g: int, b: int, a: float) -> str:
    """Format an RGBA color as ``#rrggbbaa``."""
    return f"{rgb_to_hex(r, g, b)}{_channel(clamp(a, 0.0, 1.0)):02x}"
