"""Accessible-color adjustment engine.

Given a foreground that fails a WCAG contrast threshold against a
background, find nearby colors of the same hue that pass:

- contrast: WCAG luminance and contrast ratio
- search: brightness boundary at a fixed hue/saturation
- curve: per-hue boundary across saturations, memoized
- nearest / sampling: closest point(s) on the curve
- engine: config + owned cache facade
"""

from huecurve.core.accessibility.contrast import (
    AA_LARGE,
    AA_NORMAL,
    contrast_color,
    contrast_ratio,
    is_light,
    meets_threshold,
    relative_luminance,
)
from huecurve.core.accessibility.convert import (
    ColorFormatError,
    hex_to_hsv,
    hex_to_rgb,
    hex_to_rgba,
    hsv_to_hex,
    is_valid_hex,
    normalize_hex,
    parse_hex,
    rgb_to_hex,
    rgba_to_hex,
)
from huecurve.core.accessibility.curve import CurveBuilder, build_curve, quantize_hue
from huecurve.core.accessibility.engine import AccessibilityEngine
from huecurve.core.accessibility.models import HSV, RGB, RGBA
from huecurve.core.accessibility.nearest import fallback_color, nearest_accessible_color
from huecurve.core.accessibility.sampling import nearest_accessible_colors

__all__ = [
    # Constants
    "AA_LARGE",
    "AA_NORMAL",
    # Contrast
    "contrast_color",
    "contrast_ratio",
    "is_light",
    "meets_threshold",
    "relative_luminance",
    # Conversion
    "ColorFormatError",
    "HSV",
    "RGB",
    "RGBA",
    "hex_to_hsv",
    "hex_to_rgb",
    "hex_to_rgba",
    "hsv_to_hex",
    "is_valid_hex",
    "normalize_hex",
    "parse_hex",
    "rgb_to_hex",
    "rgba_to_hex",
    # Curves and suggestions
    "AccessibilityEngine",
    "CurveBuilder",
    "build_curve",
    "fallback_color",
    "nearest_accessible_color",
    "nearest_accessible_colors",
    "quantize_hue",
]
