"""WCAG contrast evaluation.

Implements WCAG 2.x relative luminance and contrast ratio for hex colors.
Pure functions, no caching: each evaluation is a handful of float ops.
"""

from __future__ import annotations

from huecurve.core.accessibility.convert import ColorFormatError, parse_hex

# WCAG AA minimum contrast for normal text
AA_NORMAL = 4.5
# WCAG AA minimum contrast for large text / headings
AA_LARGE = 3.0

# Backgrounds above this luminance need dark foregrounds
LIGHT_LUMINANCE_CUTOFF = 0.5

BLACK = "#000000"
WHITE = "#ffffff"


def _linear_channel(c: float) -> float:
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """Relative luminance in [0, 1] of a hex color."""
    r, g, b = parse_hex(color).as_unit()
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio between two colors, in [1, 21]. Symmetric."""
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_threshold(foreground: str, background: str, threshold: float = AA_NORMAL) -> bool:
    """Check whether foreground/background reach the contrast threshold."""
    return contrast_ratio(foreground, background) >= threshold


def is_light(color: str) -> bool:
    """Whether a background is light enough to need dark foregrounds."""
    return relative_luminance(color) > LIGHT_LUMINANCE_CUTOFF


def contrast_color(color: str) -> str:
    """Pick white or black text for a surface color.

    White for surfaces with relative luminance below 0.5, black otherwise.
    Unparseable input gets black.
    """
    try:
        return WHITE if relative_luminance(color) < LIGHT_LUMINANCE_CUTOFF else BLACK
    except ColorFormatError:
        return BLACK
