# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
WCAG relative luminance and contrast ratio.

Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
Formula: (L1 + 0.05) / (L2 + 0.05), where L1 >= L2 are relative luminances.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from palettescope.schema import ColorLike, RGBColor, WCAGLevel
from palettescope.measure.parse import try_parse


# WCAG 2.x channel linearization uses the older 0.03928 knee
_WCAG_KNEE = 0.03928
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)
_LUMINANCE_OFFSET = 0.05

AAA_NORMAL = 7.0
AA_NORMAL = 4.5
AAA_LARGE = 4.5
AA_LARGE = 3.0

# Above this background luminance, black text wins
TEXT_LUMINANCE_THRESHOLD = 0.179
BLACK = "#000000"
WHITE = "#ffffff"


def relative_luminance_array(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Relative luminance for sRGB values [0,1] of shape (..., 3)."""
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= _WCAG_KNEE,
        srgb / 12.92,
        np.power((np.maximum(srgb, _WCAG_KNEE) + 0.055) / 1.055, 2.4),
    )
    return linear @ _LUMINANCE_WEIGHTS


def _luminance(rgb: RGBColor) -> float:
    value = relative_luminance_array(np.array([rgb.r, rgb.g, rgb.b]))
    return float(np.clip(value, 0.0, 1.0))


def relative_luminance(color: ColorLike) -> float:
    """
    Relative luminance in [0, 1]; 0.0 when the color cannot be parsed.
    """
    rgb = try_parse(color)
    if rgb is None:
        return 0.0
    return _luminance(rgb)


def contrast_ratio_from_luminance(lum_a: float, lum_b: float) -> float:
    """Contrast ratio for two relative luminances, in either order."""
    lighter, darker = (lum_a, lum_b) if lum_a >= lum_b else (lum_b, lum_a)
    return (lighter + _LUMINANCE_OFFSET) / (darker + _LUMINANCE_OFFSET)


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors (1-21, order-independent).

    Returns 0.0 when either color cannot be parsed.
    """
    rgb_a = try_parse(color_a)
    rgb_b = try_parse(color_b)
    if rgb_a is None or rgb_b is None:
        return 0.0
    return contrast_ratio_from_luminance(_luminance(rgb_a), _luminance(rgb_b))


def wcag_level(ratio: float, is_large_text: bool = False) -> WCAGLevel:
    """
    WCAG level reached by a contrast ratio.

    Normal text: 7.0 for AAA, 4.5 for AA.
    Large text:  4.5 for AAA, 3.0 for AA.
    """
    if is_large_text:
        aaa, aa = AAA_LARGE, AA_LARGE
    else:
        aaa, aa = AAA_NORMAL, AA_NORMAL
    if ratio >= aaa:
        return WCAGLevel.AAA
    if ratio >= aa:
        return WCAGLevel.AA
    return WCAGLevel.FAIL


def text_color_for(background: ColorLike) -> str:
    """Pick black or white label text for a swatch background."""
    if relative_luminance(background) > TEXT_LUMINANCE_THRESHOLD:
        return BLACK
    return WHITE
