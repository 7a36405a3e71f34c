# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → CIEXYZ (D65) → CIELAB
Side branch:      sRGB ↔ HSL

References:
- sRGB: IEC 61966-2-1
- CIELAB: CIE 15:2004, with the exact ε = 216/24389 and κ = 24389/27

Array functions take and return arrays of shape (..., 3). The variant
functions (to_rgb, to_hsl, to_lab, format_hex) take any color object or
color string and return the schema types.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from palettescope.schema.color import ColorLike, HSLColor, LABColor, RGBColor


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ CIEXYZ
# =============================================================================

# Linear sRGB to XYZ, D65 reference white
_SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)

# D65 white as the matrix sees it, so sRGB white lands on a = b = 0 exactly
D65_WHITE = _SRGB_TO_XYZ.sum(axis=1)

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB to CIEXYZ (Y of white = 1)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIEXYZ to linear RGB (unclipped)."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_SRGB)


# =============================================================================
# CIEXYZ ↔ CIELAB
# =============================================================================


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIEXYZ to CIELAB under D65.

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100]
    """
    ratio = np.asarray(xyz, dtype=np.float64) / D65_WHITE
    f = np.where(
        ratio > _EPSILON,
        np.cbrt(ratio),
        (_KAPPA * ratio + 16.0) / 116.0,
    )
    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIELAB (D65) to CIEXYZ."""
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    fy = (L + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    x = np.where(fx ** 3 > _EPSILON, fx ** 3, (116.0 * fx - 16.0) / _KAPPA)
    y = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    z = np.where(fz ** 3 > _EPSILON, fz ** 3, (116.0 * fz - 16.0) / _KAPPA)
    return np.stack([x, y, z], axis=-1) * D65_WHITE


# =============================================================================
# Convenience: sRGB ↔ CIELAB (full chain)
# =============================================================================


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIELAB.

    Full chain: sRGB → Linear RGB → XYZ → Lab
    """
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELAB to sRGB [0,1].

    Full chain: Lab → XYZ → Linear RGB → sRGB
    Values are clipped to [0, 1] (gamut mapped)
    """
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB values [0,255] to CIELAB."""
    return srgb_to_lab(np.asarray(pixels).astype(np.float64) / 255.0)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3) with (H, S, L):
        - H: Hue in degrees [0, 360), 0 for grays
        - S: Saturation in percent [0, 100]
        - L: Lightness in percent [0, 100]
    """
    rgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    c_max = rgb.max(axis=-1)
    c_min = rgb.min(axis=-1)
    delta = c_max - c_min
    light = (c_max + c_min) / 2.0

    achromatic = delta == 0
    safe_delta = np.where(achromatic, 1.0, delta)

    hue = np.select(
        [c_max == r, c_max == g],
        [((g - b) / safe_delta) % 6.0, (b - r) / safe_delta + 2.0],
        (r - g) / safe_delta + 4.0,
    )
    hue = np.where(achromatic, 0.0, hue * 60.0) % 360.0

    denom = 1.0 - np.abs(2.0 * light - 1.0)
    sat = np.where(achromatic, 0.0, delta / np.where(denom == 0, 1.0, denom))

    return np.stack(
        [hue, np.clip(sat * 100.0, 0.0, 100.0), np.clip(light * 100.0, 0.0, 100.0)],
        axis=-1,
    )


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL (H degrees, S and L in percent) to sRGB [0,1].
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0] % 360.0
    s = hsl[..., 1] / 100.0
    l = hsl[..., 2] / 100.0

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    h_prime = h / 60.0
    x = chroma * (1.0 - np.abs(h_prime % 2.0 - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(chroma)

    sector = np.floor(h_prime) % 6
    conditions = [sector == k for k in range(5)]
    r1 = np.select(conditions, [chroma, x, zero, zero, x], chroma)
    g1 = np.select(conditions, [x, chroma, chroma, x, zero], zero)
    b1 = np.select(conditions, [zero, zero, x, chroma, chroma], x)

    return np.clip(np.stack([r1 + m, g1 + m, b1 + m], axis=-1), 0.0, 1.0)


# =============================================================================
# Color variants
# =============================================================================


def _require_finite(values: NDArray[np.float64], original: object) -> None:
    if not np.isfinite(values).all():
        # Import here to avoid circular imports
        from palettescope.measure.parse import ColorParseError
        raise ColorParseError(original, "conversion produced non-finite channels")


def _rgb_from_array(srgb: NDArray[np.float64], original: object) -> RGBColor:
    _require_finite(srgb, original)
    r, g, b = (float(v) for v in np.clip(srgb, 0.0, 1.0))
    return RGBColor(r=r, g=g, b=b)


def _rgb_array(color: RGBColor) -> NDArray[np.float64]:
    return np.array([color.r, color.g, color.b], dtype=np.float64)


def to_rgb(color: ColorLike) -> RGBColor:
    """
    Convert any color (object or string) to RGBColor.

    Raises:
        ColorParseError: If a string does not describe a color, or a color
            object converts to non-finite channels (e.g. a NaN Lab axis)
    """
    if isinstance(color, RGBColor):
        return color
    if isinstance(color, HSLColor):
        return _rgb_from_array(hsl_to_srgb(np.array([color.h, color.s, color.l])), color)
    if isinstance(color, LABColor):
        # Overflow must be caught before gamma encoding clips inf to 1
        with np.errstate(over="ignore", invalid="ignore"):
            linear = xyz_to_linear_rgb(lab_to_xyz(np.array([color.l, color.a, color.b])))
        _require_finite(linear, color)
        return _rgb_from_array(linear_to_srgb(linear), color)
    # Import here to avoid circular imports
    from palettescope.measure.parse import parse
    return parse(color)


def to_rgb255(color: ColorLike) -> tuple[int, int, int]:
    """8-bit (0-255) channels for display."""
    return to_rgb(color).to_uint8()


def to_hsl(color: ColorLike) -> HSLColor:
    """Convert any color to HSLColor."""
    if isinstance(color, HSLColor):
        return color
    h, s, l = (float(v) for v in srgb_to_hsl(_rgb_array(to_rgb(color))))
    if h >= 360.0:
        h = 0.0
    return HSLColor(h=h, s=s, l=l)


def to_lab(color: ColorLike) -> LABColor:
    """Convert any color to LABColor (D65)."""
    if isinstance(color, LABColor):
        return color
    L, a, b = (float(v) for v in srgb_to_lab(_rgb_array(to_rgb(color))))
    return LABColor(l=min(100.0, max(0.0, L)), a=a, b=b)


def format_hex(color: ColorLike) -> str:
    """
    Canonical lowercase ``#rrggbb`` form of a color.

    Channels are clamped to [0, 1] and rounded half-up to 8 bits, so
    format_hex(parse(x)) == x.lower() for any ``#rrggbb`` string.
    """
    return to_rgb(color).hex


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward (like JS Math.round)."""
    return int(math.floor(value + 0.5))


def color_info(color: ColorLike) -> Optional[dict]:
    """
    Display breakdown of a color in every supported space.

    Returns:
        {"hex": "#rrggbb", "rgb": {r, g, b}, "hsl": {h, s, l}, "lab": {l, a, b}}
        with integer components, or None if the color cannot be parsed.
    """
    from palettescope.measure.parse import try_parse
    rgb = try_parse(color)
    if rgb is None:
        return None

    r, g, b = rgb.to_uint8()
    hsl = to_hsl(rgb)
    lab = to_lab(rgb)
    return {
        "hex": rgb.hex,
        "rgb": {"r": r, "g": g, "b": b},
        "hsl": {
            "h": round_half_up(hsl.h) % 360,
            "s": round_half_up(hsl.s),
            "l": round_half_up(hsl.l),
        },
        "lab": {
            "l": round_half_up(lab.l),
            "a": round_half_up(lab.a),
            "b": round_half_up(lab.b),
        },
    }
