# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (CIEDE2000).

Reference:
    Sharma, G., Wu, W., & Dalal, E. N. (2005). The CIEDE2000 color-difference
    formula: Implementation notes, supplementary test data, and mathematical
    observations. Color Research & Application, 30(1), 21-30.

Reference thresholds (CIEDE2000, 0-100 scale):
- ΔE < 2:   indistinguishable at a glance
- ΔE 2-5:   poor, easily confused in a chart
- ΔE 5-10:  good
- ΔE >= 10: excellent
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from palettescope.schema import ColorLike, Distinguishability
from palettescope.measure.colorspace import srgb_to_lab
from palettescope.measure.parse import try_parse


# Classification boundaries (fixed, calibrated against CIEDE2000)
EXCELLENT_DELTA_E = 10.0
GOOD_DELTA_E = 5.0
POOR_DELTA_E = 2.0

_POW7_25 = 25.0 ** 7


def delta_e_ciede2000(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    *,
    k_L: float = 1.0,
    k_C: float = 1.0,
    k_H: float = 1.0,
) -> NDArray[np.float64]:
    """
    CIEDE2000 color difference between CIELAB colors.

    Vectorized: lab1 and lab2 are arrays of shape (..., 3) that broadcast
    against each other.

    Args:
        lab1: First color(s) as (L, a, b)
        lab2: Second color(s) as (L, a, b)
        k_L, k_C, k_H: Parametric weighting factors (1 for reference conditions)

    Returns:
        Array of shape (...) with ΔE00 values
    """
    lab1 = np.asarray(lab1, dtype=np.float64)
    lab2 = np.asarray(lab2, dtype=np.float64)
    L1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    L2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    # Step 1: a' compensates for the non-uniformity of neutral colors
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + _POW7_25)))

    a1_p = (1.0 + G) * a1
    a2_p = (1.0 + G) * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)

    # Hue angles in degrees [0, 360); atan2(0, 0) is 0 by convention
    h1_p = np.degrees(np.arctan2(b1, a1_p)) % 360.0
    h2_p = np.degrees(np.arctan2(b2, a2_p)) % 360.0

    # Step 2: ΔL', ΔC', ΔH'
    dL_p = L2 - L1
    dC_p = C2_p - C1_p

    chroma_product = C1_p * C2_p
    achromatic = chroma_product == 0
    dh = h2_p - h1_p
    dh_p = np.where(
        achromatic,
        0.0,
        np.where(
            np.abs(dh) <= 180.0,
            dh,
            np.where(dh > 180.0, dh - 360.0, dh + 360.0),
        ),
    )
    dH_p = 2.0 * np.sqrt(chroma_product) * np.sin(np.radians(dh_p) / 2.0)

    # Step 3: weighting functions
    L_bar_p = (L1 + L2) / 2.0
    C_bar_p = (C1_p + C2_p) / 2.0

    h_sum = h1_p + h2_p
    h_bar_p = np.where(
        achromatic,
        h_sum,
        np.where(
            np.abs(dh) <= 180.0,
            h_sum / 2.0,
            np.where(h_sum < 360.0, (h_sum + 360.0) / 2.0, (h_sum - 360.0) / 2.0),
        ),
    )

    T = (
        1.0
        - 0.17 * np.cos(np.radians(h_bar_p - 30.0))
        + 0.24 * np.cos(np.radians(2.0 * h_bar_p))
        + 0.32 * np.cos(np.radians(3.0 * h_bar_p + 6.0))
        - 0.20 * np.cos(np.radians(4.0 * h_bar_p - 63.0))
    )

    L_50_sq = (L_bar_p - 50.0) ** 2
    S_L = 1.0 + (0.015 * L_50_sq) / np.sqrt(20.0 + L_50_sq)
    S_C = 1.0 + 0.045 * C_bar_p
    S_H = 1.0 + 0.015 * C_bar_p * T

    # Rotation term for the blue region
    d_theta = 30.0 * np.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    C_bar_p_7 = C_bar_p ** 7
    R_C = 2.0 * np.sqrt(C_bar_p_7 / (C_bar_p_7 + _POW7_25))
    R_T = -R_C * np.sin(np.radians(2.0 * d_theta))

    term_L = dL_p / (k_L * S_L)
    term_C = dC_p / (k_C * S_C)
    term_H = dH_p / (k_H * S_H)

    return np.sqrt(np.maximum(
        term_L ** 2 + term_C ** 2 + term_H ** 2 + R_T * term_C * term_H,
        0.0,
    ))


def delta_e(color_a: ColorLike, color_b: ColorLike) -> float:
    """
    CIEDE2000 difference between two colors.

    Args:
        color_a: Color string or color object
        color_b: Color string or color object

    Returns:
        ΔE00 >= 0. Returns 0.0 when either color cannot be parsed, so a bad
        entry reads as "as similar as possible" rather than raising.
    """
    rgb_a = try_parse(color_a)
    rgb_b = try_parse(color_b)
    if rgb_a is None or rgb_b is None:
        return 0.0

    srgb = np.array(
        [[rgb_a.r, rgb_a.g, rgb_a.b], [rgb_b.r, rgb_b.g, rgb_b.b]],
        dtype=np.float64,
    )
    lab = srgb_to_lab(srgb)
    return float(delta_e_ciede2000(lab[0], lab[1]))


def delta_e_matrix(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    All-pairs CIEDE2000 for an (N, 3) array of Lab colors.

    Returns:
        Symmetric (N, N) array with zeros on the diagonal
    """
    lab = np.asarray(lab, dtype=np.float64).reshape(-1, 3)
    return delta_e_ciede2000(lab[:, np.newaxis, :], lab[np.newaxis, :, :])


def classify_distinguishability(delta_e_value: float) -> Distinguishability:
    """
    Bucket a ΔE value.

    Boundaries: >= 10 excellent, >= 5 good, >= 2 poor, otherwise
    indistinguishable.
    """
    if delta_e_value >= EXCELLENT_DELTA_E:
        return Distinguishability.EXCELLENT
    if delta_e_value >= GOOD_DELTA_E:
        return Distinguishability.GOOD
    if delta_e_value >= POOR_DELTA_E:
        return Distinguishability.POOR
    return Distinguishability.INDISTINGUISHABLE
