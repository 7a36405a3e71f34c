# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation.

Complete dichromacy (severity 1.0) for each cone type, using the
Machado, Oliveira & Fernandes (2009) matrices. The matrices operate on
linear RGB, so the chain is:

    sRGB → Linear RGB → deficiency matrix → Linear RGB (clipped) → sRGB

Reference:
    Machado, G. M., Oliveira, M. M., & Fernandes, L. A. F. (2009).
    A physiologically-based model for simulation of color vision deficiency.
    IEEE TVCG, 15(6), 1291-1298.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from palettescope.schema import ColorLike, CVDType, RGBColor
from palettescope.measure.colorspace import linear_to_srgb, srgb_to_linear
from palettescope.measure.parse import try_parse

logger = logging.getLogger(__name__)


# Severity 1.0 rows of the Machado tables
_CVD_MATRICES = {
    CVDType.PROTANOPIA: np.array([
        [0.152286, 1.052583, -0.204868],
        [0.114503, 0.786281, 0.099216],
        [-0.003882, -0.048116, 1.051998],
    ], dtype=np.float64),
    CVDType.DEUTERANOPIA: np.array([
        [0.367322, 0.860646, -0.227968],
        [0.280085, 0.672501, 0.047413],
        [-0.011820, 0.042940, 0.968881],
    ], dtype=np.float64),
    CVDType.TRITANOPIA: np.array([
        [1.255528, -0.076749, -0.178779],
        [-0.078411, 0.930809, 0.147602],
        [0.004733, 0.691367, 0.303900],
    ], dtype=np.float64),
}


def _resolve_type(cvd_type: Union[CVDType, str]) -> CVDType:
    try:
        return CVDType(cvd_type)
    except ValueError:
        valid = ", ".join(t.value for t in CVDType)
        raise ValueError(f"Unknown CVD type {cvd_type!r}, expected one of: {valid}") from None


def simulate_srgb(
    srgb: NDArray[np.float64],
    cvd_type: Union[CVDType, str],
) -> NDArray[np.float64]:
    """
    Simulate a deficiency on sRGB values [0,1] of shape (..., 3).

    Returns:
        Array of the same shape, clipped to [0, 1]
    """
    matrix = _CVD_MATRICES[_resolve_type(cvd_type)]
    linear = srgb_to_linear(srgb)
    simulated = np.einsum('...j,ij->...i', linear, matrix)
    return linear_to_srgb(np.clip(simulated, 0.0, 1.0))


def simulate(color: ColorLike, cvd_type: Union[CVDType, str]) -> ColorLike:
    """
    Approximate how a color looks under a deficiency.

    Args:
        color: Color string or color object
        cvd_type: CVDType or its value ("protanopia", ...)

    Returns:
        Simulated color as a lowercase ``#rrggbb`` string, or the input
        unchanged if it cannot be parsed.

    Raises:
        ValueError: If cvd_type is not a known deficiency
    """
    cvd_type = _resolve_type(cvd_type)
    rgb = try_parse(color)
    if rgb is None:
        logger.debug(f"Leaving unparseable color unsimulated: {color!r}")
        return color

    srgb = simulate_srgb(np.array([rgb.r, rgb.g, rgb.b]), cvd_type)
    r, g, b = (float(v) for v in srgb)
    return RGBColor(r=r, g=g, b=b).hex


def simulate_palette(
    palette: Sequence[ColorLike],
    cvd_type: Union[CVDType, str],
) -> list[ColorLike]:
    """Element-wise simulate(), preserving order."""
    cvd_type = _resolve_type(cvd_type)
    return [simulate(color, cvd_type) for color in palette]
