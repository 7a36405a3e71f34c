# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Pairwise palette analysis.

Every unordered pair (i, j), i < j, is measured once, in lexicographic
order. ΔE is computed for all pairs at once in CIELAB; entries that fail to
parse contribute ΔE = 0 and contrast = 0 to each of their pairs.
"""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

import numpy as np

from palettescope.schema import ColorLike, ColorPairAnalysis
from palettescope.measure.colorspace import srgb_to_lab
from palettescope.measure.contrast import (
    contrast_ratio_from_luminance,
    relative_luminance_array,
    wcag_level,
)
from palettescope.measure.difference import classify_distinguishability, delta_e_matrix
from palettescope.measure.parse import try_parse


def analyze_pairs(palette: Sequence[ColorLike]) -> list[ColorPairAnalysis]:
    """
    Measure every unordered pair of a palette.

    Args:
        palette: Ordered colors (strings or color objects); not modified

    Returns:
        N*(N-1)/2 ColorPairAnalysis records ordered (0,1), (0,2), ..., (1,2), ...
        Empty for palettes with fewer than two colors.
    """
    colors = list(palette)
    if len(colors) < 2:
        return []

    parsed = [try_parse(c) for c in colors]
    valid = [rgb is not None for rgb in parsed]
    srgb = np.array(
        [[rgb.r, rgb.g, rgb.b] if rgb is not None else [0.0, 0.0, 0.0] for rgb in parsed],
        dtype=np.float64,
    )

    delta_es = delta_e_matrix(srgb_to_lab(srgb))
    luminances = np.clip(relative_luminance_array(srgb), 0.0, 1.0)

    pairs: list[ColorPairAnalysis] = []
    for i, j in combinations(range(len(colors)), 2):
        if valid[i] and valid[j]:
            de = float(delta_es[i, j])
            ratio = contrast_ratio_from_luminance(float(luminances[i]), float(luminances[j]))
        else:
            de = 0.0
            ratio = 0.0

        pairs.append(ColorPairAnalysis(
            color1=colors[i],
            color2=colors[j],
            index1=i,
            index2=j,
            delta_e=de,
            contrast_ratio=ratio,
            wcag_level=wcag_level(ratio),
            distinguishability=classify_distinguishability(de),
        ))

    return pairs
