# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Palettescope -- Accessibility measurement for data-visualization palettes.

Measures how distinguishable the colors of a palette are for viewers with
normal vision and with color vision deficiencies, and reduces the
measurements to a single 0-100 score.

Quick start::

    from palettescope import audit

    a = audit(["#1b9e77", "#d95f02", "#7570b3"])
    a.score.overall_score   # 0-100
    a.to_summary()          # Human-readable report
    a.to_xml()              # Structured XML block
    a.to_json()             # JSON
"""

from __future__ import annotations

__version__ = "1.0.0"

from palettescope.measure import ScoringConfig, audit, score
from palettescope.measure.colorspace import (
    color_info,
    format_hex,
    to_hsl,
    to_lab,
    to_rgb,
    to_rgb255,
)
from palettescope.measure.contrast import (
    contrast_ratio,
    relative_luminance,
    text_color_for,
    wcag_level,
)
from palettescope.measure.cvd import simulate, simulate_palette
from palettescope.measure.difference import classify_distinguishability, delta_e
from palettescope.measure.pairs import analyze_pairs
from palettescope.measure.parse import ColorParseError, parse, try_parse
from palettescope.measure.score import cvd_safety
from palettescope.schema import (
    ColorPairAnalysis,
    CVDSafety,
    CVDSimulation,
    CVDType,
    Distinguishability,
    HSLColor,
    LABColor,
    PaletteAccessibilityScore,
    PaletteAudit,
    RGBColor,
    WCAGLevel,
)

__all__ = [
    # Core API
    "audit",
    "score",
    "analyze_pairs",
    "cvd_safety",
    "ScoringConfig",
    # Color model
    "parse",
    "try_parse",
    "ColorParseError",
    "to_rgb",
    "to_rgb255",
    "to_hsl",
    "to_lab",
    "format_hex",
    "color_info",
    # Engines
    "delta_e",
    "classify_distinguishability",
    "relative_luminance",
    "contrast_ratio",
    "wcag_level",
    "text_color_for",
    "simulate",
    "simulate_palette",
    # Types (commonly needed)
    "RGBColor",
    "HSLColor",
    "LABColor",
    "CVDType",
    "WCAGLevel",
    "Distinguishability",
    "ColorPairAnalysis",
    "CVDSafety",
    "PaletteAccessibilityScore",
    "CVDSimulation",
    "PaletteAudit",
    # Version
    "__version__",
]
