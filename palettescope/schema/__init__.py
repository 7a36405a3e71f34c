# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Schema definitions for palette accessibility analysis.

All types in this module are immutable (frozen dataclasses).
Every record is derived from a palette and recomputed on demand.
"""

from palettescope.schema.color import (
    Color,
    ColorLike,
    HSLColor,
    LABColor,
    RGBColor,
    color_from_dict,
)
from palettescope.schema.palette_analysis import (
    SCHEMA_VERSION,
    ColorPairAnalysis,
    CVDSafety,
    CVDSimulation,
    CVDType,
    Distinguishability,
    PaletteAccessibilityScore,
    PaletteAudit,
    WCAGLevel,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Color variants
    "Color",
    "ColorLike",
    "RGBColor",
    "HSLColor",
    "LABColor",
    "color_from_dict",
    # Classifications
    "WCAGLevel",
    "Distinguishability",
    "CVDType",
    # Derived records
    "ColorPairAnalysis",
    "CVDSafety",
    "PaletteAccessibilityScore",
    "CVDSimulation",
    # Top-level container
    "PaletteAudit",
]
