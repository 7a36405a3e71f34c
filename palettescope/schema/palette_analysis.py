# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Palette analysis schema: records produced by the accessibility engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same palette → same analysis
- Serializable: JSON-ready for report views

Colors inside these records are kept exactly as the caller supplied them
(usually ``#rrggbb`` strings), so indices and swatches line up with the
caller's chart series.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from palettescope.schema.color import COLOR_TYPES


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


def _color_value(color) -> str:
    """JSON-friendly form of a palette entry."""
    if isinstance(color, COLOR_TYPES):
        from palettescope.measure.colorspace import format_hex
        return format_hex(color)
    return str(color)


# =============================================================================
# Enumerations
# =============================================================================


class WCAGLevel(Enum):
    """WCAG 2.x conformance level reached by a contrast ratio."""
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


class Distinguishability(Enum):
    """Discrete ΔE bucket (boundaries at 2, 5 and 10)."""
    EXCELLENT = "excellent"
    GOOD = "good"
    POOR = "poor"
    INDISTINGUISHABLE = "indistinguishable"


class CVDType(Enum):
    """Simulated color vision deficiencies (complete dichromacy)."""
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _CVD_DESCRIPTIONS[self]

    @property
    def prevalence(self) -> str:
        return _CVD_PREVALENCE[self]


_CVD_DESCRIPTIONS = {
    CVDType.PROTANOPIA: "Red-blind (L-cone deficiency)",
    CVDType.DEUTERANOPIA: "Green-blind (M-cone deficiency)",
    CVDType.TRITANOPIA: "Blue-blind (S-cone deficiency)",
}

_CVD_PREVALENCE = {
    CVDType.PROTANOPIA: "~1% of males",
    CVDType.DEUTERANOPIA: "~6% of males",
    CVDType.TRITANOPIA: "~0.01% of population",
}


# =============================================================================
# Pair Analysis
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorPairAnalysis:
    """
    Measurements for one unordered pair of palette entries.

    Attributes:
        color1: Entry at index1, as supplied
        color2: Entry at index2, as supplied
        index1: Position of color1 in the palette
        index2: Position of color2 in the palette (always > index1)
        delta_e: CIEDE2000 difference (0 when either color is unparseable)
        contrast_ratio: WCAG contrast ratio (0 when either color is unparseable)
        wcag_level: Level reached by contrast_ratio for normal text
        distinguishability: Bucket derived from delta_e
    """
    color1: object
    color2: object
    index1: int
    index2: int
    delta_e: float
    contrast_ratio: float
    wcag_level: WCAGLevel
    distinguishability: Distinguishability

    def __post_init__(self) -> None:
        """Validate pair structure."""
        if not 0 <= self.index1 < self.index2:
            raise ValueError(
                f"Pair indices must satisfy 0 <= index1 < index2, "
                f"got ({self.index1}, {self.index2})"
            )
        if self.delta_e < 0.0:
            raise ValueError(f"Delta E must be >= 0, got {self.delta_e}")

    @property
    def indices(self) -> tuple[int, int]:
        return self.index1, self.index2

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "color1": _color_value(self.color1),
            "color2": _color_value(self.color2),
            "index1": self.index1,
            "index2": self.index2,
            "delta_e": self.delta_e,
            "contrast_ratio": self.contrast_ratio,
            "wcag_level": self.wcag_level.value,
            "distinguishability": self.distinguishability.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorPairAnalysis:
        """Deserialize from dictionary."""
        return cls(
            color1=data["color1"],
            color2=data["color2"],
            index1=data["index1"],
            index2=data["index2"],
            delta_e=data["delta_e"],
            contrast_ratio=data["contrast_ratio"],
            wcag_level=WCAGLevel(data["wcag_level"]),
            distinguishability=Distinguishability(data["distinguishability"]),
        )


# =============================================================================
# Aggregate Score
# =============================================================================


@dataclass(frozen=True, slots=True)
class CVDSafety:
    """Per-deficiency verdict: True when no simulated pair is too close."""
    protanopia: bool = True
    deuteranopia: bool = True
    tritanopia: bool = True

    @property
    def all_safe(self) -> bool:
        return self.protanopia and self.deuteranopia and self.tritanopia

    @property
    def safe_count(self) -> int:
        return sum((self.protanopia, self.deuteranopia, self.tritanopia))

    def for_type(self, cvd_type: CVDType) -> bool:
        return getattr(self, CVDType(cvd_type).value)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "protanopia": self.protanopia,
            "deuteranopia": self.deuteranopia,
            "tritanopia": self.tritanopia,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CVDSafety:
        """Deserialize from dictionary."""
        return cls(
            protanopia=data.get("protanopia", True),
            deuteranopia=data.get("deuteranopia", True),
            tritanopia=data.get("tritanopia", True),
        )


@dataclass(frozen=True, slots=True)
class PaletteAccessibilityScore:
    """
    Single-number accessibility verdict for a palette, with its inputs.

    The overall score is the rounded sum of three capped terms:
        delta_e_score   0-40  (worst pair ΔE, saturating at 10)
        contrast_score  0-30  (average contrast, saturating at 4.5)
        cvd_score       0-30  (10 per deficiency type declared safe)

    Attributes:
        overall_score: Integer 0-100
        min_delta_e: Smallest pairwise ΔE
        avg_delta_e: Mean pairwise ΔE
        min_contrast: Smallest pairwise contrast ratio
        avg_contrast: Mean pairwise contrast ratio
        problematic_pairs: Pairs with ΔE below the problematic threshold
        total_pairs: N(N-1)/2
        cvd_safe: Per-deficiency safety verdict
    """
    overall_score: int
    min_delta_e: float = 0.0
    avg_delta_e: float = 0.0
    min_contrast: float = 0.0
    avg_contrast: float = 0.0
    problematic_pairs: int = 0
    total_pairs: int = 0
    cvd_safe: CVDSafety = field(default_factory=CVDSafety)
    delta_e_score: float = 0.0
    contrast_score: float = 0.0
    cvd_score: float = 0.0

    def __post_init__(self) -> None:
        """Validate score ranges."""
        if not 0 <= self.overall_score <= 100:
            raise ValueError(f"Overall score must be 0-100, got {self.overall_score}")
        if not 0 <= self.problematic_pairs <= self.total_pairs:
            raise ValueError(
                f"Problematic pairs must be 0-{self.total_pairs}, "
                f"got {self.problematic_pairs}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "overall_score": self.overall_score,
            "min_delta_e": self.min_delta_e,
            "avg_delta_e": self.avg_delta_e,
            "min_contrast": self.min_contrast,
            "avg_contrast": self.avg_contrast,
            "problematic_pairs": self.problematic_pairs,
            "total_pairs": self.total_pairs,
            "cvd_safe": self.cvd_safe.to_dict(),
            "breakdown": {
                "delta_e": self.delta_e_score,
                "contrast": self.contrast_score,
                "cvd": self.cvd_score,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> PaletteAccessibilityScore:
        """Deserialize from dictionary."""
        breakdown = data.get("breakdown", {})
        return cls(
            overall_score=data["overall_score"],
            min_delta_e=data.get("min_delta_e", 0.0),
            avg_delta_e=data.get("avg_delta_e", 0.0),
            min_contrast=data.get("min_contrast", 0.0),
            avg_contrast=data.get("avg_contrast", 0.0),
            problematic_pairs=data.get("problematic_pairs", 0),
            total_pairs=data.get("total_pairs", 0),
            cvd_safe=CVDSafety.from_dict(data.get("cvd_safe", {})),
            delta_e_score=breakdown.get("delta_e", 0.0),
            contrast_score=breakdown.get("contrast", 0.0),
            cvd_score=breakdown.get("cvd", 0.0),
        )


# =============================================================================
# Audit Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class CVDSimulation:
    """
    A palette as seen under one deficiency.

    Attributes:
        cvd_type: Simulated deficiency
        colors: Simulated palette, same order as the input
            (unparseable entries are passed through unchanged)
        safe: False when any simulated pair falls below the CVD ΔE threshold
    """
    cvd_type: CVDType
    colors: tuple
    safe: bool

    @property
    def status(self) -> str:
        """'Safe' or 'Warning', as shown next to the simulated swatches."""
        return "Safe" if self.safe else "Warning"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "cvd_type": self.cvd_type.value,
            "name": self.cvd_type.display_name,
            "description": self.cvd_type.description,
            "prevalence": self.cvd_type.prevalence,
            "colors": [_color_value(c) for c in self.colors],
            "safe": self.safe,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CVDSimulation:
        """Deserialize from dictionary."""
        return cls(
            cvd_type=CVDType(data["cvd_type"]),
            colors=tuple(data["colors"]),
            safe=data["safe"],
        )


@dataclass(frozen=True, slots=True)
class PaletteAudit:
    """
    Complete accessibility audit of a palette.

    This is the top-level container produced by palettescope.audit().

    Attributes:
        colors: The palette, as supplied
        pairs: Pair analyses in (i, j) lexicographic order
        score: Aggregate score
        simulations: One CVDSimulation per CVDType, in CVDType order
        version: Schema version
    """
    colors: tuple
    pairs: tuple[ColorPairAnalysis, ...]
    score: PaletteAccessibilityScore
    simulations: tuple[CVDSimulation, ...] = ()
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate audit structure."""
        n = len(self.colors)
        expected = n * (n - 1) // 2
        if len(self.pairs) != expected:
            raise ValueError(
                f"A palette of {n} colors has {expected} pairs, got {len(self.pairs)}"
            )

    def simulation(self, cvd_type: CVDType) -> Optional[CVDSimulation]:
        """Get the simulation for a deficiency type, if present."""
        cvd_type = CVDType(cvd_type)
        for sim in self.simulations:
            if sim.cvd_type is cvd_type:
                return sim
        return None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": self.version,
            "colors": [_color_value(c) for c in self.colors],
            "score": self.score.to_dict(),
            "pairs": [p.to_dict() for p in self.pairs],
            "simulations": [s.to_dict() for s in self.simulations],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_summary(self, include_pairs: bool = True) -> str:
        """
        Serialize to a human-readable report.

        Example output:
            ## Palette Accessibility Report

            **Overall Score:** 87/100 (good)
            ...
        """
        # Import here to avoid circular imports
        from palettescope.runtime.serializers.summary import to_summary
        from palettescope.runtime.serializers.base import SerializerFormat
        return to_summary(
            self,
            format=SerializerFormat.NATURAL,
            include_pairs=include_pairs,
            preamble=True,
        )

    def to_xml(self, include_pairs: bool = True) -> str:
        """Serialize to XML block format."""
        # Import here to avoid circular imports
        from palettescope.runtime.serializers.block import to_context_block, BlockFormat
        return to_context_block(
            self,
            format=BlockFormat.XML,
            include_pairs=include_pairs,
        )

    def to_markdown(self, include_pairs: bool = True) -> str:
        """Serialize to a fenced Markdown block."""
        from palettescope.runtime.serializers.block import to_context_block, BlockFormat
        return to_context_block(
            self,
            format=BlockFormat.MARKDOWN,
            include_pairs=include_pairs,
        )

    @classmethod
    def from_dict(cls, data: dict) -> PaletteAudit:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            colors=tuple(data["colors"]),
            pairs=tuple(ColorPairAnalysis.from_dict(p) for p in data["pairs"]),
            score=PaletteAccessibilityScore.from_dict(data["score"]),
            simulations=tuple(
                CVDSimulation.from_dict(s) for s in data.get("simulations", [])
            ),
        )

    @classmethod
    def from_json(cls, json_str: str) -> PaletteAudit:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
