# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Palette accessibility scoring.

Reduces pair analyses and CVD simulations to one 0-100 score:

    overall = round(delta_e_score + contrast_score + cvd_score)

    delta_e_score  = min(40, min_delta_e / 10 * 40)
    contrast_score = min(30, (avg_contrast - 1) / 3.5 * 30)
    cvd_score      = 10 per deficiency type with no simulated pair below ΔE 3

A palette with no pairs has nothing to fail and scores 100.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from palettescope.schema import (
    ColorLike,
    ColorPairAnalysis,
    CVDSafety,
    CVDType,
    PaletteAccessibilityScore,
)
from palettescope.measure.colorspace import round_half_up
from palettescope.measure.cvd import simulate_palette
from palettescope.measure.pairs import analyze_pairs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringConfig:
    """Thresholds and point caps for the accessibility score."""

    # Pairs below this ΔE count as problematic under normal vision
    problematic_delta_e: float = 5.0

    # A deficiency type is safe when no simulated pair falls below this ΔE
    cvd_safe_delta_e: float = 3.0

    # Worst-pair ΔE term: full points at delta_e_saturation
    delta_e_points: float = 40.0
    delta_e_saturation: float = 10.0

    # Average contrast term: zero at 1:1, full points at contrast_saturation
    contrast_points: float = 30.0
    contrast_saturation: float = 4.5

    # Per deficiency type declared safe
    cvd_points_per_type: float = 10.0

    def __post_init__(self) -> None:
        if self.delta_e_saturation <= 0.0:
            raise ValueError(
                f"delta_e_saturation must be > 0, got {self.delta_e_saturation}"
            )
        if self.contrast_saturation <= 1.0:
            raise ValueError(
                f"contrast_saturation must be > 1, got {self.contrast_saturation}"
            )
        total = self.delta_e_points + self.contrast_points + 3 * self.cvd_points_per_type
        if total > 100.0 + 1e-9:
            raise ValueError(f"Point caps must sum to at most 100, got {total}")


def is_simulation_safe(
    simulated: Sequence[ColorLike],
    *,
    threshold: float = 3.0,
) -> bool:
    """True if no pair of an already-simulated palette has ΔE below threshold."""
    return not any(p.delta_e < threshold for p in analyze_pairs(simulated))


def is_cvd_safe(
    palette: Sequence[ColorLike],
    cvd_type: Union[CVDType, str],
    *,
    threshold: float = 3.0,
) -> bool:
    """True if no pair of the simulated palette has ΔE below threshold."""
    return is_simulation_safe(simulate_palette(palette, cvd_type), threshold=threshold)


def cvd_safety(
    palette: Sequence[ColorLike],
    *,
    threshold: float = 3.0,
) -> CVDSafety:
    """Safety verdict for each deficiency type."""
    colors = list(palette)
    return CVDSafety(**{
        cvd_type.value: is_cvd_safe(colors, cvd_type, threshold=threshold)
        for cvd_type in CVDType
    })


def score_from_pairs(
    pairs: Sequence[ColorPairAnalysis],
    cvd_safe: CVDSafety,
    *,
    config: Optional[ScoringConfig] = None,
) -> PaletteAccessibilityScore:
    """
    Aggregate precomputed pair analyses and CVD verdicts into a score.

    Args:
        pairs: Output of analyze_pairs() for the original palette
        cvd_safe: Output of cvd_safety() for the same palette
        config: Scoring settings (uses defaults if None)
    """
    cfg = config or ScoringConfig()

    total_pairs = len(pairs)
    if total_pairs == 0:
        return PaletteAccessibilityScore(
            overall_score=100,
            cvd_safe=CVDSafety(),
        )

    delta_es = [p.delta_e for p in pairs]
    contrasts = [p.contrast_ratio for p in pairs]

    min_delta_e = min(delta_es)
    avg_delta_e = sum(delta_es) / total_pairs
    min_contrast = min(contrasts)
    avg_contrast = sum(contrasts) / total_pairs
    problematic = sum(1 for de in delta_es if de < cfg.problematic_delta_e)

    delta_e_score = min(
        cfg.delta_e_points,
        (min_delta_e / cfg.delta_e_saturation) * cfg.delta_e_points,
    )
    # Unparseable entries contribute contrast 0, which would push this negative
    contrast_score = max(0.0, min(
        cfg.contrast_points,
        ((avg_contrast - 1.0) / (cfg.contrast_saturation - 1.0)) * cfg.contrast_points,
    ))
    cvd_score = cvd_safe.safe_count * cfg.cvd_points_per_type

    overall = round_half_up(delta_e_score + contrast_score + cvd_score)
    overall = min(100, max(0, overall))

    logger.debug(
        f"Score {overall}: delta_e={delta_e_score:.1f} "
        f"contrast={contrast_score:.1f} cvd={cvd_score:.0f} over {total_pairs} pairs"
    )

    return PaletteAccessibilityScore(
        overall_score=overall,
        min_delta_e=min_delta_e,
        avg_delta_e=avg_delta_e,
        min_contrast=min_contrast,
        avg_contrast=avg_contrast,
        problematic_pairs=problematic,
        total_pairs=total_pairs,
        cvd_safe=cvd_safe,
        delta_e_score=delta_e_score,
        contrast_score=contrast_score,
        cvd_score=cvd_score,
    )


def score(
    palette: Sequence[ColorLike],
    *,
    config: Optional[ScoringConfig] = None,
) -> PaletteAccessibilityScore:
    """
    Score how accessible a palette is.

    Args:
        palette: Ordered colors (strings or color objects)
        config: Scoring settings (uses defaults if None)

    Returns:
        PaletteAccessibilityScore. Never raises for bad colors: unparseable
        entries are scored as indistinguishable from everything.

    Example:
        >>> score(["#000000", "#ffffff"]).overall_score
        100
    """
    cfg = config or ScoringConfig()
    colors = list(palette)
    pairs = analyze_pairs(colors)
    if not pairs:
        return score_from_pairs(pairs, CVDSafety(), config=cfg)
    return score_from_pairs(
        pairs,
        cvd_safety(colors, threshold=cfg.cvd_safe_delta_e),
        config=cfg,
    )
