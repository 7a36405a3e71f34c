# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Main palette audit API.

This is the primary entry point for palettescope's measurement core.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from palettescope.schema import (
    ColorLike,
    CVDSafety,
    CVDSimulation,
    CVDType,
    PaletteAudit,
)
from palettescope.measure.cvd import simulate_palette
from palettescope.measure.pairs import analyze_pairs
from palettescope.measure.score import ScoringConfig, is_simulation_safe, score_from_pairs

logger = logging.getLogger(__name__)


def audit(
    palette: Sequence[ColorLike],
    *,
    config: Optional[ScoringConfig] = None,
) -> PaletteAudit:
    """
    Run the full accessibility audit of a palette.

    This produces a PaletteAudit containing:
    - Every pairwise analysis of the original palette
    - The aggregate score
    - The palette as simulated under each deficiency, flagged Safe/Warning

    Args:
        palette: Ordered colors, typically 3-12 ``#rrggbb`` strings.
            Unparseable entries are kept and degrade the score.
        config: Scoring settings (uses defaults if None)

    Returns:
        PaletteAudit with all derived data

    Example:
        >>> from palettescope import audit
        >>> a = audit(["#1b9e77", "#d95f02", "#7570b3"])
        >>> a.score.total_pairs
        3
        >>> [s.cvd_type.value for s in a.simulations]
        ['protanopia', 'deuteranopia', 'tritanopia']
    """
    cfg = config or ScoringConfig()
    colors = tuple(palette)

    pairs = analyze_pairs(colors)

    simulations = []
    for cvd_type in CVDType:
        simulated = simulate_palette(colors, cvd_type)
        safe = is_simulation_safe(simulated, threshold=cfg.cvd_safe_delta_e)
        simulations.append(CVDSimulation(
            cvd_type=cvd_type,
            colors=tuple(simulated),
            safe=safe,
        ))

    safety = CVDSafety(**{sim.cvd_type.value: sim.safe for sim in simulations})
    result = score_from_pairs(pairs, safety, config=cfg)

    logger.info(
        f"Audited {len(colors)} colors: score {result.overall_score}/100, "
        f"{result.problematic_pairs}/{result.total_pairs} problematic pairs, "
        f"{safety.safe_count}/3 CVD types safe"
    )

    return PaletteAudit(
        colors=colors,
        pairs=tuple(pairs),
        score=result,
        simulations=tuple(simulations),
    )
