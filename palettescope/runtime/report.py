# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Report view helpers.

Turns audit records into what a report shows: pairs in most-problematic-first
order, the short list of pairs needing attention, a good/warning/error status
per metric and one line of advice per close pair. Nothing here recomputes
color math.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from palettescope.schema import ColorPairAnalysis, PaletteAccessibilityScore


class MetricStatus(Enum):
    """Traffic-light status of a summary metric."""
    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"


# Pairs below this ΔE are listed as attention items
ATTENTION_DELTA_E = 10.0
ATTENTION_LIMIT = 5


def sort_pairs_by_delta_e(
    pairs: Sequence[ColorPairAnalysis],
) -> list[ColorPairAnalysis]:
    """Pairs in ascending ΔE order (ties keep their (i, j) order)."""
    return sorted(pairs, key=lambda p: p.delta_e)


def attention_pairs(
    pairs: Sequence[ColorPairAnalysis],
    *,
    threshold: float = ATTENTION_DELTA_E,
    limit: int = ATTENTION_LIMIT,
) -> list[ColorPairAnalysis]:
    """The closest pairs below threshold, at most limit of them."""
    close = [p for p in sort_pairs_by_delta_e(pairs) if p.delta_e < threshold]
    return close[:limit]


def pair_advice(pair: ColorPairAnalysis) -> str:
    """One-line recommendation for a pair, by ΔE."""
    if pair.delta_e < 2.0:
        return "Nearly indistinguishable - consider changing one color significantly"
    if pair.delta_e < 5.0:
        return "May be confused - consider increasing color difference"
    return "Borderline - acceptable but could be improved"


def _tiered(value: float, good: float, warning: float) -> MetricStatus:
    if value >= good:
        return MetricStatus.GOOD
    if value >= warning:
        return MetricStatus.WARNING
    return MetricStatus.ERROR


def overall_status(result: PaletteAccessibilityScore) -> MetricStatus:
    return _tiered(result.overall_score, 70, 40)


def min_delta_e_status(result: PaletteAccessibilityScore) -> MetricStatus:
    return _tiered(result.min_delta_e, 10.0, 5.0)


def avg_delta_e_status(result: PaletteAccessibilityScore) -> MetricStatus:
    return _tiered(result.avg_delta_e, 15.0, 8.0)


def min_contrast_status(result: PaletteAccessibilityScore) -> MetricStatus:
    return _tiered(result.min_contrast, 4.5, 3.0)


def problematic_pairs_status(result: PaletteAccessibilityScore) -> MetricStatus:
    if result.problematic_pairs == 0:
        return MetricStatus.GOOD
    if result.problematic_pairs <= 2:
        return MetricStatus.WARNING
    return MetricStatus.ERROR


def metric_statuses(result: PaletteAccessibilityScore) -> dict[str, MetricStatus]:
    """Status of every summary metric, keyed by metric name."""
    return {
        "overall_score": overall_status(result),
        "min_delta_e": min_delta_e_status(result),
        "avg_delta_e": avg_delta_e_status(result),
        "problematic_pairs": problematic_pairs_status(result),
        "min_contrast": min_contrast_status(result),
    }
