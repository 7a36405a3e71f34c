# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Summary serializer for report views.

Formats a PaletteAudit as the accessibility report a reader sees: the
overall score, per-metric status, CVD simulations with Safe/Warning, the
pairs needing attention and the full pair table in most-problematic-first
order.
"""

from __future__ import annotations

import json

from palettescope.runtime.report import (
    attention_pairs,
    metric_statuses,
    pair_advice,
    sort_pairs_by_delta_e,
)
from palettescope.runtime.serializers.base import (
    SerializerFormat,
    color_label,
    describe_color,
)
from palettescope.schema import PaletteAudit


def to_summary(
    audit: PaletteAudit,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    include_pairs: bool = True,
    preamble: bool = True,
) -> str:
    """Serialize a PaletteAudit as a report.

    Args:
        audit: The PaletteAudit to serialize.
        format: NATURAL (human-readable), JSON or JSON_PRETTY.
        include_pairs: Include the full pair table.
        preamble: Include the report heading.

    Returns:
        Report string.

    Example (NATURAL)::

        ## Palette Accessibility Report

        **Overall Score:** 100/100 (good)

        **Palette:**
        1. #000000 (Black)
        2. #ffffff (White)

        **Metrics:**
        - Min ΔE: 100.0 (good)
        - Avg ΔE: 100.0 (good)
        - Problematic pairs: 0/1 (good)
        - Min contrast: 21.00 (good)

        **Color Vision Simulations:**
        - Protanopia (Red-blind (L-cone deficiency), ~1% of males): Safe
          #000000, #ffffff
        ...
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(audit, include_pairs, preamble)
    indent = 2 if format == SerializerFormat.JSON_PRETTY else None
    return _to_json(audit, include_pairs, indent)


def _to_natural(
    audit: PaletteAudit,
    include_pairs: bool,
    preamble: bool,
) -> str:
    """Generate natural language representation."""
    lines: list[str] = []
    result = audit.score
    statuses = metric_statuses(result)

    if preamble:
        lines.extend([
            "## Palette Accessibility Report",
            "",
        ])

    lines.append(
        f"**Overall Score:** {result.overall_score}/100 "
        f"({statuses['overall_score'].value})"
    )
    lines.append("")

    # Palette
    lines.append("**Palette:**")
    for i, color in enumerate(audit.colors, 1):
        lines.append(f"{i}. {color_label(color)} ({describe_color(color)})")
    lines.append("")

    lines.append("**Metrics:**")
    lines.append(f"- Min ΔE: {result.min_delta_e:.1f} ({statuses['min_delta_e'].value})")
    lines.append(f"- Avg ΔE: {result.avg_delta_e:.1f} ({statuses['avg_delta_e'].value})")
    lines.append(
        f"- Problematic pairs: {result.problematic_pairs}/{result.total_pairs} "
        f"({statuses['problematic_pairs'].value})"
    )
    lines.append(f"- Min contrast: {result.min_contrast:.2f} ({statuses['min_contrast'].value})")
    lines.append("")

    if audit.simulations:
        lines.append("**Color Vision Simulations:**")
        for sim in audit.simulations:
            t = sim.cvd_type
            lines.append(f"- {t.display_name} ({t.description}, {t.prevalence}): {sim.status}")
            lines.append(f"  {', '.join(color_label(c) for c in sim.colors)}")
        lines.append("")

    attention = attention_pairs(audit.pairs)
    if attention:
        lines.append("**Needs Attention:**")
        for pair in attention:
            lines.append(
                f"- Colors {pair.index1 + 1} and {pair.index2 + 1} have ΔE of "
                f"{pair.delta_e:.1f}: {pair_advice(pair)}"
            )
        lines.append("")

    if include_pairs and audit.pairs:
        lines.append("**Pairs (most problematic first):**")
        for i, pair in enumerate(sort_pairs_by_delta_e(audit.pairs), 1):
            lines.append(
                f"{i}. {color_label(pair.color1)} / {color_label(pair.color2)}: "
                f"ΔE {pair.delta_e:.1f} ({pair.distinguishability.value}), "
                f"contrast {pair.contrast_ratio:.2f}:1 ({pair.wcag_level.value})"
            )
        lines.append("")

    return "\n".join(lines)


def _to_json(
    audit: PaletteAudit,
    include_pairs: bool,
    indent,
) -> str:
    """Generate JSON representation with report annotations."""
    data = audit.to_dict()
    if include_pairs:
        data["pairs"] = [p.to_dict() for p in sort_pairs_by_delta_e(audit.pairs)]
    else:
        data.pop("pairs", None)

    data["statuses"] = {
        name: status.value for name, status in metric_statuses(audit.score).items()
    }
    data["attention"] = [
        {**pair.to_dict(), "advice": pair_advice(pair)}
        for pair in attention_pairs(audit.pairs)
    ]
    return json.dumps(data, indent=indent)
