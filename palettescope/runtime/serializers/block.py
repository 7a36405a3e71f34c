# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a PaletteAudit as a structured block (XML, JSON, or Markdown) that
can be embedded in a page or handed to another tool alongside the palette.
"""

from __future__ import annotations

import json
from enum import Enum
from xml.sax.saxutils import escape, quoteattr

from palettescope.runtime.report import sort_pairs_by_delta_e
from palettescope.runtime.serializers.base import color_label
from palettescope.schema import PaletteAudit


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    audit: PaletteAudit,
    *,
    format: BlockFormat = BlockFormat.XML,
    include_pairs: bool = True,
    tag_name: str = "palette_accessibility",
) -> str:
    """Serialize a PaletteAudit as a context block.

    Args:
        audit: The PaletteAudit to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        include_pairs: Include per-pair measurements.
        tag_name: XML/markdown tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <palette_accessibility version="1.0" source="palettescope">
          <score overall="100" min_delta_e="100.00" avg_delta_e="100.00"
                 min_contrast="21.00" avg_contrast="21.00" problematic="0" total="1"/>
          <palette>
            <color index="0" value="#000000"/>
            <color index="1" value="#ffffff"/>
          </palette>
          <cvd>
            <simulation type="protanopia" safe="true">#000000 #ffffff</simulation>
            ...
          </cvd>
          <pairs>
            <pair i="0" j="1" delta_e="100.00" contrast="21.00" wcag="AAA"
                  class="excellent"/>
          </pairs>
        </palette_accessibility>
    """
    if format == BlockFormat.XML:
        return _to_xml(audit, include_pairs, tag_name)
    elif format == BlockFormat.JSON:
        return _to_json(audit, include_pairs, tag_name)
    else:
        return _to_markdown(audit, include_pairs, tag_name)


def _to_xml(
    audit: PaletteAudit,
    include_pairs: bool,
    tag_name: str,
) -> str:
    """Generate XML block."""
    lines = [f'<{tag_name} version="{audit.version}" source="palettescope">']

    s = audit.score
    lines.append(
        f'  <score overall="{s.overall_score}" '
        f'min_delta_e="{s.min_delta_e:.2f}" avg_delta_e="{s.avg_delta_e:.2f}" '
        f'min_contrast="{s.min_contrast:.2f}" avg_contrast="{s.avg_contrast:.2f}" '
        f'problematic="{s.problematic_pairs}" total="{s.total_pairs}"/>'
    )

    # Palette
    lines.append("  <palette>")
    for i, color in enumerate(audit.colors):
        lines.append(f'    <color index="{i}" value={quoteattr(color_label(color))}/>')
    lines.append("  </palette>")

    # CVD simulations
    if audit.simulations:
        lines.append("  <cvd>")
        for sim in audit.simulations:
            colors = " ".join(color_label(c) for c in sim.colors)
            safe = "true" if sim.safe else "false"
            lines.append(
                f'    <simulation type="{sim.cvd_type.value}" safe="{safe}">'
                f"{escape(colors)}</simulation>"
            )
        lines.append("  </cvd>")

    # Pairs
    if include_pairs and audit.pairs:
        lines.append("  <pairs>")
        for pair in sort_pairs_by_delta_e(audit.pairs):
            lines.append(
                f'    <pair i="{pair.index1}" j="{pair.index2}" '
                f'delta_e="{pair.delta_e:.2f}" contrast="{pair.contrast_ratio:.2f}" '
                f'wcag="{pair.wcag_level.value}" '
                f'class="{pair.distinguishability.value}"/>'
            )
        lines.append("  </pairs>")

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_json(
    audit: PaletteAudit,
    include_pairs: bool,
    tag_name: str,
) -> str:
    """Generate JSON block with wrapper."""
    data = audit.to_dict()
    if not include_pairs:
        data.pop("pairs", None)

    wrapped = {tag_name: data}
    return json.dumps(wrapped, indent=2)


def _to_markdown(
    audit: PaletteAudit,
    include_pairs: bool,
    tag_name: str,
) -> str:
    """Generate markdown block with code fence."""
    data = audit.to_dict()
    if not include_pairs:
        data.pop("pairs", None)

    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(data, indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
