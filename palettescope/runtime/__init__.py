# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Report runtime for palettescope.

Ordering, status and serialization of PaletteAudit data for the views that
display it:

1. Summary -- Human-readable report or annotated JSON
2. Context Block -- Structured XML/JSON/Markdown block

The delivery layer never modifies measurement content.
"""

from palettescope.runtime.report import (
    MetricStatus,
    attention_pairs,
    metric_statuses,
    pair_advice,
    sort_pairs_by_delta_e,
)
from palettescope.runtime.serializers import (
    SerializerFormat,
    BlockFormat,
    to_context_block,
    to_summary,
)

__all__ = [
    "to_summary",
    "to_context_block",
    "SerializerFormat",
    "BlockFormat",
    "MetricStatus",
    "sort_pairs_by_delta_e",
    "attention_pairs",
    "pair_advice",
    "metric_statuses",
]
