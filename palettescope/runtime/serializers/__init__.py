# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Serializers for PaletteAudit delivery to report views.

Each serializer formats a PaletteAudit for a specific consumer.
All serializers preserve the measurements exactly; no value is recomputed.
"""

from palettescope.runtime.serializers.base import SerializerFormat
from palettescope.runtime.serializers.block import to_context_block, BlockFormat
from palettescope.runtime.serializers.summary import to_summary

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "to_summary",
    "to_context_block",
]
