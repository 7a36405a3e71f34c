# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Measurement core for palettescope.

This module provides deterministic accessibility measurements for palettes.
All operations are pure functions of their inputs.
"""

from palettescope.measure.audit import audit
from palettescope.measure.score import ScoringConfig, score

__all__ = ["audit", "score", "ScoringConfig"]
