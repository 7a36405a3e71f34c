# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""Tests for pairwise palette analysis."""

import pytest

from palettescope.measure.contrast import contrast_ratio
from palettescope.measure.difference import delta_e
from palettescope.measure.pairs import analyze_pairs
from palettescope.schema import Distinguishability, RGBColor, WCAGLevel


PALETTE = ["#1b9e77", "#d95f02", "#7570b3", "#e7298a"]


class TestPairEnumeration:

    def test_counts(self):
        colors = ["#000000", "#333333", "#666666", "#999999", "#cccccc", "#ffffff"]
        for n in range(len(colors) + 1):
            assert len(analyze_pairs(colors[:n])) == n * (n - 1) // 2

    def test_lexicographic_order(self):
        pairs = analyze_pairs(PALETTE)
        assert [p.indices for p in pairs] == [
            (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3),
        ]

    def test_colors_kept_as_supplied(self):
        pairs = analyze_pairs(["RED", "#00F"])
        assert pairs[0].color1 == "RED"
        assert pairs[0].color2 == "#00F"

    def test_input_not_mutated(self):
        palette = list(PALETTE)
        analyze_pairs(palette)
        assert palette == PALETTE

    def test_accepts_generators(self):
        assert len(analyze_pairs(c for c in PALETTE)) == 6


class TestPairMeasurements:

    def test_black_white(self):
        (pair,) = analyze_pairs(["#000000", "#ffffff"])
        assert pair.delta_e == pytest.approx(100.0, abs=1e-6)
        assert pair.contrast_ratio == pytest.approx(21.0)
        assert pair.wcag_level == WCAGLevel.AAA
        assert pair.distinguishability == Distinguishability.EXCELLENT

    def test_matches_scalar_functions(self):
        for pair in analyze_pairs(PALETTE):
            assert pair.delta_e == pytest.approx(delta_e(pair.color1, pair.color2), abs=1e-9)
            assert pair.contrast_ratio == pytest.approx(
                contrast_ratio(pair.color1, pair.color2), abs=1e-9
            )

    def test_identical_colors(self):
        (pair,) = analyze_pairs(["#7570b3", "#7570b3"])
        assert pair.delta_e == 0.0
        assert pair.contrast_ratio == pytest.approx(1.0)
        assert pair.wcag_level == WCAGLevel.FAIL
        assert pair.distinguishability == Distinguishability.INDISTINGUISHABLE

    def test_color_objects(self):
        (pair,) = analyze_pairs([RGBColor(0.0, 0.0, 0.0), RGBColor(1.0, 1.0, 1.0)])
        assert pair.contrast_ratio == pytest.approx(21.0)


class TestUnparseableEntries:

    def test_degrades_without_raising(self):
        pairs = analyze_pairs(["#ffffff", "not-a-color", "#000000"])
        assert len(pairs) == 3
        by_index = {p.indices: p for p in pairs}

        for key in [(0, 1), (1, 2)]:
            assert by_index[key].delta_e == 0.0
            assert by_index[key].contrast_ratio == 0.0
            assert by_index[key].wcag_level == WCAGLevel.FAIL
            assert by_index[key].distinguishability == Distinguishability.INDISTINGUISHABLE

        assert by_index[(0, 2)].contrast_ratio == pytest.approx(21.0)

    def test_non_string_entry(self):
        (pair,) = analyze_pairs([None, "#ffffff"])
        assert pair.delta_e == 0.0
        assert pair.color1 is None
