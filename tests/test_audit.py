# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""Tests for the top-level audit API."""

import json
import logging

import pytest

import palettescope
from palettescope import audit, score
from palettescope.measure.cvd import simulate_palette
from palettescope.measure.score import ScoringConfig
from palettescope.schema import CVDType, PaletteAudit


PALETTE = ["#1b9e77", "#d95f02", "#7570b3", "#e7298a"]


class TestAudit:

    def test_structure(self):
        a = audit(PALETTE)
        assert isinstance(a, PaletteAudit)
        assert a.colors == tuple(PALETTE)
        assert len(a.pairs) == 6
        assert a.version == "1.0"

    def test_simulations_in_type_order(self):
        a = audit(PALETTE)
        assert [s.cvd_type for s in a.simulations] == list(CVDType)

    def test_simulated_colors(self):
        a = audit(PALETTE)
        for sim in a.simulations:
            assert list(sim.colors) == simulate_palette(PALETTE, sim.cvd_type)

    def test_simulation_safety_matches_score(self):
        a = audit(PALETTE)
        for sim in a.simulations:
            assert sim.safe == a.score.cvd_safe.for_type(sim.cvd_type)

    def test_score_matches_standalone(self):
        assert audit(PALETTE).score == score(PALETTE)

    def test_config_passed_through(self):
        cfg = ScoringConfig(cvd_safe_delta_e=1000.0)
        a = audit(["#000000", "#ffffff"], config=cfg)
        assert all(s.status == "Warning" for s in a.simulations)
        assert a.score.overall_score == 70

    def test_simulation_lookup(self):
        a = audit(PALETTE)
        assert a.simulation(CVDType.TRITANOPIA).cvd_type is CVDType.TRITANOPIA
        assert a.simulation("protanopia").cvd_type is CVDType.PROTANOPIA

    def test_empty_palette(self):
        a = audit([])
        assert a.pairs == ()
        assert a.score.overall_score == 100
        assert all(s.safe for s in a.simulations)

    def test_unparseable_entry(self):
        a = audit(["#ffffff", "bogus"])
        assert a.colors == ("#ffffff", "bogus")
        assert a.score.overall_score == 0
        for sim in a.simulations:
            assert sim.colors[1] == "bogus"
            assert not sim.safe

    def test_non_finite_entry(self):
        a = audit(["#ff0000", "hsl(nan, 50%, 50%)"])
        assert a.score.overall_score == 0
        assert a.pairs[0].delta_e == 0.0
        assert all(not sim.safe for sim in a.simulations)

    def test_logs_summary(self, caplog):
        caplog.set_level(logging.INFO, logger="palettescope.measure.audit")
        audit(["#000000", "#ffffff"])
        assert "Audited 2 colors: score 100/100" in caplog.text


class TestAuditSerialization:

    def test_json_roundtrip(self):
        a = audit(PALETTE)
        assert PaletteAudit.from_json(a.to_json()) == a

    def test_json_fields(self):
        data = json.loads(audit(["#000000", "#ffffff"]).to_json())
        assert data["colors"] == ["#000000", "#ffffff"]
        assert data["score"]["overall_score"] == 100
        assert data["score"]["breakdown"] == {"delta_e": 40.0, "contrast": 30.0, "cvd": 30.0}
        assert data["pairs"][0]["wcag_level"] == "AAA"
        assert data["simulations"][0]["name"] == "Protanopia"
        assert data["simulations"][1]["prevalence"] == "~6% of males"

    def test_compact_json(self):
        assert "\n" not in audit(PALETTE).to_json(indent=None)


class TestPackageSurface:

    def test_version(self):
        assert palettescope.__version__ == "1.0.0"

    def test_exports_resolve(self):
        for name in palettescope.__all__:
            assert hasattr(palettescope, name), name

    def test_top_level_helpers(self):
        assert palettescope.contrast_ratio("#000", "#fff") == pytest.approx(21.0)
        assert palettescope.text_color_for("#000") == "#ffffff"
        assert palettescope.format_hex("WHITE") == "#ffffff"
