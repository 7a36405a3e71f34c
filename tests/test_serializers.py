# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""Tests for report and context block serializers."""

import json
import xml.etree.ElementTree as ET

from palettescope import audit
from palettescope.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    to_context_block,
    to_summary,
)
from palettescope.runtime.serializers.base import color_label, describe_color
from palettescope.schema import RGBColor


CLOSE_PALETTE = ["#000000", "#ffffff", "#ff0000", "#fe0000"]


class TestDescribeColor:

    def test_achromatic(self):
        assert describe_color("#000000") == "Black"
        assert describe_color("#ffffff") == "White"
        assert describe_color("#808080") == "Gray"
        assert describe_color("#222222") == "Dark gray"

    def test_hues(self):
        assert describe_color("#ff0000") == "Red"
        assert describe_color("#00ff00") == "Green"
        assert describe_color("#0000ff") == "Blue"
        assert describe_color("#000080") == "Dark blue"

    def test_invalid(self):
        assert describe_color("bogus") == "Invalid color"

    def test_color_label(self):
        assert color_label(RGBColor(1.0, 0.0, 0.0)) == "#ff0000"
        assert color_label("#ABC") == "#ABC"


class TestSummaryNatural:

    def test_heading_and_score(self):
        text = to_summary(audit(["#000000", "#ffffff"]))
        assert text.startswith("## Palette Accessibility Report")
        assert "**Overall Score:** 100/100 (good)" in text

    def test_no_preamble(self):
        text = to_summary(audit(["#000000", "#ffffff"]), preamble=False)
        assert "## Palette Accessibility Report" not in text

    def test_palette_listing(self):
        text = to_summary(audit(["#000000", "#ffffff"]))
        assert "1. #000000 (Black)" in text
        assert "2. #ffffff (White)" in text

    def test_simulations(self):
        text = to_summary(audit(["#000000", "#ffffff"]))
        assert "Protanopia (Red-blind (L-cone deficiency), ~1% of males): Safe" in text
        assert "Tritanopia" in text

    def test_attention_section(self):
        text = to_summary(audit(CLOSE_PALETTE))
        assert "**Needs Attention:**" in text
        assert "Colors 3 and 4" in text
        assert "Nearly indistinguishable" in text

    def test_no_attention_for_distinct_colors(self):
        text = to_summary(audit(["#000000", "#ffffff"]))
        assert "Needs Attention" not in text

    def test_pairs_most_problematic_first(self):
        text = to_summary(audit(CLOSE_PALETTE))
        section = text.split("**Pairs (most problematic first):**")[1]
        first = section.strip().splitlines()[0]
        assert first.startswith("1. #ff0000 / #fe0000")

    def test_exclude_pairs(self):
        text = to_summary(audit(CLOSE_PALETTE), include_pairs=False)
        assert "most problematic first" not in text

    def test_method_on_audit(self):
        a = audit(CLOSE_PALETTE)
        assert a.to_summary() == to_summary(a)


class TestSummaryJSON:

    def test_parses(self):
        data = json.loads(to_summary(audit(CLOSE_PALETTE), format=SerializerFormat.JSON))
        assert data["score"]["total_pairs"] == 6
        assert data["statuses"]["problematic_pairs"] == "warning"

    def test_pairs_sorted(self):
        data = json.loads(to_summary(audit(CLOSE_PALETTE), format=SerializerFormat.JSON))
        delta_es = [p["delta_e"] for p in data["pairs"]]
        assert delta_es == sorted(delta_es)

    def test_attention_has_advice(self):
        data = json.loads(to_summary(audit(CLOSE_PALETTE), format=SerializerFormat.JSON))
        assert data["attention"][0]["index1"] == 2
        assert data["attention"][0]["index2"] == 3
        assert data["attention"][0]["advice"].startswith("Nearly indistinguishable")

    def test_pretty(self):
        text = to_summary(audit(CLOSE_PALETTE), format=SerializerFormat.JSON_PRETTY)
        assert "\n  " in text

    def test_exclude_pairs(self):
        data = json.loads(
            to_summary(audit(CLOSE_PALETTE), format=SerializerFormat.JSON, include_pairs=False)
        )
        assert "pairs" not in data


class TestContextBlock:

    def test_xml_well_formed(self):
        root = ET.fromstring(to_context_block(audit(CLOSE_PALETTE)))
        assert root.tag == "palette_accessibility"
        assert root.get("version") == "1.0"
        assert len(root.find("palette")) == 4
        assert len(root.find("pairs")) == 6
        assert len(root.find("cvd")) == 3

    def test_xml_score(self):
        root = ET.fromstring(to_context_block(audit(["#000000", "#ffffff"])))
        score = root.find("score")
        assert score.get("overall") == "100"
        assert score.get("min_contrast") == "21.00"

    def test_xml_escapes_invalid_entries(self):
        root = ET.fromstring(to_context_block(audit(["#000000", 'a<b"c']), include_pairs=False))
        values = [c.get("value") for c in root.find("palette")]
        assert values == ["#000000", 'a<b"c']
        assert root.find("pairs") is None

    def test_xml_custom_tag(self):
        text = to_context_block(audit(["#000000"]), tag_name="palette")
        assert ET.fromstring(text).tag == "palette"

    def test_json_wrapper(self):
        text = to_context_block(audit(CLOSE_PALETTE), format=BlockFormat.JSON)
        data = json.loads(text)
        assert list(data) == ["palette_accessibility"]
        assert len(data["palette_accessibility"]["pairs"]) == 6

    def test_markdown_fence(self):
        text = to_context_block(audit(CLOSE_PALETTE), format=BlockFormat.MARKDOWN)
        lines = text.splitlines()
        assert lines[0] == "<!-- palette_accessibility -->"
        assert lines[1] == "```json"
        assert lines[-2] == "```"
        body = json.loads("\n".join(lines[2:-2]))
        assert body["colors"] == CLOSE_PALETTE

    def test_methods_on_audit(self):
        a = audit(CLOSE_PALETTE)
        assert a.to_xml() == to_context_block(a)
        assert a.to_markdown() == to_context_block(a, format=BlockFormat.MARKDOWN)
