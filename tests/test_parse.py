# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""Tests for color string parsing."""

import logging

import pytest

from palettescope.measure.parse import (
    ColorParseError,
    is_valid_color,
    parse,
    try_parse,
)
from palettescope.schema import HSLColor, LABColor, RGBColor


RED = RGBColor(1.0, 0.0, 0.0)


class TestHex:

    def test_long_form(self):
        assert parse("#ff0000") == RED

    def test_uppercase(self):
        assert parse("#FF0000") == RED

    def test_short_form(self):
        assert parse("#f00") == RED

    def test_alpha_is_dropped(self):
        assert parse("#ff000080") == RED
        assert parse("#f008") == RED

    def test_surrounding_whitespace(self):
        assert parse("  #ff0000\n") == RED

    def test_channel_values(self):
        assert parse("#1b9e77").to_uint8() == (27, 158, 119)

    def test_wrong_length(self):
        with pytest.raises(ColorParseError):
            parse("#ff000")

    def test_bad_digits(self):
        with pytest.raises(ColorParseError):
            parse("#gggggg")

    def test_hash_is_optional(self):
        assert parse("ff0000") == RED
        assert parse("F00") == RED

    def test_bare_digits_wrong_length(self):
        with pytest.raises(ColorParseError):
            parse("ff000")


class TestFunctional:

    def test_rgb_commas(self):
        assert parse("rgb(255, 0, 0)") == RED

    def test_rgb_spaces(self):
        assert parse("rgb(255 0 0)") == RED

    def test_rgb_percentages(self):
        assert parse("rgb(100%, 0%, 0%)") == RED

    def test_rgba(self):
        assert parse("rgba(255, 0, 0, 0.5)") == RED

    def test_slash_alpha(self):
        assert parse("rgb(255 0 0 / 50%)") == RED

    def test_rgb_clamps_out_of_range(self):
        assert parse("rgb(300, -5, 0)") == RED

    def test_hsl(self):
        assert parse("hsl(0, 100%, 50%)") == RED

    def test_hsl_deg_unit(self):
        assert parse("hsl(120deg 100% 50%)").to_uint8() == (0, 255, 0)

    def test_hsl_turn_unit(self):
        assert parse("hsl(0.5turn, 100%, 50%)").to_uint8() == (0, 255, 255)

    def test_hsla(self):
        assert parse("hsla(240, 100%, 50%, 0.3)").to_uint8() == (0, 0, 255)

    def test_case_insensitive(self):
        assert parse("RGB(255, 0, 0)") == RED

    def test_wrong_arity(self):
        with pytest.raises(ColorParseError):
            parse("rgb(1, 2)")

    def test_bad_number(self):
        with pytest.raises(ColorParseError):
            parse("rgb(a, b, c)")

    def test_bad_hue(self):
        with pytest.raises(ColorParseError):
            parse("hsl(abc, 10%, 10%)")


class TestNamed:

    def test_basic(self):
        assert parse("red") == RED

    def test_case_insensitive(self):
        assert parse("RebeccaPurple").to_uint8() == (102, 51, 153)

    def test_unknown_name(self):
        with pytest.raises(ColorParseError):
            parse("not-a-color")


class TestNonStrings:

    def test_rgb_object_passthrough(self):
        assert parse(RED) == RED

    def test_hsl_object(self):
        assert parse(HSLColor(h=0.0, s=100.0, l=50.0)).to_uint8() == (255, 0, 0)

    def test_lab_object(self):
        rgb = parse(LABColor(l=100.0, a=0.0, b=0.0))
        assert rgb.to_uint8() == (255, 255, 255)

    def test_number_rejected(self):
        with pytest.raises(ColorParseError):
            parse(123)

    def test_none_rejected(self):
        with pytest.raises(ColorParseError):
            parse(None)

    def test_empty_string(self):
        with pytest.raises(ColorParseError):
            parse("   ")


class TestParseError:

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse("nope")

    def test_carries_value_and_reason(self):
        with pytest.raises(ColorParseError) as exc_info:
            parse("#12")
        assert exc_info.value.value == "#12"
        assert exc_info.value.reason == "invalid hex color"
        assert "'#12'" in str(exc_info.value)


class TestNonFinite:
    """nan/inf must surface as ColorParseError, never a bare ValueError."""

    def test_hsl_hue(self):
        for text in ["hsl(nan, 50%, 50%)", "hsl(inf, 50%, 50%)", "hsl(-infdeg 50% 50%)"]:
            with pytest.raises(ColorParseError):
                parse(text)

    def test_hue_overflow_after_unit(self):
        with pytest.raises(ColorParseError):
            parse("hsl(1e308rad, 50%, 50%)")

    def test_hsl_saturation_and_lightness(self):
        with pytest.raises(ColorParseError):
            parse("hsl(120, nan%, 50%)")
        with pytest.raises(ColorParseError):
            parse("hsl(120, 50%, inf)")

    def test_rgb_channels(self):
        with pytest.raises(ColorParseError):
            parse("rgb(nan, 0, 0)")
        with pytest.raises(ColorParseError):
            parse("rgb(0 0 0 / inf)")

    def test_lab_object_with_nan_axis(self):
        with pytest.raises(ColorParseError):
            parse(LABColor(l=50.0, a=float("nan"), b=0.0))

    def test_lab_object_overflowing(self):
        with pytest.raises(ColorParseError):
            parse(LABColor(l=50.0, a=1e300, b=0.0))

    def test_try_parse_is_none(self):
        assert try_parse("hsl(inf, 50%, 50%)") is None
        assert try_parse(LABColor(l=50.0, a=0.0, b=float("inf"))) is None


class TestLenient:

    def test_try_parse_valid(self):
        assert try_parse("#ff0000") == RED

    def test_try_parse_invalid_is_none(self):
        assert try_parse("not-a-color") is None

    def test_try_parse_logs_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="palettescope.measure.parse")
        try_parse("not-a-color")
        assert "not-a-color" in caplog.text

    def test_is_valid_color(self):
        assert is_valid_color("#abc")
        assert is_valid_color("teal")
        assert not is_valid_color("#abcde")
        assert not is_valid_color(None)
