# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

from enum import Enum

from palettescope.measure.colorspace import color_info, format_hex
from palettescope.schema.color import COLOR_TYPES


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def color_label(color) -> str:
    """Display form of a palette entry: hex for color objects, else as given."""
    if isinstance(color, COLOR_TYPES):
        return format_hex(color)
    return str(color)


def describe_color(color) -> str:
    """Generate a short human-readable name for a palette entry."""
    info = color_info(color)
    if info is None:
        return "Invalid color"

    hsl = info["hsl"]
    if hsl["s"] < 10 or hsl["l"] > 95 or hsl["l"] < 5:
        if hsl["l"] > 95:
            return "White"
        if hsl["l"] < 5:
            return "Black"
        if hsl["l"] < 30:
            return "Dark gray"
        if hsl["l"] > 75:
            return "Light gray"
        return "Gray"

    name = _hue_to_name(hsl["h"])
    if hsl["l"] > 75:
        return f"Light {name.lower()}"
    if hsl["l"] < 30:
        return f"Dark {name.lower()}"
    return name


def _hue_to_name(hue: float) -> str:
    """Convert HSL hue angle to an approximate color name.

    HSL hue wheel (approximate ranges used here):
      0-14, 345-359: Red
      15-44: Orange
      45-69: Yellow
      70-164: Green
      165-194: Cyan
      195-254: Blue
      255-289: Purple
      290-344: Pink
    """
    if hue < 15 or hue >= 345:
        return "Red"
    elif hue < 45:
        return "Orange"
    elif hue < 70:
        return "Yellow"
    elif hue < 165:
        return "Green"
    elif hue < 195:
        return "Cyan"
    elif hue < 255:
        return "Blue"
    elif hue < 290:
        return "Purple"
    else:
        return "Pink"
