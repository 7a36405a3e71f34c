# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Color string parsing.

Accepted syntax (case-insensitive, surrounding whitespace ignored):

- Hex: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``; the ``#`` is optional
  and alpha is dropped
- Functional: ``rgb()``/``rgba()`` and ``hsl()``/``hsla()``, comma or
  space separated, with an optional ``/ alpha``
- CSS named colors

parse() raises ColorParseError so callers can decide whether to reject bad
input. try_parse() is the lenient form used throughout the engine: it
returns None instead, and every engine routine maps None onto its
documented fallback value.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

import numpy as np

from palettescope.schema.color import COLOR_TYPES, ColorLike, RGBColor
from palettescope.measure.colornames import CSS_COLOR_NAMES
from palettescope.measure.colorspace import hsl_to_srgb, to_rgb

logger = logging.getLogger(__name__)


class ColorParseError(ValueError):
    """A value could not be resolved to a color."""

    def __init__(self, value: object, reason: Optional[str] = None) -> None:
        self.value = value
        self.reason = reason
        message = f"Cannot parse color {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


_HEX_RE = re.compile(r"#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})")
_FUNC_RE = re.compile(r"(rgba?|hsla?)\(([^()]*)\)")
_ARG_SPLIT_RE = re.compile(r"[\s,/]+")
_HUE_UNITS = {"deg": 1.0, "grad": 0.9, "rad": 180.0 / np.pi, "turn": 360.0}


def parse(value: ColorLike) -> RGBColor:
    """
    Resolve a color string (or color object) to an RGBColor.

    Args:
        value: CSS-like color string, or an RGBColor/HSLColor/LABColor

    Returns:
        RGBColor with channels in [0, 1]

    Raises:
        ColorParseError: If the value does not describe a color
    """
    if isinstance(value, COLOR_TYPES):
        return to_rgb(value)
    if not isinstance(value, str):
        raise ColorParseError(value, f"expected a string, got {type(value).__name__}")

    text = value.strip().lower()
    if not text:
        raise ColorParseError(value, "empty string")

    if text.startswith("#"):
        return _parse_hex(text, value)

    m = _FUNC_RE.fullmatch(text)
    if m:
        name, body = m.group(1), m.group(2)
        args = [a for a in _ARG_SPLIT_RE.split(body.strip()) if a]
        if len(args) not in (3, 4):
            raise ColorParseError(value, f"{name}() takes 3 or 4 arguments")
        if len(args) == 4:
            # Alpha must still be well-formed even though it is discarded
            _parse_number(args[3], value)
        if name.startswith("rgb"):
            return _parse_rgb_args(args[:3], value)
        return _parse_hsl_args(args[:3], value)

    named = CSS_COLOR_NAMES.get(text)
    if named is not None:
        return _parse_hex(named, value)

    # Hex digits without the leading #
    if _HEX_RE.fullmatch(text):
        return _parse_hex(text, value)

    raise ColorParseError(value, "unrecognized color syntax")


def try_parse(value: ColorLike) -> Optional[RGBColor]:
    """Parse, or return None (and log at DEBUG) when the value is not a color."""
    try:
        return parse(value)
    except ColorParseError as e:
        logger.debug(f"Degrading unparseable color: {e}")
        return None


def is_valid_color(value: ColorLike) -> bool:
    """True if parse() would succeed."""
    try:
        parse(value)
    except ColorParseError:
        return False
    return True


# =============================================================================
# Helpers
# =============================================================================


def _parse_hex(text: str, original: object) -> RGBColor:
    m = _HEX_RE.fullmatch(text)
    if not m:
        raise ColorParseError(original, "invalid hex color")
    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return RGBColor.from_uint8(r, g, b)


def _parse_number(token: str, original: object) -> float:
    """Parse a plain number or a percentage (returned as a 0-1 fraction)."""
    try:
        value = float(token[:-1]) / 100.0 if token.endswith("%") else float(token)
    except ValueError:
        raise ColorParseError(original, f"invalid number {token!r}") from None
    if not math.isfinite(value):
        raise ColorParseError(original, f"non-finite number {token!r}")
    return value


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def _parse_rgb_args(args: list[str], original: object) -> RGBColor:
    channels = []
    for token in args:
        value = _parse_number(token, original)
        if not token.endswith("%"):
            value /= 255.0
        channels.append(_clamp01(value))
    return RGBColor(r=channels[0], g=channels[1], b=channels[2])


def _parse_hsl_args(args: list[str], original: object) -> RGBColor:
    hue_token = args[0]
    factor = 1.0
    for unit, unit_factor in _HUE_UNITS.items():
        if hue_token.endswith(unit):
            hue_token = hue_token[: -len(unit)]
            factor = unit_factor
            break
    try:
        hue = float(hue_token) * factor
    except ValueError:
        raise ColorParseError(original, f"invalid hue {args[0]!r}") from None
    if not math.isfinite(hue):
        raise ColorParseError(original, f"non-finite hue {args[0]!r}")

    # Saturation and lightness are percentages; bare numbers are read as percent
    s, l = (
        _parse_number(t, original) if t.endswith("%") else _parse_number(t, original) / 100.0
        for t in args[1:3]
    )
    srgb = hsl_to_srgb(np.array([hue % 360.0, _clamp01(s) * 100.0, _clamp01(l) * 100.0]))
    r, g, b = (float(v) for v in np.clip(srgb, 0.0, 1.0))
    return RGBColor(r=r, g=g, b=b)
