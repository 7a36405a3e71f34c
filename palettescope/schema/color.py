# Copyright (c) 2026 Palettescope
# SPDX-License-Identifier: MIT

"""
Color value types.

A color is one of three tagged variants, each carrying only the fields of
its own space:

- RGBColor: sRGB channels as fractions in [0, 1]
- HSLColor: hue in degrees, saturation and lightness in percent
- LABColor: CIELAB under the D65 white point

Conversions between variants live in palettescope.measure.colorspace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A color in the sRGB space.

    Attributes:
        r: Red channel (0.0-1.0)
        g: Green channel (0.0-1.0)
        b: Blue channel (0.0-1.0)
    """
    mode: ClassVar[str] = "rgb"

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        """Validate channels are within [0, 1]."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Channel {name} must be 0-1, got {value}")

    @classmethod
    def from_uint8(cls, r: int, g: int, b: int) -> RGBColor:
        """Build from 8-bit channel values (0-255)."""
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    def to_uint8(self) -> tuple[int, int, int]:
        """8-bit channel values for display, rounded half-up."""
        return tuple(int(v * 255.0 + 0.5) for v in (self.r, self.g, self.b))

    @property
    def hex(self) -> str:
        """Canonical lowercase ``#rrggbb`` form."""
        r, g, b = self.to_uint8()
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"mode": self.mode, "r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in the HSL cylinder of sRGB.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation in percent (0-100)
        l: Lightness in percent (0-100)
    """
    mode: ClassVar[str] = "hsl"

    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0.0 <= self.s <= 100.0:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0.0 <= self.l <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"mode": self.mode, "h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True, slots=True)
class LABColor:
    """
    A color in CIELAB (D65).

    Attributes:
        l: Lightness (0 = black, 100 = white)
        a: Green-red axis, roughly -128..127
        b: Blue-yellow axis, roughly -128..127
    """
    mode: ClassVar[str] = "lab"

    l: float
    a: float
    b: float

    def __post_init__(self) -> None:
        # Small overshoot is normal after float round trips
        if not -1e-6 <= self.l <= 100.0 + 1e-6:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"mode": self.mode, "l": self.l, "a": self.a, "b": self.b}


Color = Union[RGBColor, HSLColor, LABColor]

# Anything the engine accepts where a color is expected
ColorLike = Union[str, RGBColor, HSLColor, LABColor]

COLOR_TYPES = (RGBColor, HSLColor, LABColor)


def color_from_dict(data: dict) -> Color:
    """Deserialize any color variant from its ``to_dict`` form."""
    mode = data.get("mode")
    if mode == "rgb":
        return RGBColor(r=data["r"], g=data["g"], b=data["b"])
    if mode == "hsl":
        return HSLColor(h=data["h"], s=data["s"], l=data["l"])
    if mode == "lab":
        return LABColor(l=data["l"], a=data["a"], b=data["b"])
    raise ValueError(f"Unknown color mode: {mode!r}")
