from __future__ import annotations

"""Core color types used by the palette library.

This module defines simple, explicit data structures for representing a
generated color in all three encodings, and a small wrapper for validated
user-supplied base colors.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .color_format import ColorFormat
from .engine import ColorEngine, DefaultColorEngine, round_half_up
from .errors import InvalidColorFormat


RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def format_color(hsl: HSL, fmt: ColorFormat | str, engine: ColorEngine | None = None) -> str:
    """Format an HSL triple as a display string in the requested encoding.

    - RGB: ``"rgb(199, 61, 61)"``
    - HEX: ``"#c73d3d"``
    - HSL: ``"hsl(0, 55%, 51%)"`` with hue in degrees and percentages, each
      rounded to the nearest integer.
    """
    if engine is None:
        engine = DefaultColorEngine()
    out_fmt = ColorFormat.coerce(fmt)
    h, s, l = hsl
    if out_fmt is ColorFormat.RGB:
        r, g, b = engine.hsl_to_rgb(h, s, l)
        return f"rgb({r}, {g}, {b})"
    if out_fmt is ColorFormat.HEX:
        return engine.rgb_to_hex(*engine.hsl_to_rgb(h, s, l))
    if out_fmt is ColorFormat.HSL:
        return (
            f"hsl({round_half_up(h * 360)}, "
            f"{round_half_up(s * 100)}%, {round_half_up(l * 100)}%)"
        )
    raise ValueError(f"Unsupported ColorFormat: {fmt}")


@dataclass(frozen=True)
class Color:
    """Concrete color representation in HSL, RGB and HEX.

    Attributes
    ----------
    hsl:
        Tuple of (h, s, l), each in [0, 1].
    rgb:
        Tuple of (r, g, b) integers in [0, 255].
    hex:
        Hex representation ``"#rrggbb"``. Stored primarily as a cache.
    """

    hsl: HSL
    rgb: RGB
    hex: str

    def to_hex(self) -> str:
        """Return hex representation of the color."""
        return self.hex

    def to_rgb(self) -> RGB:
        """Return RGB representation as (r, g, b) in [0, 255]."""
        return self.rgb

    def to_hsl(self) -> HSL:
        """Return HSL representation as (h, s, l) in [0, 1]."""
        return self.hsl

    def format(self, fmt: ColorFormat | str) -> str:
        """Return the display string in the given encoding.

        RGB and HEX come from the cached channels so labels agree with the
        engine that built this color.
        """
        fmt = ColorFormat.coerce(fmt)
        if fmt is ColorFormat.RGB:
            r, g, b = self.rgb
            return f"rgb({r}, {g}, {b})"
        if fmt is ColorFormat.HEX:
            return self.hex
        return format_color(self.hsl, fmt)

    @classmethod
    def from_hsl(
        cls,
        h: float,
        s: float,
        l: float,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from HSL components in [0, 1]."""
        if engine is None:
            engine = DefaultColorEngine()
        rgb = engine.hsl_to_rgb(h, s, l)
        return cls(hsl=(h, s, l), rgb=rgb, hex=engine.rgb_to_hex(*rgb))


def _check_real(name: str, v: object) -> float:
    if isinstance(v, bool):
        raise InvalidColorFormat(f"{name} must be a number, got {v!r}.")
    try:
        f = float(v)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidColorFormat(f"{name} must be a number, got {v!r}.") from exc
    if math.isnan(f):
        raise InvalidColorFormat(f"{name} must not be NaN.")
    return f


class ColorInput:
    """User-facing base color wrapper supporting the three encodings.

    Use one of the constructor-like class methods to create instances; they
    validate components and raise :class:`InvalidColorFormat` on bad input.
    At generation time a ColorEngine converts the value into HSL, the
    internal representation.
    """

    def __init__(self, *, _format: ColorFormat, _value) -> None:
        self._format = _format
        self._value = _value

    @property
    def format(self) -> ColorFormat:
        return self._format

    @property
    def value(self):
        return self._value

    def __repr__(self) -> str:
        return f"ColorInput({self._format.value}={self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorInput):
            return NotImplemented
        return self._format is other._format and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._format, self._value))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "ColorInput":
        """Create ColorInput from integer RGB values in [0, 255]."""
        channels = []
        for name, v in (("r", r), ("g", g), ("b", b)):
            f = _check_real(name, v)
            if not f.is_integer():
                raise InvalidColorFormat(f"{name} must be an integer, got {v!r}.")
            if not (0 <= f <= 255):
                raise InvalidColorFormat(f"{name} must be in [0, 255].")
            channels.append(int(f))
        return cls(_format=ColorFormat.RGB, _value=tuple(channels))

    @classmethod
    def from_hex(cls, hex_str: str) -> "ColorInput":
        """Create ColorInput from a hex string (#rrggbb or rrggbb, any case)."""
        if not isinstance(hex_str, str):
            raise InvalidColorFormat(f"HEX color must be a string, got {hex_str!r}.")
        s = hex_str.strip()
        if s.startswith("#"):
            s = s[1:]
        if len(s) != 6:
            raise InvalidColorFormat(f"HEX string must be 6 hex digits: {hex_str!r}")
        if not all(ch in _HEX_DIGITS for ch in s):
            raise InvalidColorFormat(f"HEX string must contain only hex digits: {hex_str!r}")
        return cls(_format=ColorFormat.HEX, _value="#" + s.lower())

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "ColorInput":
        """Create ColorInput from HSL values, each in [0, 1]."""
        comps = []
        for name, v in (("h", h), ("s", s), ("l", l)):
            f = _check_real(name, v)
            if not (0.0 <= f <= 1.0):
                raise InvalidColorFormat(f"{name} must be in [0, 1].")
            comps.append(f)
        return cls(_format=ColorFormat.HSL, _value=tuple(comps))

    def to_hsl(self, engine: ColorEngine | None = None) -> HSL:
        """Convert the input into HSL using the given ColorEngine."""
        if engine is None:
            engine = DefaultColorEngine()

        if self._format is ColorFormat.HSL:
            h, s, l = self._value
            return (h, s, l)

        if self._format is ColorFormat.RGB:
            return engine.rgb_to_hsl(*self._value)

        if self._format is ColorFormat.HEX:
            return engine.rgb_to_hsl(*engine.hex_to_rgb(self._value))

        raise RuntimeError(f"Unknown ColorInput format: {self._format}")


__all__ = ["RGB", "HSL", "Color", "ColorInput", "format_color"]
