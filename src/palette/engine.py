from __future__ import annotations

"""Color conversion engine for RGB, HSL and HEX.

This module defines the conversion functions between the three encodings
used throughout the library, the :class:`ColorEngine` protocol and a default
implementation that delegates to those functions.

Conventions
-----------
- RGB channels are integers in [0, 255].
- HSL components are floats in [0, 1]; hue is a fraction of a full turn.
- HEX strings are ``"#rrggbb"``; output is always lowercase.
"""

import math
import re
from typing import Protocol, Tuple, Union

from .color_format import ColorFormat
from .errors import InvalidColorFormat


RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]
EncodedColor = Union[RGB, HSL, str]

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties towards +inf.

    Python's built-in ``round`` uses banker's rounding, which would turn a
    channel value of 127.5 into 128 but 126.5 into 126.
    """
    return int(math.floor(x + 0.5))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert RGB in [0, 255] to HSL in [0, 1]."""
    r_f = r / 255.0
    g_f = g / 255.0
    b_f = b / 255.0
    c_max = max(r_f, g_f, b_f)
    c_min = min(r_f, g_f, b_f)
    l = (c_max + c_min) / 2.0

    if c_max == c_min:
        # achromatic
        return (0.0, 0.0, l)

    d = c_max - c_min
    s = d / (2.0 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)
    if c_max == r_f:
        h = ((g_f - b_f) / d) % 6.0
    elif c_max == g_f:
        h = (b_f - r_f) / d + 2.0
    else:
        h = (r_f - g_f) / d + 4.0
    return (h / 6.0, s, l)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL in [0, 1] to RGB in [0, 255]."""
    if s == 0:
        r = g = b = l
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_rgb(p, q, h + 1.0 / 3.0)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1.0 / 3.0)
    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode RGB in [0, 255] as ``"#rrggbb"``."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: str) -> RGB:
    """Decode ``"#rrggbb"`` (any case) into RGB in [0, 255].

    Raises
    ------
    InvalidColorFormat
        If ``hex_str`` is not ``#`` followed by exactly 6 hex digits.
    """
    if not isinstance(hex_str, str) or not _HEX_RE.match(hex_str):
        raise InvalidColorFormat(f"invalid hex color: {hex_str!r} (expected #rrggbb)")
    value = int(hex_str[1:], 16)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_hsl(hex_str: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_str))


def _to_rgb(value: EncodedColor, fmt: ColorFormat) -> RGB:
    if fmt is ColorFormat.RGB:
        r, g, b = value  # type: ignore[misc]
        return (int(r), int(g), int(b))
    if fmt is ColorFormat.HEX:
        return hex_to_rgb(value)  # type: ignore[arg-type]
    if fmt is ColorFormat.HSL:
        return hsl_to_rgb(*value)  # type: ignore[misc]
    raise ValueError(f"Unsupported ColorFormat: {fmt}")


def convert(
    value: EncodedColor,
    from_format: ColorFormat | str,
    to_format: ColorFormat | str,
) -> EncodedColor:
    """Convert an encoded color between any two formats.

    Parameters
    ----------
    value:
        ``(r, g, b)`` ints for RGB, ``"#rrggbb"`` for HEX, ``(h, s, l)`` floats
        for HSL.
    from_format, to_format:
        :class:`ColorFormat` members or their string values.

    Returns
    -------
    The color in ``to_format``'s encoding. RGB and HEX are converted directly,
    without a lossy trip through HSL.
    """
    src = ColorFormat.coerce(from_format)
    dst = ColorFormat.coerce(to_format)

    if src is dst:
        if src is ColorFormat.HEX:
            return rgb_to_hex(*hex_to_rgb(value))  # type: ignore[arg-type]
        return tuple(value)  # type: ignore[return-value]

    if src is ColorFormat.HSL and dst is ColorFormat.HEX:
        return hsl_to_hex(*value)  # type: ignore[misc]
    if dst is ColorFormat.HSL:
        if src is ColorFormat.HEX:
            return hex_to_hsl(value)  # type: ignore[arg-type]
        return rgb_to_hsl(*_to_rgb(value, src))

    rgb = _to_rgb(value, src)
    if dst is ColorFormat.RGB:
        return rgb
    if dst is ColorFormat.HEX:
        return rgb_to_hex(*rgb)
    raise ValueError(f"Unsupported ColorFormat: {dst}")


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def rgb_to_hsl(self, r: int, g: int, b: int) -> HSL: ...

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB: ...

    def hex_to_rgb(self, hex_str: str) -> RGB: ...

    def rgb_to_hex(self, r: int, g: int, b: int) -> str: ...


class DefaultColorEngine:
    """Default implementation backed by the module-level conversions."""

    def rgb_to_hsl(self, r: int, g: int, b: int) -> HSL:
        return rgb_to_hsl(r, g, b)

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB:
        return hsl_to_rgb(h, s, l)

    def hex_to_rgb(self, hex_str: str) -> RGB:
        return hex_to_rgb(hex_str)

    def rgb_to_hex(self, r: int, g: int, b: int) -> str:
        return rgb_to_hex(r, g, b)


__all__ = [
    "RGB",
    "HSL",
    "EncodedColor",
    "round_half_up",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "hsl_to_hex",
    "hex_to_hsl",
    "convert",
    "ColorEngine",
    "DefaultColorEngine",
]
