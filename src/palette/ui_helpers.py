from __future__ import annotations

"""Helper utilities for integrating the palette library into external UIs.

This module exposes label/enum pairs for the color formats and color counts,
parses user-entered base color text into :class:`ColorInput`, and normalizes
free-form count values so UI code can call :func:`palette.build_palette`
without pre-validating anything itself.
"""

import logging
import re
from typing import Any, Dict, List

from common import settings
from util.utils import palette_section

from .color_format import ColorFormat
from .color_types import ColorInput
from .errors import InvalidColorFormat
from .lightness import MAX_COLORS, MIN_COLORS

logger = logging.getLogger(__name__)

# Label/Enum pairs for UI choices
FORMAT_OPTIONS: List[tuple[str, ColorFormat]] = [
    ("RGB", ColorFormat.RGB),
    ("HEX", ColorFormat.HEX),
    ("HSL", ColorFormat.HSL),
]
COLOR_COUNT_OPTIONS: List[int] = list(range(MIN_COLORS, MAX_COLORS + 1))

FORMAT_LABEL_MAP: Dict[str, ColorFormat] = {label: value for label, value in FORMAT_OPTIONS}

# Plain decimal components only (no signs, exponents or digit separators)
_RGB_COMPONENT_RE = re.compile(r"^[0-9]+$")
_HSL_COMPONENT_RE = re.compile(r"^(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")

_PLACEHOLDERS: Dict[ColorFormat, str] = {
    ColorFormat.RGB: "199, 61, 61",
    ColorFormat.HEX: "#C73D3D",
    ColorFormat.HSL: "0.33, 0.68, 0.51",
}


def placeholder_for(fmt: ColorFormat | str) -> str:
    """Return example base color text for an input field in the given format."""
    return _PLACEHOLDERS[ColorFormat.coerce(fmt)]


def _split_components(text: str, fmt: ColorFormat) -> List[str]:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3 or any(p == "" for p in parts):
        raise InvalidColorFormat(
            f"{fmt.value.upper()} color must have 3 comma-separated components: {text!r}"
        )
    return parts


def parse_color_text(text: str, fmt: ColorFormat | str) -> ColorInput:
    """Parse user-entered base color text.

    Accepted forms:

    - RGB: ``"199, 61, 61"`` (integers in [0, 255])
    - HEX: ``"#C73D3D"`` or ``"c73d3d"``
    - HSL: ``"0.33, 0.68, 0.51"`` (fractions in [0, 1])

    Raises
    ------
    InvalidColorFormat
        If the text does not match the selected format.
    """
    if not isinstance(text, str):
        raise InvalidColorFormat(f"color text must be a string, got {type(text)!r}")
    in_fmt = ColorFormat.coerce(fmt)
    stripped = text.strip()

    if in_fmt is ColorFormat.HEX:
        return ColorInput.from_hex(stripped)

    parts = _split_components(stripped, in_fmt)
    if in_fmt is ColorFormat.RGB:
        if not all(_RGB_COMPONENT_RE.match(p) for p in parts):
            raise InvalidColorFormat(f"RGB components must be integers: {text!r}")
        r, g, b = (int(p) for p in parts)
        return ColorInput.from_rgb(r, g, b)

    if in_fmt is ColorFormat.HSL:
        if not all(_HSL_COMPONENT_RE.match(p) for p in parts):
            raise InvalidColorFormat(f"HSL components must be numbers: {text!r}")
        h, s, l = (float(p) for p in parts)
        return ColorInput.from_hsl(h, s, l)

    raise ValueError(f"Unsupported ColorFormat: {fmt}")


def default_n_colors() -> int:
    """Resolve the default color count.

    A valid ``palette.n_colors`` in the YAML config wins; otherwise the
    ``TPAL_DEFAULT_N_COLORS`` setting (10 unless overridden) is used.
    """
    fallback = settings.get().DEFAULT_N_COLORS
    raw = palette_section().get("n_colors", fallback)
    if isinstance(raw, int) and not isinstance(raw, bool) and MIN_COLORS <= raw <= MAX_COLORS:
        return raw
    logger.debug("ignoring invalid configured n_colors: %r", raw)
    return fallback


def default_format(key: str, fallback: ColorFormat = ColorFormat.RGB) -> ColorFormat:
    """Resolve ``base_format`` / ``output_format`` from configuration."""
    raw = palette_section().get(key)
    if raw is None:
        return fallback
    try:
        return ColorFormat.from_value(str(raw))
    except ValueError:
        logger.debug("ignoring invalid configured %s: %r", key, raw)
        return fallback


def normalize_n_colors(value: Any | None) -> int:
    """Normalize a UI-supplied count into [2, 20].

    - ``None`` or non-integer values fall back to :func:`default_n_colors`.
    - Integers outside the range are clamped to the nearest bound.
    """
    if value is None or isinstance(value, bool):
        return default_n_colors()
    try:
        n = int(str(value).strip())
    except ValueError:
        return default_n_colors()
    return max(MIN_COLORS, min(MAX_COLORS, n))


__all__ = [
    "FORMAT_OPTIONS",
    "COLOR_COUNT_OPTIONS",
    "FORMAT_LABEL_MAP",
    "placeholder_for",
    "parse_color_text",
    "default_n_colors",
    "default_format",
    "normalize_n_colors",
]
