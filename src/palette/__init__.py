"""Public entrypoint for the tonal-palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules. Exporters live in :mod:`palette.export` and are imported
separately because they pull in Matplotlib.
"""

from .color_format import ColorFormat
from .color_types import Color, ColorInput, format_color
from .engine import (
    convert,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)
from .errors import InvalidColorFormat
from .palette import Palette
from .lightness import MAX_COLORS, MIN_COLORS, compute_lightness_offsets
from .api import build_palette, generate_palette
from .state import PaletteState
from .ui_helpers import (
    COLOR_COUNT_OPTIONS,
    FORMAT_OPTIONS,
    normalize_n_colors,
    parse_color_text,
)

__all__ = [
    "ColorFormat",
    "Color",
    "ColorInput",
    "format_color",
    "convert",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "hsl_to_hex",
    "hex_to_hsl",
    "InvalidColorFormat",
    "Palette",
    "MIN_COLORS",
    "MAX_COLORS",
    "compute_lightness_offsets",
    "build_palette",
    "generate_palette",
    "PaletteState",
    "FORMAT_OPTIONS",
    "COLOR_COUNT_OPTIONS",
    "normalize_n_colors",
    "parse_color_text",
]
