from __future__ import annotations

"""High-level public API for generating tonal color palettes.

This module coordinates input normalization, the lightness spread and
output formatting. :func:`build_palette` returns a :class:`palette.Palette`;
:func:`generate_palette` returns just the formatted strings, which is what
renderers and exporters consume.
"""

import logging
from typing import List, Optional

from .color_format import ColorFormat
from .color_types import Color, ColorInput
from .engine import ColorEngine, DefaultColorEngine
from .lightness import generate_raw_colors, validate_n_colors
from .palette import Palette

logger = logging.getLogger(__name__)


def build_palette(
    base_color: ColorInput,
    n_colors: int = 10,
    output_format: ColorFormat | str = ColorFormat.RGB,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate a tonal palette from a base color.

    Parameters
    ----------
    base_color:
        ColorInput specifying the base color (RGB / HEX / HSL).
    n_colors:
        Number of colors to generate, in [2, 20]. Out-of-range values raise
        ``ValueError``; use :func:`palette.ui_helpers.normalize_n_colors` to
        clamp free-form UI values first.
    output_format:
        Encoding of the palette labels.
    engine:
        Optional ColorEngine for color space conversions. If None,
        DefaultColorEngine is used.

    Returns
    -------
    Palette
        Colors ordered from darkest to lightest. Only lightness varies.
    """
    validate_n_colors(n_colors)
    fmt = ColorFormat.coerce(output_format)

    if engine is None:
        engine = DefaultColorEngine()

    base_hsl = base_color.to_hsl(engine)
    raw_colors = generate_raw_colors(base_hsl, n_colors)
    colors = tuple(Color.from_hsl(h, s, l, engine) for h, s, l in raw_colors)
    logger.debug(
        "generated %d colors from %r (hsl=%s) as %s", n_colors, base_color, base_hsl, fmt.value
    )
    return Palette(base_color=base_color, output_format=fmt, colors=colors)


def generate_palette(
    base_color: ColorInput,
    n_colors: int = 10,
    output_format: ColorFormat | str = ColorFormat.RGB,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Generate a palette and return its formatted color strings in order."""
    return list(build_palette(base_color, n_colors, output_format, engine).labels)
