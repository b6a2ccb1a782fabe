from __future__ import annotations

"""Container type for generated color palettes.

This module defines the :class:`Palette` dataclass, which groups the
base color, output format, and the ordered tuple of generated colors.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .color_format import ColorFormat
from .color_types import Color, ColorInput


@dataclass(frozen=True)
class Palette:
    """Generated tonal palette.

    Attributes
    ----------
    base_color:
        Base color from which the palette was generated.
    output_format:
        Encoding used for the display labels.
    colors:
        Colors ordered from darkest (index 0) to lightest. Stored as a tuple
        so a palette can be shared without being modified in place.
    """

    base_color: ColorInput
    output_format: ColorFormat
    colors: Tuple[Color, ...]

    @property
    def labels(self) -> Tuple[str, ...]:
        """Formatted color strings in palette order."""
        return tuple(c.format(self.output_format) for c in self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]
