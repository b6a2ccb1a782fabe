from __future__ import annotations

"""Immutable application state for palette UIs.

A :class:`PaletteState` captures everything a palette screen shows: the base
color text and its format, the output format, the requested count and the
current palette. Every update returns a new instance; nothing is modified in
place, so a regenerated palette replaces the previous one as a whole.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from .api import build_palette
from .color_format import ColorFormat
from .palette import Palette
from .ui_helpers import default_format, default_n_colors, normalize_n_colors, parse_color_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteState:
    """Snapshot of a palette session.

    Attributes
    ----------
    base_text:
        Base color as typed by the user, e.g. ``"199, 61, 61"``.
    base_format:
        Encoding ``base_text`` is parsed with.
    output_format:
        Encoding of the generated palette labels.
    n_colors:
        Requested number of colors. Normalized into [2, 20] on construction.
    palette:
        Most recently generated palette, or None before the first generation.
    """

    base_text: str = ""
    base_format: ColorFormat = ColorFormat.RGB
    output_format: ColorFormat = ColorFormat.RGB
    n_colors: int = 10
    palette: Optional[Palette] = None

    def __post_init__(self) -> None:
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "base_format", ColorFormat.coerce(self.base_format))
        object.__setattr__(self, "output_format", ColorFormat.coerce(self.output_format))
        object.__setattr__(self, "n_colors", normalize_n_colors(self.n_colors))

    @classmethod
    def from_config(cls) -> "PaletteState":
        """Build an empty state using the configured defaults."""
        return cls(
            base_format=default_format("base_format"),
            output_format=default_format("output_format"),
            n_colors=default_n_colors(),
        )

    @property
    def can_generate(self) -> bool:
        return bool(self.base_text.strip())

    @property
    def can_export(self) -> bool:
        return self.palette is not None and len(self.palette) > 0

    @property
    def labels(self) -> tuple[str, ...]:
        return self.palette.labels if self.palette is not None else ()

    def with_base_text(self, text: str) -> "PaletteState":
        return replace(self, base_text=text)

    def with_base_format(self, fmt: ColorFormat | str) -> "PaletteState":
        return replace(self, base_format=ColorFormat.coerce(fmt))

    def with_output_format(self, fmt: ColorFormat | str) -> "PaletteState":
        return replace(self, output_format=ColorFormat.coerce(fmt))

    def with_n_colors(self, value: Any) -> "PaletteState":
        return replace(self, n_colors=normalize_n_colors(value))

    def generate(self) -> "PaletteState":
        """Return a new state holding a freshly generated palette.

        Without base text this is a no-op and returns ``self``. Malformed
        base text raises :class:`palette.errors.InvalidColorFormat` and
        leaves the caller's state untouched.
        """
        if not self.can_generate:
            logger.debug("generate skipped: no base color")
            return self
        base = parse_color_text(self.base_text, self.base_format)
        pal = build_palette(base, self.n_colors, self.output_format)
        return replace(self, palette=pal)


__all__ = ["PaletteState"]
