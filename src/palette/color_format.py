from __future__ import annotations

"""Closed set of color encodings used for input and output."""

from enum import Enum


class ColorFormat(Enum):
    """Supported color encodings."""

    RGB = "rgb"
    HEX = "hex"
    HSL = "hsl"

    @classmethod
    def from_value(cls, value: str) -> "ColorFormat":
        key = value.strip().lower()
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise ValueError(f"Unknown color format: {value}")

    @classmethod
    def coerce(cls, value: "ColorFormat | str") -> "ColorFormat":
        return value if isinstance(value, ColorFormat) else cls.from_value(value)


__all__ = ["ColorFormat"]
