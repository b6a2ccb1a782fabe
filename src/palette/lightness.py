from __future__ import annotations

"""Tonal lightness spread and palette skeleton generation.

This module computes the signed lightness offsets applied to the base color
and the raw HSL colors of a palette before formatting.

The center index is ``n // 2`` (floor division). For odd ``n`` the spread is
symmetric around the base; for even ``n`` there is one more darker variant
than lighter ones. This asymmetry is part of the contract.
"""

from typing import List, Tuple


HSL = Tuple[float, float, float]

MIN_COLORS = 2
MAX_COLORS = 20


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def validate_n_colors(n_colors: int) -> int:
    """Return ``n_colors`` if it is an int in [MIN_COLORS, MAX_COLORS]."""
    if isinstance(n_colors, bool) or not isinstance(n_colors, int):
        raise ValueError(f"n_colors must be an int, got {n_colors!r}.")
    if not (MIN_COLORS <= n_colors <= MAX_COLORS):
        raise ValueError(f"n_colors must be in [{MIN_COLORS}, {MAX_COLORS}], got {n_colors}.")
    return n_colors


def compute_lightness_offsets(n_colors: int) -> List[float]:
    """Compute signed lightness offsets for each palette index.

    ``factor_i = (i - n // 2) * (1 / n)``; negative offsets darken, positive
    offsets lighten, and index ``n // 2`` is exactly 0.
    """
    if n_colors <= 0:
        raise ValueError("n_colors must be positive.")
    center = n_colors // 2
    step = 1.0 / n_colors
    return [(i - center) * step for i in range(n_colors)]


def adjust_lightness(hsl: HSL, factor: float) -> HSL:
    """Shift lightness by ``factor``, clamped to [0, 1]. Hue and saturation are kept."""
    h, s, l = hsl
    return (h, s, _clamp01(l + factor))


def generate_raw_colors(base_hsl: HSL, n_colors: int) -> List[HSL]:
    """Generate raw (h, s, l) colors ordered from darkest to lightest."""
    return [adjust_lightness(base_hsl, f) for f in compute_lightness_offsets(n_colors)]


__all__ = [
    "MIN_COLORS",
    "MAX_COLORS",
    "validate_n_colors",
    "compute_lightness_offsets",
    "adjust_lightness",
    "generate_raw_colors",
]
