from __future__ import annotations

"""変換/生成の性質テスト（hypothesis）。"""

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from palette import ColorInput, build_palette
from palette.engine import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

channel = st.integers(0, 255)
unit = st.floats(0.0, 1.0, allow_nan=False)


@given(r=channel, g=channel, b=channel)
def test_hex_round_trip_is_exact(r, g, b):
    assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)


@given(r=channel, g=channel, b=channel)
def test_hsl_round_trip_within_one(r, g, b):
    back = hsl_to_rgb(*rgb_to_hsl(r, g, b))
    assert all(abs(x - y) <= 1 for x, y in zip(back, (r, g, b)))


@given(x=channel)
def test_achromatic_rgb_to_hsl(x):
    assert rgb_to_hsl(x, x, x) == (0.0, 0.0, x / 255)


@given(h=unit, s=unit, l=unit)
def test_hsl_to_rgb_stays_in_range(h, s, l):
    assert all(0 <= c <= 255 for c in hsl_to_rgb(h, s, l))


@given(n=st.integers(2, 20), h=unit, s=unit, l=unit)
def test_palette_length_and_monotonic_lightness(n, h, s, l):
    pal = build_palette(ColorInput.from_hsl(h, s, l), n, "rgb")
    assert len(pal) == n
    lights = [c.hsl[2] for c in pal]
    assert lights == sorted(lights)
    assert all(0.0 <= v <= 1.0 for v in lights)
    assert pal[n // 2].hsl[2] == l
