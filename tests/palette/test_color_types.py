from __future__ import annotations

"""Color / ColorInput / format_color の基本動作テスト。"""

import dataclasses

import pytest

from palette import Color, ColorFormat, ColorInput, InvalidColorFormat, format_color


def test_color_from_hsl_caches_rgb_and_hex() -> None:
    c = Color.from_hsl(0.0, 1.0, 0.5)
    assert c.to_hsl() == (0.0, 1.0, 0.5)
    assert c.to_rgb() == (255, 0, 0)
    assert c.to_hex() == "#ff0000"


def test_color_is_frozen() -> None:
    c = Color.from_hsl(0.0, 1.0, 0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.hex = "#000000"  # type: ignore[misc]


def test_format_color_each_encoding() -> None:
    hsl = (0.0, 1.0, 0.5)
    assert format_color(hsl, ColorFormat.RGB) == "rgb(255, 0, 0)"
    assert format_color(hsl, "hex") == "#ff0000"
    assert format_color(hsl, "hsl") == "hsl(0, 100%, 50%)"


def test_format_color_hsl_rounds_half_up() -> None:
    """12.5% は 13% になる（偶数丸めではない）。"""
    assert format_color((0.25, 0.125, 0.125), "hsl") == "hsl(90, 13%, 13%)"


def test_format_color_hsl_for_sample_base() -> None:
    c = Color.from_hsl(*ColorInput.from_hex("#c73d3d").to_hsl())
    assert c.format("hsl") == "hsl(0, 55%, 51%)"


def test_color_input_from_rgb_validates() -> None:
    assert ColorInput.from_rgb(199, 61, 61).value == (199, 61, 61)
    assert ColorInput.from_rgb(1.0, 2.0, 3.0).value == (1, 2, 3)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_rgb(256, 0, 0)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_rgb(-1, 0, 0)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_rgb(1.5, 0, 0)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_rgb("x", 0, 0)  # type: ignore[arg-type]
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_rgb(True, 0, 0)


def test_color_input_from_hex_normalizes() -> None:
    assert ColorInput.from_hex("#C73D3D").value == "#c73d3d"
    assert ColorInput.from_hex("  c73d3d ").value == "#c73d3d"
    for bad in ("#c73d3", "#c73d3d3d", "#zzzzzz", "#-73d3d", "#c7_d3d"):
        with pytest.raises(InvalidColorFormat):
            ColorInput.from_hex(bad)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_hex(0xC73D3D)  # type: ignore[arg-type]


def test_color_input_from_hsl_validates() -> None:
    assert ColorInput.from_hsl(0.33, 0.68, 0.51).value == (0.33, 0.68, 0.51)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_hsl(1.2, 0.5, 0.5)
    with pytest.raises(InvalidColorFormat):
        ColorInput.from_hsl(0.5, float("nan"), 0.5)


def test_color_input_to_hsl_for_each_format() -> None:
    expected = (0.0, 1.0, 0.5)
    assert ColorInput.from_rgb(255, 0, 0).to_hsl() == expected
    assert ColorInput.from_hex("#ff0000").to_hsl() == expected
    assert ColorInput.from_hsl(*expected).to_hsl() == expected


def test_color_input_equality_and_repr() -> None:
    a = ColorInput.from_hex("#C73D3D")
    b = ColorInput.from_hex("c73d3d")
    assert a == b
    assert hash(a) == hash(b)
    assert a != ColorInput.from_rgb(199, 61, 61)
    assert a.format is ColorFormat.HEX
    assert "hex" in repr(a)


def test_invalid_color_format_is_value_error() -> None:
    assert issubclass(InvalidColorFormat, ValueError)
