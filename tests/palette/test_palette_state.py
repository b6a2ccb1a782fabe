from __future__ import annotations

"""PaletteState（イミュータブルなセッション状態）と util.palette_state のテスト。"""

import dataclasses

import pytest

import palette.ui_helpers as ui
from palette import ColorFormat, InvalidColorFormat, PaletteState
from util.palette_state import get_state, set_state, update_state


def _red_state() -> PaletteState:
    return PaletteState().with_base_text("199, 61, 61")


def test_generate_without_base_text_is_noop() -> None:
    s = PaletteState()
    assert not s.can_generate
    assert s.generate() is s
    assert PaletteState().with_base_text("   ").generate().palette is None


def test_generate_returns_new_state() -> None:
    s0 = _red_state()
    s1 = s0.generate()
    assert s0.palette is None
    assert s1 is not s0
    assert s1.palette is not None
    assert len(s1.palette) == 10
    assert s1.can_export
    assert not s0.can_export


def test_updates_are_copies() -> None:
    s0 = PaletteState()
    s1 = s0.with_base_format("hex").with_output_format(ColorFormat.HSL).with_n_colors("4")
    assert (s0.base_format, s0.output_format, s0.n_colors) == (
        ColorFormat.RGB,
        ColorFormat.RGB,
        10,
    )
    assert (s1.base_format, s1.output_format, s1.n_colors) == (
        ColorFormat.HEX,
        ColorFormat.HSL,
        4,
    )


def test_with_n_colors_clamps() -> None:
    assert PaletteState().with_n_colors(0).n_colors == 2
    assert PaletteState().with_n_colors(99).n_colors == 20


def test_regeneration_replaces_whole_palette() -> None:
    s1 = _red_state().generate()
    s2 = s1.with_n_colors(4).with_output_format("hex").generate()
    assert len(s1.palette) == 10
    assert len(s2.palette) == 4
    assert all(label.startswith("#") for label in s2.labels)
    assert all(label.startswith("rgb(") for label in s1.labels)


def test_state_is_frozen() -> None:
    s = PaletteState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.n_colors = 3  # type: ignore[misc]


def test_malformed_base_text_raises_and_keeps_state() -> None:
    s = PaletteState().with_base_text("#c73d3d")
    with pytest.raises(InvalidColorFormat):
        s.generate()
    assert s.palette is None
    assert s.with_base_format("hex").generate().palette is not None


def test_labels_empty_before_generation() -> None:
    assert PaletteState().labels == ()


def test_from_config_uses_configured_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        ui,
        "palette_section",
        lambda: {"n_colors": 5, "base_format": "hex", "output_format": "hsl"},
    )
    s = PaletteState.from_config()
    assert s.n_colors == 5
    assert s.base_format is ColorFormat.HEX
    assert s.output_format is ColorFormat.HSL
    assert s.palette is None


def test_session_holder_swaps_state() -> None:
    assert get_state() is None
    new = update_state(lambda cur: (cur or _red_state()).generate())
    assert get_state() is new
    assert len(new.palette) == 10

    set_state(None)
    assert get_state() is None


def test_session_holder_keeps_state_on_error() -> None:
    first = _red_state().generate()
    set_state(first)

    def _fail(cur):
        return cur.with_base_text("not a color").generate()

    with pytest.raises(InvalidColorFormat):
        update_state(_fail)
    assert get_state() is first


def test_constructor_normalizes_fields() -> None:
    s = PaletteState(base_text="#c73d3d", base_format="hex", output_format="HSL", n_colors=50)
    assert s.n_colors == 20
    assert s.base_format is ColorFormat.HEX
    assert s.output_format is ColorFormat.HSL
    assert PaletteState(n_colors=0).n_colors == 2
    out = s.generate()
    assert out.palette is not None
    assert len(out.palette) == 20
    assert out.labels[0].startswith("hsl(")
