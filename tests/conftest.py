"""共通フィクスチャ。

- Matplotlib をヘッドレス（Agg）に固定
- テスト毎に環境変数由来の設定とセッション状態をリセット
- 代表的なベースカラー/パレット試料
"""

from __future__ import annotations

import os

os.environ.setdefault("MPLBACKEND", "Agg")

from typing import Iterator

import pytest

from common import settings
from palette import ColorInput, Palette, build_palette
from util.palette_state import set_state


@pytest.fixture(autouse=True)
def reset_runtime_state() -> Iterator[None]:
    """各テスト後に設定とセッション状態を初期化する。"""
    yield
    set_state(None)
    settings.reload_from_env()


@pytest.fixture()
def base_red() -> ColorInput:
    return ColorInput.from_hex("#c73d3d")


@pytest.fixture()
def red_palette(base_red: ColorInput) -> Palette:
    return build_palette(base_red, 5, "hex")
