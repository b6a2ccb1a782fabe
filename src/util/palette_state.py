from __future__ import annotations

"""現在のパレット状態（セッション）の保持ユーティリティ。

どこで: `util` 層。
何を: 現在有効な `PaletteState` を保持するための最小限の set/get/update API を提供する。
なぜ: UI やエクスポータが同じ状態を参照しつつ、再生成時は状態全体を 1 回の参照差し替えで
      置き換えるため（途中まで書き換わったパレットが見えることは無い）。

設計メモ:
- 本モジュールは状態型に依存しない（`object` として保持する）。
- 状態はイミュータブル（frozen dataclass）であることを前提とし、ここでは差し替えのみ行う。
"""

from typing import Any, Callable

_STATE_OBJ: Any | None = None


def set_state(obj: Any | None) -> None:
    """現在の状態オブジェクトを設定する。"""
    global _STATE_OBJ
    _STATE_OBJ = obj


def get_state() -> Any | None:
    """現在の状態オブジェクトを返す（未設定時は None）。"""
    return _STATE_OBJ


def update_state(func: Callable[[Any | None], Any | None]) -> Any | None:
    """`func(現在の状態)` の戻り値で状態を置き換え、新しい状態を返す。

    `func` が例外を送出した場合は状態を変更しない。
    """
    global _STATE_OBJ
    new_state = func(_STATE_OBJ)
    _STATE_OBJ = new_state
    return new_state


__all__ = ["set_state", "get_state", "update_state"]
