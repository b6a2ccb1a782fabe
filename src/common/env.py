"""
どこで: `common.env`
何を: `TPAL_*` 環境変数の軽量パースヘルパを提供。
なぜ: 設定読込時の `os.getenv` + 例外/境界ガードを一箇所にまとめるため。
"""

from __future__ import annotations

import os
from typing import Optional, Sequence


def env_int(
    name: str,
    default: Optional[int] = None,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value, max_value : Optional[int]
        下限/上限（指定時、範囲外の値は境界に丸める）。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/不正時は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    if max_value is not None and val > max_value:
        val = max_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（0/1, true/false, yes/no, on/off を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    s = raw.strip().lower()
    if s in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "f", "no", "n", "off"}:
        return False
    return bool(default)


def env_choice(name: str, choices: Sequence[str], default: str) -> str:
    """列挙値の環境変数を取得（大文字小文字は不問、候補外は既定値）。"""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    for c in choices:
        if c.lower() == s:
            return c
    return default


__all__ = ["env_int", "env_bool", "env_choice"]
