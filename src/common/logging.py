"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する（`palette.*` 配下）。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
- レベル未指定時は `common.settings` の `LOG_LEVEL`（環境変数 `TPAL_LOG_LEVEL`）を用いる。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from . import settings

        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op, False を返す）
    - UI/エクスポートを組み込む上位アプリから呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return False
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)
    return True


__all__ = ["LOG_FORMAT", "setup_default_logging"]
