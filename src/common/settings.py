"""
どこで: `common.settings`
何を: パレット既定値/エクスポート/ロギングに関わる環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 既定値/型の一貫性を保ち、テストから `reload_from_env()` で差し替えられるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_int

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class _Settings:
    # パレット
    DEFAULT_N_COLORS: int = 10

    # エクスポート
    EXPORT_DPI: int = 100
    PDF_SCALE: int = 2
    EXPORT_OVERWRITE: bool = True

    # ロギング
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 既定色数は [2, 20] に丸める。
    - DPI/スケールは 1 以上に丸める。
    """
    _settings.DEFAULT_N_COLORS = (
        env_int("TPAL_DEFAULT_N_COLORS", 10, min_value=2, max_value=20) or 10
    )
    _settings.EXPORT_DPI = env_int("TPAL_EXPORT_DPI", 100, min_value=1) or 100
    _settings.PDF_SCALE = env_int("TPAL_PDF_SCALE", 2, min_value=1) or 2
    _settings.EXPORT_OVERWRITE = env_bool("TPAL_EXPORT_OVERWRITE", True)
    _settings.LOG_LEVEL = env_choice("TPAL_LOG_LEVEL", _LOG_LEVELS, "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
