"""
どこで: `common.settings`
何を: パレット生成器の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 保存先/初期色数/乱数シード/ログレベルの既定値と型を 1 箇所にまとめ、テストで差し替えやすくするため。

環境変数:
- `PALETTE_STORE_PATH`: 保存パレット JSON のパス（未設定なら設定ファイル/既定値）
- `PALETTE_INITIAL_COLORS`: 初期色数（2..10 に丸める）
- `PALETTE_DEFAULT_MODE`: 起動時のハーモニーモード
- `PALETTE_SEED`: 乱数シード（未設定なら非決定的）
- `PALETTE_LOG_LEVEL`: ログレベル名
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str


@dataclass
class _Settings:
    # 永続化
    STORE_PATH: str | None = None

    # 初期状態
    INITIAL_COLORS: int | None = None
    DEFAULT_MODE: str | None = None

    # 乱数
    SEED: int | None = None

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 未設定の項目は None（設定ファイル/組み込み既定値に委ねる）。
    - 色数は 2..10 に丸める。
    """
    _settings.STORE_PATH = env_str("PALETTE_STORE_PATH")
    _settings.INITIAL_COLORS = env_int("PALETTE_INITIAL_COLORS", None, min_value=2, max_value=10)
    _settings.DEFAULT_MODE = env_str("PALETTE_DEFAULT_MODE")
    _settings.SEED = env_int("PALETTE_SEED", None)
    _settings.LOG_LEVEL = env_str("PALETTE_LOG_LEVEL", "INFO") or "INFO"


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
