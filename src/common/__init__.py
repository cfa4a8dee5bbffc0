"""
どこで: `common` パッケージ。
何を: 環境変数の読み取り・実行時設定・ロギング初期化などの軽量ユーティリティ。
なぜ: palette 本体（CLI/API 層）から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .settings import get as get_settings

__all__ = [
    "get_settings",
]
