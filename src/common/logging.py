"""
パレット生成器向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- CLI などのエントリポイントだけが `setup_default_logging()` を呼び、最小構成を 1 度だけ適用する。
- レベル未指定時は `common.settings` の `PALETTE_LOG_LEVEL` に従う。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        lvl = logging.getLevelName(level.upper())
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str | None = None) -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（False を返す）
    - 適用した場合は True
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return False
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)
    return True


__all__ = ["LOG_FORMAT", "setup_default_logging"]
