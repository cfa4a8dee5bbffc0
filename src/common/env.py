"""
どこで: `common.env`
何を: パレット設定用の環境変数パースヘルパ（str/int）を提供。
なぜ: `os.getenv` と不正値ガードを設定層に集約し、呼び出し側を単純にするため。
"""

from __future__ import annotations

import os
from typing import Optional


def _raw(name: str) -> Optional[str]:
    """前後の空白を除いた値を返す（未設定/空文字は None）。"""
    raw = os.getenv(name)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """文字列環境変数を取得（未設定/空文字は既定値）。"""
    raw = _raw(name)
    return default if raw is None else raw


def env_int(
    name: str,
    default: Optional[int] = None,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Optional[int]:
    """整数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        未設定/不正値のときの戻り値。
    min_value, max_value : Optional[int]
        指定時は結果をこの範囲に丸める（default には適用しない）。
    """
    raw = _raw(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    if max_value is not None and val > max_value:
        val = max_value
    return val


__all__ = ["env_str", "env_int"]
