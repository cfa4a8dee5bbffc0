"""共通フィクスチャ。

- 乱数ジェネレータ（シード固定）
- 単調増加する疑似時計（ID 衝突回避）
- インメモリのパレットストア
"""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from palette.persistence import MemoryStore
from palette.state import PaletteState


@pytest.fixture()
def rng() -> np.random.Generator:
    """NumPy の乱数ジェネレータを固定シードで返す。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def clock() -> Callable[[], float]:
    """呼び出しごとに 1ms 進む時計（秒単位）。"""
    state = {"n": 0}

    def _tick() -> float:
        state["n"] += 1
        return 1_700_000_000.0 + state["n"] / 1000.0

    return _tick


@pytest.fixture()
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def make_state(rng, clock, memory_store) -> Callable[..., PaletteState]:
    """PaletteState のファクトリ（rng/clock/store は固定）。"""

    def _make(initial_count: int = 4, **kwargs) -> PaletteState:
        kwargs.setdefault("store", memory_store)
        return PaletteState(initial_count, rng=rng, clock=clock, **kwargs)

    return _make
