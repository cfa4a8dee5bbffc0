from __future__ import annotations

"""create_palette_state / generate_palette の基本動作テスト。"""

from pathlib import Path

import numpy as np

from palette import create_palette_state, generate_palette
from palette.colorspace import HSL
from palette.config import PaletteConfig
from palette.harmony import HarmonyMode
from palette.persistence import JsonFileStore


def test_create_palette_state_uses_config(tmp_path: Path) -> None:
    cfg = PaletteConfig(initial_colors=6, store_path=tmp_path / "s.json", seed=3)
    state = create_palette_state(cfg)
    assert len(state.colors) == 6
    assert state.harmony_mode == HarmonyMode.NONE

    state.save_palette("Persisted")
    assert JsonFileStore(tmp_path / "s.json").load()[0].name == "Persisted"


def test_create_palette_state_applies_default_mode(tmp_path: Path) -> None:
    cfg = PaletteConfig(
        initial_colors=6, default_mode=HarmonyMode.TETRADIC, store_path=tmp_path / "s.json"
    )
    state = create_palette_state(cfg)
    assert state.harmony_mode == HarmonyMode.TETRADIC
    assert len(state.colors) == 4


def test_create_palette_state_seed_is_reproducible(tmp_path: Path) -> None:
    cfg = PaletteConfig(store_path=tmp_path / "s.json", seed=11)
    a = create_palette_state(cfg)
    b = create_palette_state(cfg)
    assert [c.hsl for c in a.colors] == [c.hsl for c in b.colors]


def test_generate_palette_with_base() -> None:
    base = HSL(h=30.0, s=60.0, l=50.0)
    colors = generate_palette("triadic", 3, base_color=base, rng=np.random.default_rng(0))
    assert len(colors) == 3
    assert colors[0].hsl == base
    assert len({c.id for c in colors}) == 3


def test_generate_palette_clamps_count() -> None:
    assert len(generate_palette(HarmonyMode.NONE, 50)) == 10
    assert len(generate_palette(HarmonyMode.NONE, 0)) == 2
