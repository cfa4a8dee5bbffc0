from __future__ import annotations

"""High-level public API for building palette states.

This module provides :func:`create_palette_state`, which wires the resolved
configuration, a seeded random generator and a JSON file store into a
:class:`palette.state.PaletteState`, and :func:`generate_palette`, a one-shot
helper returning harmony colors as :class:`Color` slots.
"""

import logging
from typing import List, Optional

import numpy as np

from .color_types import Color
from .colorspace import HSL, random_color
from .config import MAX_COLORS, MIN_COLORS, PaletteConfig, load_palette_config
from .harmony import HarmonyMode, generate_harmony
from .persistence import JsonFileStore, PaletteStore
from .state import PaletteState

logger = logging.getLogger(__name__)


def create_palette_state(
    config: Optional[PaletteConfig] = None,
    *,
    store: Optional[PaletteStore] = None,
    rng: Optional[np.random.Generator] = None,
) -> PaletteState:
    """Create a PaletteState from configuration.

    Parameters
    ----------
    config:
        Resolved configuration. If None, :func:`load_palette_config` is used.
    store:
        Persistence adapter. If None, a :class:`JsonFileStore` at
        ``config.store_path`` is used.
    rng:
        Random source. If None, one seeded with ``config.seed`` is created.

    Returns
    -------
    PaletteState
        State with ``config.initial_colors`` colors. When the configured
        default mode is not NONE it is applied immediately, which may adjust
        the color count to the mode's optimal count.
    """
    if config is None:
        config = load_palette_config()
    if store is None:
        store = JsonFileStore(config.store_path)
    if rng is None:
        rng = np.random.default_rng(config.seed)

    state = PaletteState(config.initial_colors, store=store, rng=rng)
    if config.default_mode != HarmonyMode.NONE:
        state.change_harmony_mode(config.default_mode)
    logger.debug(
        "palette state ready: %d colors, mode=%s, %d saved",
        len(state.colors),
        state.harmony_mode.value,
        len(state.saved_palettes),
    )
    return state


def generate_palette(
    mode: HarmonyMode | str,
    n_colors: int = 4,
    base_color: Optional[HSL] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Color]:
    """Generate ``n_colors`` harmony colors as unlocked Color slots.

    ``n_colors`` is clamped to ``[MIN_COLORS, MAX_COLORS]``. If ``base_color``
    is None a random base is sampled.
    """
    n = max(MIN_COLORS, min(MAX_COLORS, int(n_colors)))
    gen = rng if rng is not None else np.random.default_rng()
    base = base_color if base_color is not None else random_color(gen)
    hsls = generate_harmony(mode, base, n, gen)
    return [Color(id=f"color-{i}", hsl=hsl) for i, hsl in enumerate(hsls)]


__all__ = ["create_palette_state", "generate_palette"]
