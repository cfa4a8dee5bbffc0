from __future__ import annotations

"""Live palette state: color slots, harmony mode and saved snapshots.

:class:`PaletteState` is the single owner of the live color list. Every
operation runs to completion and replaces ``colors`` / ``harmony_mode`` /
``saved_palettes`` as a whole. Boundary violations (adding past the maximum,
removing past the minimum, unknown ids) are silent no-ops.

Locks only protect slots from automatic regeneration (:meth:`shuffle_colors`,
:meth:`change_harmony_mode`). Manual edits via :meth:`update_color` and the
truncation done by :meth:`remove_color` ignore them.
"""

import logging
import time
from typing import Callable, List, Optional, Sequence

import numpy as np

from .color_types import Color, SavedPalette, copy_colors
from .colorspace import HSL, random_color, resolve_rng
from .config import MAX_COLORS, MIN_COLORS
from .harmony import (
    HarmonyMode,
    generate_harmony,
    get_next_harmony_mode,
    get_optimal_color_count,
    get_previous_harmony_mode,
)
from .persistence import PaletteStore, load_saved_palettes, palettes_to_json, save_saved_palettes
from .ui_helpers import ExportFormat, copy_text, export_palette

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class PaletteState:
    """Mutable palette with locking, resizing, mode switching and snapshots.

    Parameters
    ----------
    initial_count:
        Number of random colors to start with, clamped to
        ``[MIN_COLORS, MAX_COLORS]``.
    harmony_mode:
        Initial harmony mode. It is only recorded; the initial colors are
        independent random samples.
    store:
        Persistence adapter for saved palettes. ``None`` keeps snapshots in
        memory only.
    rng:
        Random source for sampling and jitter.
    clock:
        Returns seconds since the epoch; used for ids and timestamps.
    """

    def __init__(
        self,
        initial_count: int = 4,
        *,
        harmony_mode: HarmonyMode | str = HarmonyMode.NONE,
        store: Optional[PaletteStore] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._rng = resolve_rng(rng)
        self._clock: Clock = clock if clock is not None else time.time
        self._store = store
        self._harmony_mode = HarmonyMode.from_value(harmony_mode)

        n = max(MIN_COLORS, min(MAX_COLORS, int(initial_count)))
        ts = self._timestamp_ms()
        self._colors: List[Color] = [
            Color(id=f"color-{ts}-{i}", hsl=random_color(self._rng)) for i in range(n)
        ]
        self._saved: List[SavedPalette] = load_saved_palettes(store)

    # --- read-only views ---
    @property
    def colors(self) -> List[Color]:
        """Live color slots (the list itself; treat as read-only)."""
        return self._colors

    @property
    def harmony_mode(self) -> HarmonyMode:
        return self._harmony_mode

    @property
    def saved_palettes(self) -> List[SavedPalette]:
        """Saved snapshots, most recent first."""
        return self._saved

    @property
    def can_add_more(self) -> bool:
        return len(self._colors) < MAX_COLORS

    @property
    def can_remove(self) -> bool:
        return len(self._colors) > MIN_COLORS

    # --- slot operations ---
    def add_color(self) -> Optional[Color]:
        """Append one random unlocked color. Returns it, or None at the maximum."""
        if len(self._colors) >= MAX_COLORS:
            logger.debug("add_color ignored: palette already has %d colors", len(self._colors))
            return None
        color = Color(id=f"color-{self._timestamp_ms()}", hsl=random_color(self._rng))
        self._colors = [*self._colors, color]
        return color

    def remove_color(self) -> Optional[Color]:
        """Drop the last color, locked or not. Returns it, or None at the minimum."""
        if len(self._colors) <= MIN_COLORS:
            logger.debug("remove_color ignored: palette already has %d colors", len(self._colors))
            return None
        removed = self._colors[-1]
        self._colors = self._colors[:-1]
        return removed

    def toggle_lock(self, color_id: str) -> None:
        if self._find(color_id) is None:
            logger.debug("toggle_lock ignored: unknown id %s", color_id)
            return
        self._colors = [
            Color(id=c.id, hsl=c.hsl, locked=not c.locked) if c.id == color_id else c
            for c in self._colors
        ]

    def update_color(self, color_id: str, hsl: HSL) -> None:
        """Overwrite a slot's color, regardless of its lock."""
        if self._find(color_id) is None:
            logger.debug("update_color ignored: unknown id %s", color_id)
            return
        new_hsl = hsl.normalized()
        self._colors = [
            Color(id=c.id, hsl=new_hsl, locked=c.locked) if c.id == color_id else c
            for c in self._colors
        ]

    def reorder_colors(self, new_order: Sequence[Color]) -> None:
        """Replace the list with a caller-supplied permutation (not validated)."""
        self._colors = list(new_order)

    # --- regeneration ---
    def shuffle_colors(self) -> None:
        """Regenerate all unlocked slots from a fresh random base."""
        self._colors = self._assign_harmony(self._colors, self._harmony_mode)

    def change_harmony_mode(self, mode: HarmonyMode | str) -> None:
        """Switch mode, reconcile the color count, then regenerate unlocked slots.

        When the mode has an optimal count and there are more unlocked colors
        than that, the surplus unlocked colors are dropped and the list is
        rebuilt as ``locked + kept unlocked``. Locked colors therefore move to
        the front and lose their original positions. When there are fewer
        unlocked colors than the optimal count, new random colors are appended
        (up to MAX_COLORS).
        """
        try:
            new_mode = HarmonyMode.from_value(mode)
        except ValueError:
            logger.warning("change_harmony_mode ignored: unknown mode %r", mode)
            return
        self._harmony_mode = new_mode

        adjusted = list(self._colors)
        optimal = get_optimal_color_count(new_mode)
        if optimal is not None:
            locked = [c for c in self._colors if c.locked]
            unlocked = [c for c in self._colors if not c.locked]
            if len(unlocked) > optimal:
                adjusted = locked + unlocked[:optimal]
            elif len(unlocked) < optimal:
                # Never grow past MAX_COLORS, even with many locked slots.
                to_add = min(optimal - len(unlocked), MAX_COLORS - len(adjusted))
                ts = self._timestamp_ms()
                for i in range(to_add):
                    adjusted.append(Color(id=f"color-{ts}-{i}", hsl=random_color(self._rng)))

        self._colors = self._assign_harmony(adjusted, new_mode)

    def next_harmony_mode(self) -> HarmonyMode:
        """Apply the next mode in navigation order and return it."""
        mode = get_next_harmony_mode(self._harmony_mode)
        self.change_harmony_mode(mode)
        return mode

    def previous_harmony_mode(self) -> HarmonyMode:
        """Apply the previous mode in navigation order and return it."""
        mode = get_previous_harmony_mode(self._harmony_mode)
        self.change_harmony_mode(mode)
        return mode

    def _assign_harmony(self, colors: List[Color], mode: HarmonyMode) -> List[Color]:
        # Generated colors are consumed only by unlocked slots, in order.
        base = random_color(self._rng)
        generated = generate_harmony(mode, base, len(colors), self._rng)
        out: List[Color] = []
        idx = 0
        for color in colors:
            if color.locked:
                out.append(color)
                continue
            out.append(Color(id=color.id, hsl=generated[idx], locked=False))
            idx += 1
        return out

    # --- snapshots ---
    def save_palette(self, name: Optional[str] = None) -> SavedPalette:
        """Snapshot the live colors, prepend it and persist the list."""
        ts = self._timestamp_ms()
        palette = SavedPalette(
            id=f"palette-{ts}",
            name=name or f"Palette {len(self._saved) + 1}",
            colors=copy_colors(self._colors),
            created_at=ts,
        )
        self._saved = [palette, *self._saved]
        self._persist()
        logger.info("saved palette %r (%d colors)", palette.name, len(palette.colors))
        return palette

    def load_palette(self, palette: SavedPalette) -> None:
        """Replace the live colors with a copy of ``palette.colors``."""
        self._colors = copy_colors(palette.colors)

    def delete_palette(self, palette_id: str) -> None:
        remaining = [p for p in self._saved if p.id != palette_id]
        if len(remaining) == len(self._saved):
            logger.debug("delete_palette ignored: unknown id %s", palette_id)
            return
        self._saved = remaining
        self._persist()

    def search_palettes(self, query: str = "") -> List[SavedPalette]:
        """Saved palettes whose name contains ``query`` (case-insensitive)."""
        q = (query or "").lower()
        return [p for p in self._saved if q in p.name.lower()]

    def find_palette(self, palette_id: str) -> Optional[SavedPalette]:
        for p in self._saved:
            if p.id == palette_id:
                return p
        return None

    # --- export ---
    def export_palette(self, fmt: ExportFormat | str) -> str:
        return export_palette(self._colors, fmt)

    def copy_text(self) -> str:
        return copy_text(self._colors)

    def export_saved_palettes(self) -> str:
        """All snapshots as pretty-printed JSON."""
        return palettes_to_json(self._saved)

    # --- internals ---
    def _find(self, color_id: str) -> Optional[Color]:
        for color in self._colors:
            if color.id == color_id:
                return color
        return None

    def _timestamp_ms(self) -> int:
        return int(round(self._clock() * 1000))

    def _persist(self) -> None:
        if self._store is None:
            return
        save_saved_palettes(self._store, self._saved)


__all__ = ["MIN_COLORS", "MAX_COLORS", "PaletteState"]
