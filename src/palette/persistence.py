from __future__ import annotations

"""Persistence adapters for saved palettes.

A store keeps the whole list of :class:`SavedPalette` snapshots under one
key. Stores may raise; :func:`load_saved_palettes` and
:func:`save_saved_palettes` wrap them fail-soft so that the in-memory palette
state stays authoritative when storage is unavailable.

File format (``JsonFileStore``)::

    [
      {"id": "palette-...", "name": "...", "createdAt": 1700000000000,
       "colors": [{"id": "color-...", "hex": "#rrggbb",
                   "hsl": {"h": 0.0, "s": 0.0, "l": 0.0}, "locked": false}]}
    ]
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from util.paths import default_store_path, ensure_parent_dir

from .color_types import SavedPalette

logger = logging.getLogger(__name__)


class PaletteStore(Protocol):
    """Key-value store holding the full saved-palette list."""

    def load(self) -> List[SavedPalette]: ...

    def save(self, palettes: Sequence[SavedPalette]) -> None: ...


def palettes_to_json(palettes: Sequence[SavedPalette], *, indent: Optional[int] = 2) -> str:
    """Serialize snapshots to the JSON document used by the stores."""
    return json.dumps([p.to_dict() for p in palettes], ensure_ascii=False, indent=indent)


def palettes_from_json(text: str) -> List[SavedPalette]:
    """Parse the JSON document produced by :func:`palettes_to_json`.

    Raises
    ------
    ValueError
        If the document is not valid JSON or not a list of snapshots.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("saved palettes document must be a JSON array")
    return [SavedPalette.from_dict(item) for item in data]


class MemoryStore:
    """In-process store. Keeps the serialized form so reads never alias writes."""

    def __init__(self, initial: Optional[str] = None) -> None:
        self._raw: Optional[str] = initial
        self.writes = 0

    def load(self) -> List[SavedPalette]:
        if self._raw is None:
            return []
        return palettes_from_json(self._raw)

    def save(self, palettes: Sequence[SavedPalette]) -> None:
        self._raw = palettes_to_json(palettes, indent=None)
        self.writes += 1

    @property
    def raw(self) -> Optional[str]:
        return self._raw


class JsonFileStore:
    """Store backed by a single JSON file."""

    def __init__(self, path: Optional[Path | str] = None) -> None:
        self.path = Path(path) if path is not None else default_store_path()

    def load(self) -> List[SavedPalette]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as f:
            return palettes_from_json(f.read())

    def save(self, palettes: Sequence[SavedPalette]) -> None:
        ensure_parent_dir(self.path)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            f.write(palettes_to_json(palettes))
        tmp.replace(self.path)


def load_saved_palettes(store: Optional[PaletteStore]) -> List[SavedPalette]:
    """Load snapshots from ``store``; any failure yields an empty list."""
    if store is None:
        return []
    try:
        palettes = store.load()
    except Exception:
        logger.warning("failed to load saved palettes", exc_info=True)
        return []
    logger.debug("loaded %d saved palettes", len(palettes))
    return list(palettes)


def save_saved_palettes(store: Optional[PaletteStore], palettes: Sequence[SavedPalette]) -> bool:
    """Write snapshots to ``store``. Returns False (and logs) on failure."""
    if store is None:
        return False
    try:
        store.save(list(palettes))
    except Exception:
        logger.warning("failed to save palettes", exc_info=True)
        return False
    return True


__all__ = [
    "PaletteStore",
    "MemoryStore",
    "JsonFileStore",
    "palettes_to_json",
    "palettes_from_json",
    "load_saved_palettes",
    "save_saved_palettes",
]
