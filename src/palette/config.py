from __future__ import annotations

"""Runtime configuration for the palette state and its persistence.

Values are resolved from three layers, later layers winning:

1. built-in defaults,
2. the ``palette`` section of ``configs/default.yaml`` / ``config.yaml``,
3. environment variables (see :mod:`common.settings`).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from common.settings import get as _get_settings
from util.paths import default_store_path
from util.utils import config_section

from .harmony import HarmonyMode

logger = logging.getLogger(__name__)

MIN_COLORS = 2
MAX_COLORS = 10
DEFAULT_INITIAL_COLORS = 4


@dataclass(frozen=True)
class PaletteConfig:
    """Resolved configuration values."""

    initial_colors: int = DEFAULT_INITIAL_COLORS
    default_mode: HarmonyMode = HarmonyMode.NONE
    store_path: Path = Path("data/palettes/saved-palettes.json")
    seed: Optional[int] = None


def _as_count(value: Any, fallback: int) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return fallback
    return max(MIN_COLORS, min(MAX_COLORS, n))


def _as_mode(value: Any, fallback: HarmonyMode) -> HarmonyMode:
    if value is None:
        return fallback
    try:
        return HarmonyMode.from_value(value)
    except ValueError:
        logger.warning("unknown harmony mode in config: %r (using %s)", value, fallback.value)
        return fallback


def load_palette_config(project_root: Optional[Path] = None) -> PaletteConfig:
    """Resolve :class:`PaletteConfig` from defaults, config files and env."""
    section = config_section("palette", project_root)
    settings = _get_settings()

    initial = _as_count(section.get("initial_colors"), DEFAULT_INITIAL_COLORS)
    if settings.INITIAL_COLORS is not None:
        initial = _as_count(settings.INITIAL_COLORS, initial)

    mode = _as_mode(section.get("default_mode"), HarmonyMode.NONE)
    if settings.DEFAULT_MODE is not None:
        mode = _as_mode(settings.DEFAULT_MODE, mode)

    store_raw = settings.STORE_PATH or section.get("store_path")
    if isinstance(store_raw, str) and store_raw.strip():
        store_path = Path(store_raw).expanduser()
    else:
        store_path = default_store_path()

    return PaletteConfig(
        initial_colors=initial,
        default_mode=mode,
        store_path=store_path,
        seed=settings.SEED,
    )


__all__ = ["MIN_COLORS", "MAX_COLORS", "PaletteConfig", "load_palette_config"]
