"""Public entrypoint for the harmony palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from .color_types import Color, SavedPalette
from .colorspace import (
    HSL,
    clamp,
    get_contrast_color,
    hex_to_hsl,
    hsl_to_hex,
    normalize_hue,
    random_color,
)
from .config import MAX_COLORS, MIN_COLORS, PaletteConfig, load_palette_config
from .harmony import (
    HarmonyMode,
    generate_harmony,
    get_all_harmony_modes,
    get_harmony_name,
    get_next_harmony_mode,
    get_optimal_color_count,
    get_previous_harmony_mode,
)
from .persistence import JsonFileStore, MemoryStore, PaletteStore
from .state import PaletteState
from .api import create_palette_state, generate_palette
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    HARMONY_MODE_OPTIONS,
    ExportFormat,
    export_palette,
)

__all__ = [
    "HSL",
    "Color",
    "SavedPalette",
    "HarmonyMode",
    "PaletteState",
    "PaletteConfig",
    "PaletteStore",
    "JsonFileStore",
    "MemoryStore",
    "MIN_COLORS",
    "MAX_COLORS",
    "clamp",
    "normalize_hue",
    "hsl_to_hex",
    "hex_to_hsl",
    "random_color",
    "get_contrast_color",
    "generate_harmony",
    "get_harmony_name",
    "get_all_harmony_modes",
    "get_next_harmony_mode",
    "get_previous_harmony_mode",
    "get_optimal_color_count",
    "create_palette_state",
    "generate_palette",
    "load_palette_config",
    "ExportFormat",
    "export_palette",
    "HARMONY_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
