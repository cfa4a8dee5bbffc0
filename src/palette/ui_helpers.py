from __future__ import annotations

"""Helper utilities for integrating palettes into external UIs.

This module exposes label/enum pairs for harmony modes and export formats,
and converts a list of :class:`Color` slots into text that UI code can copy
or write out: CSS custom properties, JSON, a compact hex array, or an SVG
swatch strip.
"""

import json
from enum import Enum
from typing import List, Sequence

from .color_types import Color
from .harmony import HarmonyMode, get_all_harmony_modes, get_harmony_name


class ExportFormat(Enum):
    """Supported text export formats."""

    CSS = "css"
    JSON = "json"
    ARRAY = "array"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
HARMONY_MODE_OPTIONS: List[tuple[str, HarmonyMode]] = [
    (get_harmony_name(mode), mode) for mode in get_all_harmony_modes()
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("CSS Variables", ExportFormat.CSS),
    ("JSON", ExportFormat.JSON),
    ("Array", ExportFormat.ARRAY),
]


def export_palette(colors: Sequence[Color], fmt: ExportFormat | str) -> str:
    """Serialize colors in list order. Unknown formats yield an empty string."""
    if isinstance(fmt, ExportFormat):
        export_fmt = fmt
    else:
        try:
            export_fmt = ExportFormat.from_value(str(fmt))
        except ValueError:
            return ""

    if export_fmt == ExportFormat.CSS:
        return "\n".join(f"  --color-{i + 1}: {c.hex};" for i, c in enumerate(colors))
    if export_fmt == ExportFormat.JSON:
        return json.dumps([{"hex": c.hex, "hsl": c.hsl.to_dict()} for c in colors], indent=2)
    if export_fmt == ExportFormat.ARRAY:
        return json.dumps([c.hex for c in colors], separators=(",", ":"))
    return ""


def css_root_block(colors: Sequence[Color]) -> str:
    """CSS variables wrapped in a ``:root`` rule."""
    return ":root {\n" + export_palette(colors, ExportFormat.CSS) + "\n}"


def copy_text(colors: Sequence[Color]) -> str:
    """Hex codes joined by ``", "`` for clipboard use."""
    return ", ".join(c.hex for c in colors)


def export_svg(colors: Sequence[Color], width: int = 1000, height: int = 200) -> str:
    """SVG document with one equal-width rectangle per color."""
    n = len(colors)
    swatch_w = width / n if n else 0
    rects = "\n  ".join(
        f'<rect x="{_fmt_num(i * swatch_w)}" y="0" width="{_fmt_num(swatch_w)}" '
        f'height="{height}" fill="{c.hex}"/>'
        for i, c in enumerate(colors)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">\n'
        f"  {rects}\n"
        "</svg>"
    )


def _fmt_num(v: float) -> str:
    # 250.0 -> "250", 333.333... -> "333.3333"
    return f"{v:.4f}".rstrip("0").rstrip(".")


__all__ = [
    "ExportFormat",
    "HARMONY_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "copy_text",
    "css_root_block",
    "export_palette",
    "export_svg",
]
