"""
Command line front end for the palette state.

Usage:
    python -m palette generate --mode triadic --count 4 --format css
    python -m palette generate --mode analogous --save "Warm" --seed 7
    python -m palette saved list --query warm
    python -m palette saved show palette-1700000000000 --format json
    python -m palette saved delete palette-1700000000000
    python -m palette saved export
    python -m palette modes
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

from common.logging import setup_default_logging

from .api import create_palette_state
from .color_types import Color
from .config import MAX_COLORS, MIN_COLORS, load_palette_config
from .harmony import HarmonyMode, get_all_harmony_modes, get_harmony_name, get_optimal_color_count
from .persistence import JsonFileStore
from .state import PaletteState
from .ui_helpers import copy_text, css_root_block, export_palette, export_svg

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["css", "root", "json", "array", "svg", "text"]


def _render(colors: Sequence[Color], fmt: str) -> str:
    if fmt == "root":
        return css_root_block(colors)
    if fmt == "svg":
        return export_svg(colors)
    if fmt == "text":
        return copy_text(colors)
    return export_palette(colors, fmt)


def _mode_arg(value: str) -> HarmonyMode:
    try:
        return HarmonyMode.from_value(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _count_arg(value: str) -> int:
    try:
        n = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid count: {value}") from exc
    if not MIN_COLORS <= n <= MAX_COLORS:
        raise argparse.ArgumentTypeError(f"count must be in [{MIN_COLORS}, {MAX_COLORS}]")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="palette-harmony", description="Harmony palette generator")
    p.add_argument("--store", type=Path, default=None, help="saved palettes JSON file")
    p.add_argument("--log-level", default=None, help="logging level (default: PALETTE_LOG_LEVEL)")
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="generate a palette and print it")
    gen.add_argument("--mode", type=_mode_arg, default=None)
    gen.add_argument("--count", type=_count_arg, default=None)
    gen.add_argument("--seed", type=int, default=None)
    gen.add_argument("--format", choices=OUTPUT_FORMATS, default="text")
    gen.add_argument("--save", metavar="NAME", nargs="?", const="", default=None)

    saved = sub.add_parser("saved", help="manage saved palettes")
    saved_sub = saved.add_subparsers(dest="saved_command", required=True)
    ls = saved_sub.add_parser("list")
    ls.add_argument("--query", default="")
    show = saved_sub.add_parser("show")
    show.add_argument("palette_id")
    show.add_argument("--format", choices=OUTPUT_FORMATS, default="text")
    delete = saved_sub.add_parser("delete")
    delete.add_argument("palette_id")
    saved_sub.add_parser("export")

    sub.add_parser("modes", help="list harmony modes")
    return p


def _build_state(args: argparse.Namespace) -> PaletteState:
    config = load_palette_config()
    overrides = {}
    if getattr(args, "seed", None) is not None:
        overrides["seed"] = args.seed
    if getattr(args, "count", None) is not None:
        overrides["initial_colors"] = args.count
    if overrides:
        config = replace(config, **overrides)
    store = JsonFileStore(args.store if args.store is not None else config.store_path)
    return create_palette_state(config, store=store)


def _fit_count(state: PaletteState, count: int) -> None:
    while len(state.colors) < count and state.add_color() is not None:
        pass
    while len(state.colors) > count and state.remove_color() is not None:
        pass


def _cmd_generate(args: argparse.Namespace, out) -> int:
    state = _build_state(args)
    if args.mode is not None:
        state.change_harmony_mode(args.mode)
    if args.count is not None and len(state.colors) != args.count:
        # An explicit count wins over the mode's optimal count.
        _fit_count(state, args.count)
        state.shuffle_colors()

    out.write(_render(state.colors, args.format) + "\n")
    if args.save is not None:
        saved = state.save_palette(args.save or None)
        out.write(f"saved {saved.id} {saved.name}\n")
    return 0


def _format_ts(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _cmd_saved(args: argparse.Namespace, out) -> int:
    state = _build_state(args)
    if args.saved_command == "list":
        for p in state.search_palettes(args.query):
            out.write(
                f"{p.id}\t{p.name}\t{len(p.colors)} colors\t{_format_ts(p.created_at)}\t"
                f"{copy_text(p.colors)}\n"
            )
        return 0
    if args.saved_command == "export":
        out.write(state.export_saved_palettes() + "\n")
        return 0

    palette = state.find_palette(args.palette_id)
    if palette is None:
        logger.error("no saved palette with id %s", args.palette_id)
        return 1
    if args.saved_command == "show":
        state.load_palette(palette)
        out.write(_render(state.colors, args.format) + "\n")
        return 0
    state.delete_palette(palette.id)
    out.write(f"deleted {palette.id} {palette.name}\n")
    return 0


def _cmd_modes(out) -> int:
    for mode in get_all_harmony_modes():
        optimal = get_optimal_color_count(mode)
        out.write(f"{mode.value}\t{get_harmony_name(mode)}\t{optimal if optimal is not None else 'any'}\n")
    return 0


def main(argv: Optional[List[str]] = None, out=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)
    stream = out if out is not None else sys.stdout

    if args.command == "generate":
        return _cmd_generate(args, stream)
    if args.command == "saved":
        return _cmd_saved(args, stream)
    return _cmd_modes(stream)


if __name__ == "__main__":
    sys.exit(main())
