from __future__ import annotations

"""Harmony modes and harmony color generation.

This module defines :class:`HarmonyMode` and :func:`generate_harmony`, which
derives a list of related HSL colors from one base color. Jitter is drawn
from an injectable ``numpy.random.Generator`` so runs can be reproduced.
"""

import math
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np

from .colorspace import HSL, clamp, normalize_hue, random_color, resolve_rng


class HarmonyMode(Enum):
    """Named hue relationships on the color wheel."""

    NONE = "none"
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SQUARE = "square"

    @classmethod
    def from_value(cls, value: "HarmonyMode | str") -> "HarmonyMode":
        """Resolve a mode from its value, enum name or display label."""
        if isinstance(value, HarmonyMode):
            return value
        key = str(value).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower(), _NAMES[mode].lower()):
                return mode
        raise ValueError(f"Unknown harmony mode: {value}")


_NAMES: Dict[HarmonyMode, str] = {
    HarmonyMode.NONE: "Random",
    HarmonyMode.MONOCHROMATIC: "Monochromatic",
    HarmonyMode.ANALOGOUS: "Analogous",
    HarmonyMode.COMPLEMENTARY: "Complementary",
    HarmonyMode.SPLIT_COMPLEMENTARY: "Split Complementary",
    HarmonyMode.TRIADIC: "Triadic",
    HarmonyMode.TETRADIC: "Tetradic",
    HarmonyMode.SQUARE: "Square",
}

_OPTIMAL_COUNTS: Dict[HarmonyMode, Optional[int]] = {
    HarmonyMode.NONE: None,
    HarmonyMode.MONOCHROMATIC: None,
    HarmonyMode.ANALOGOUS: 3,
    HarmonyMode.COMPLEMENTARY: 2,
    HarmonyMode.SPLIT_COMPLEMENTARY: 3,
    HarmonyMode.TRIADIC: 3,
    HarmonyMode.TETRADIC: 4,
    HarmonyMode.SQUARE: 4,
}

# Saturation/lightness bounds for the jittered modes.
S_BOUNDS = (40.0, 100.0)
L_BOUNDS = (30.0, 70.0)
MONO_S_BOUNDS = (20.0, 100.0)
MONO_L_BOUNDS = (20.0, 80.0)


def _coerce_mode(mode: HarmonyMode | str) -> HarmonyMode:
    try:
        return HarmonyMode.from_value(mode)
    except ValueError:
        return HarmonyMode.NONE


def get_harmony_name(mode: HarmonyMode | str) -> str:
    """Display name of a harmony mode."""
    return _NAMES[_coerce_mode(mode)]


def get_all_harmony_modes() -> List[HarmonyMode]:
    """All modes in their fixed navigation order."""
    return list(HarmonyMode)


def get_next_harmony_mode(current: HarmonyMode | str) -> HarmonyMode:
    modes = get_all_harmony_modes()
    idx = modes.index(_coerce_mode(current))
    return modes[(idx + 1) % len(modes)]


def get_previous_harmony_mode(current: HarmonyMode | str) -> HarmonyMode:
    modes = get_all_harmony_modes()
    idx = modes.index(_coerce_mode(current))
    return modes[(idx - 1) % len(modes)]


def get_optimal_color_count(mode: HarmonyMode | str) -> Optional[int]:
    """Color count a mode is defined for, or None when any count works."""
    return _OPTIMAL_COUNTS[_coerce_mode(mode)]


def generate_harmony(
    mode: HarmonyMode | str,
    base_color: HSL,
    count: int,
    rng: Optional[np.random.Generator] = None,
) -> List[HSL]:
    """Generate ``count`` colors related to ``base_color`` by ``mode``.

    Parameters
    ----------
    mode:
        HarmonyMode (or its string value). Unknown values behave as NONE.
    base_color:
        Base color. Returned unmodified as element 0 for every mode except
        NONE, which ignores it.
    count:
        Number of colors. Values below 1 yield an empty list.
    rng:
        Source of jitter. If None, a fresh default generator is used.

    Returns
    -------
    list[HSL]
        Exactly ``max(count, 0)`` colors.
    """
    try:
        n = int(count)
    except (TypeError, ValueError):
        n = 0
    if n < 1:
        return []

    gen = resolve_rng(rng)
    harmony_mode = _coerce_mode(mode)
    if harmony_mode == HarmonyMode.NONE:
        return [random_color(gen) for _ in range(n)]

    generator = _GENERATORS[harmony_mode]
    colors: List[HSL] = [base_color]
    for i in range(1, n):
        colors.append(generator(base_color, i, gen))
    return colors


def _jitter(gen: np.random.Generator, amount: float) -> float:
    return float(gen.uniform(-amount, amount))


def _jittered(
    base: HSL,
    hue: float,
    gen: np.random.Generator,
    *,
    hue_jitter: float,
    sl_jitter: float = 10.0,
) -> HSL:
    h = hue + _jitter(gen, hue_jitter) if hue_jitter > 0.0 else hue
    return HSL(
        h=normalize_hue(h),
        s=clamp(base.s + _jitter(gen, sl_jitter), *S_BOUNDS),
        l=clamp(base.l + _jitter(gen, sl_jitter), *L_BOUNDS),
    )


def _monochromatic(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    # Deterministic periodic walk over saturation/lightness.
    return HSL(
        h=normalize_hue(base.h),
        s=clamp(base.s + ((i * 20) % 40) - 20, *MONO_S_BOUNDS),
        l=clamp(base.l + ((i * 15) % 50) - 25, *MONO_L_BOUNDS),
    )


def _analogous(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    sign = 1 if i % 2 == 0 else -1
    offset = math.ceil(i / 2) * 30.0 * sign
    return _jittered(base, base.h + offset, gen, hue_jitter=0.0)


def _complementary(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    complement = normalize_hue(base.h + 180.0)
    if i % 2 == 1:
        return _jittered(base, complement, gen, hue_jitter=0.0)
    use_base = gen.random() > 0.5
    return _jittered(base, base.h if use_base else complement, gen, hue_jitter=10.0)


def _split_complementary(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    hues = (normalize_hue(base.h + 150.0), normalize_hue(base.h + 210.0))
    return _jittered(base, hues[(i - 1) % 2], gen, hue_jitter=7.5)


def _triadic(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    hues = (base.h, normalize_hue(base.h + 120.0), normalize_hue(base.h + 240.0))
    return _jittered(base, hues[i % 3], gen, hue_jitter=7.5)


def _four_hues(base: HSL) -> tuple[float, float, float, float]:
    return (
        base.h,
        normalize_hue(base.h + 90.0),
        normalize_hue(base.h + 180.0),
        normalize_hue(base.h + 270.0),
    )


def _tetradic(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    return _jittered(base, _four_hues(base)[i % 4], gen, hue_jitter=5.0)


def _square(base: HSL, i: int, gen: np.random.Generator) -> HSL:
    # Same spacing as tetradic with tighter s/l jitter.
    return _jittered(base, _four_hues(base)[i % 4], gen, hue_jitter=5.0, sl_jitter=7.5)


_GENERATORS: Dict[HarmonyMode, Callable[[HSL, int, np.random.Generator], HSL]] = {
    HarmonyMode.MONOCHROMATIC: _monochromatic,
    HarmonyMode.ANALOGOUS: _analogous,
    HarmonyMode.COMPLEMENTARY: _complementary,
    HarmonyMode.SPLIT_COMPLEMENTARY: _split_complementary,
    HarmonyMode.TRIADIC: _triadic,
    HarmonyMode.TETRADIC: _tetradic,
    HarmonyMode.SQUARE: _square,
}


__all__ = [
    "HarmonyMode",
    "generate_harmony",
    "get_all_harmony_modes",
    "get_harmony_name",
    "get_next_harmony_mode",
    "get_optimal_color_count",
    "get_previous_harmony_mode",
]
