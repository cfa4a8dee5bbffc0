from __future__ import annotations

"""HSL color-space helpers shared by the harmony engine and palette state.

This module provides hue normalization, clamping, HSL <-> HEX conversion,
contrast-tone selection and random sampling within a pleasant HSL band.
All numeric helpers coerce their inputs into range and never raise.
"""

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np


# Sampling band for :func:`random_color`. Moderate-to-high saturation and
# mid lightness keep default palettes legible.
RANDOM_SATURATION_RANGE = (60.0, 100.0)
RANDOM_LIGHTNESS_RANGE = (40.0, 70.0)

CONTRAST_DARK = "#1a1a1a"
CONTRAST_LIGHT = "#fafafa"
# Luminance at which contrast against black and white is equal.
CONTRAST_LUMINANCE_THRESHOLD = 0.179


@dataclass(frozen=True)
class HSL:
    """Color in HSL coordinates.

    Attributes
    ----------
    h:
        Hue in degrees, periodic with period 360.
    s:
        Saturation in percent.
    l:
        Lightness in percent.
    """

    h: float
    s: float
    l: float  # noqa: E741

    def normalized(self) -> "HSL":
        """Return a copy with h wrapped into [0, 360) and s/l clamped to [0, 100]."""
        return HSL(
            h=normalize_hue(self.h),
            s=clamp(self.s, 0.0, 100.0),
            l=clamp(self.l, 0.0, 100.0),
        )

    def to_dict(self) -> dict[str, float]:
        return {"h": float(self.h), "s": float(self.s), "l": float(self.l)}

    @classmethod
    def from_dict(cls, data: dict) -> "HSL":
        """Build an HSL from a mapping with ``h``, ``s`` and ``l`` keys."""
        try:
            return cls(h=float(data["h"]), s=float(data["s"]), l=float(data["l"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid HSL mapping: {data!r}") from exc


def resolve_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` or a freshly seeded default generator."""
    if rng is None:
        return np.random.default_rng()
    return rng


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360). Non-finite input maps to 0."""
    h = float(h)
    if not math.isfinite(h):
        return 0.0
    h_norm = h % 360.0
    # -1e-17 % 360.0 rounds up to exactly 360.0
    if h_norm >= 360.0:
        return 0.0
    return h_norm


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp ``v`` into [lo, hi]. NaN maps to ``lo``."""
    v = float(v)
    if math.isnan(v):
        return lo
    return min(max(v, lo), hi)


def hsl_to_srgb(h: float, s: float, l: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to sRGB in [0, 1]."""
    h_norm = normalize_hue(h)
    s01 = clamp(s, 0.0, 100.0) / 100.0
    l01 = clamp(l, 0.0, 100.0) / 100.0

    a = s01 * min(l01, 1.0 - l01)

    def _channel(n: int) -> float:
        k = (n + h_norm / 30.0) % 12.0
        return l01 - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return (_channel(0), _channel(8), _channel(4))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL to the canonical lower-case ``#rrggbb`` form."""
    r, g, b = hsl_to_srgb(h, s, l)
    return _srgb_to_hex(r, g, b)


def parse_hex(hex_str: str) -> tuple[float, float, float]:
    """Parse ``#rrggbb`` / ``rrggbb`` (any case) into sRGB in [0, 1]."""
    s = str(hex_str).strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) != 6:
        raise ValueError(f"invalid hex color length: '{hex_str}' (expected RRGGBB)")
    try:
        r = int(s[0:2], 16)
        g = int(s[2:4], 16)
        b = int(s[4:6], 16)
    except ValueError as exc:
        raise ValueError(f"invalid hex color: '{hex_str}'") from exc
    return (r / 255.0, g / 255.0, b / 255.0)


def hex_to_hsl(hex_str: str) -> HSL:
    """Convert a hex string into HSL.

    Raises
    ------
    ValueError
        If ``hex_str`` is not a 6-digit hex color.
    """
    r, g, b = parse_hex(hex_str)
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min
    l01 = (c_max + c_min) / 2.0

    if delta < 1e-12:
        return HSL(h=0.0, s=0.0, l=l01 * 100.0)

    s01 = delta / (1.0 - abs(2.0 * l01 - 1.0))
    if c_max == r:
        h = 60.0 * (((g - b) / delta) % 6.0)
    elif c_max == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)
    return HSL(h=normalize_hue(h), s=clamp(s01 * 100.0, 0.0, 100.0), l=l01 * 100.0)


def random_color(rng: Optional[np.random.Generator] = None) -> HSL:
    """Sample a random color from the pleasant HSL band."""
    gen = resolve_rng(rng)
    s_lo, s_hi = RANDOM_SATURATION_RANGE
    l_lo, l_hi = RANDOM_LIGHTNESS_RANGE
    return HSL(
        h=normalize_hue(gen.uniform(0.0, 360.0)),
        s=float(gen.uniform(s_lo, s_hi)),
        l=float(gen.uniform(l_lo, l_hi)),
    )


def relative_luminance(hex_str: str) -> float:
    """WCAG relative luminance of a hex color, in [0, 1]."""
    r, g, b = parse_hex(hex_str)
    return 0.2126 * _srgb_to_linear(r) + 0.7152 * _srgb_to_linear(g) + 0.0722 * _srgb_to_linear(b)


def get_contrast_color(hex_str: str) -> str:
    """Return the near-black or near-white tone that stays legible on ``hex_str``."""
    try:
        lum = relative_luminance(hex_str)
    except ValueError:
        return CONTRAST_DARK
    if lum > CONTRAST_LUMINANCE_THRESHOLD:
        return CONTRAST_DARK
    return CONTRAST_LIGHT


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _srgb_to_hex(r: float, g: float, b: float) -> str:
    r_i = int(round(clamp(r, 0.0, 1.0) * 255))
    g_i = int(round(clamp(g, 0.0, 1.0) * 255))
    b_i = int(round(clamp(b, 0.0, 1.0) * 255))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


__all__ = [
    "HSL",
    "CONTRAST_DARK",
    "CONTRAST_LIGHT",
    "clamp",
    "get_contrast_color",
    "hex_to_hsl",
    "hsl_to_hex",
    "hsl_to_srgb",
    "normalize_hue",
    "parse_hex",
    "random_color",
    "relative_luminance",
    "resolve_rng",
]
