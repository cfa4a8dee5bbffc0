from __future__ import annotations

"""Palette slot and snapshot types.

This module defines :class:`Color`, a single slot of the live palette whose
``hex`` is always derived from its ``hsl``, and :class:`SavedPalette`, an
independent snapshot of a palette.
"""

from dataclasses import dataclass, field
from typing import Any, List

from .colorspace import HSL, hsl_to_hex


@dataclass
class Color:
    """One palette slot.

    Attributes
    ----------
    id:
        Slot identifier, unique within a palette.
    hsl:
        Color value. Assigning a new value recomputes ``hex``.
    locked:
        Locked slots are skipped by shuffle and mode changes.
    hex:
        Canonical lower-case ``#rrggbb`` encoding of ``hsl``. Read-only.
    """

    id: str
    hsl: HSL
    locked: bool = False
    hex: str = field(init=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "hex":
            raise AttributeError("Color.hex is derived from hsl and cannot be assigned")
        if name == "hsl":
            value = value.normalized()
            object.__setattr__(self, "hex", hsl_to_hex(value.h, value.s, value.l))
        object.__setattr__(self, name, value)

    def copy(self) -> "Color":
        """Return an independent copy (HSL is immutable and may be shared)."""
        return Color(id=self.id, hsl=self.hsl, locked=self.locked)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "hex": self.hex,
            "hsl": self.hsl.to_dict(),
            "locked": bool(self.locked),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Color":
        """Rebuild a Color from :meth:`to_dict` output.

        A stored ``hex`` is ignored; it is recomputed from ``hsl``.
        """
        if not isinstance(data, dict) or "id" not in data or "hsl" not in data:
            raise ValueError(f"invalid color mapping: {data!r}")
        return cls(
            id=str(data["id"]),
            hsl=HSL.from_dict(data["hsl"]),
            locked=bool(data.get("locked", False)),
        )


@dataclass
class SavedPalette:
    """Named snapshot of a palette.

    ``colors`` never shares :class:`Color` objects with the live palette.
    ``created_at`` is milliseconds since the epoch.
    """

    id: str
    name: str
    colors: List[Color]
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "colors": [c.to_dict() for c in self.colors],
            "createdAt": int(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SavedPalette":
        if not isinstance(data, dict):
            raise ValueError(f"invalid saved palette: {data!r}")
        try:
            colors_raw = data["colors"]
            if not isinstance(colors_raw, list):
                raise ValueError("colors must be a list")
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                colors=[Color.from_dict(c) for c in colors_raw],
                created_at=int(data.get("createdAt", 0)),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid saved palette: {data!r}") from exc


def copy_colors(colors: List[Color]) -> List[Color]:
    """Deep-copy a list of colors."""
    return [c.copy() for c in colors]


__all__ = ["Color", "SavedPalette", "copy_colors"]
