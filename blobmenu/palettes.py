"""
Colour schemes for the menu.

Each scheme defines:
  - item:       Item circle fill (RGB)
  - label:      Item label colour
  - pointer:    Pointer fill — connectors started by the pointer use it too
  - background: Canvas background

A scheme is applied as the item / text / pointer style layers of
:func:`blobmenu.config.build_config`.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .config import (
    DEFAULT_HANDLE_LEN_RATE,
    DEFAULT_MAX_DISTANCE,
    DEFAULT_POINTER_RADIUS,
    MenuConfig,
    build_config,
)

RGB = Tuple[int, int, int]


def to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


@dataclass(frozen=True)
class ColorScheme:
    """Immutable colour scheme for a menu."""
    name: str
    item: RGB
    label: RGB
    pointer: RGB
    background: RGB

    def item_style(self) -> Dict[str, Any]:
        return {"fill_color": to_hex(self.item)}

    def text_style(self) -> Dict[str, Any]:
        return {"fill_color": to_hex(self.label)}

    def pointer_style(self) -> Dict[str, Any]:
        return {"fill_color": to_hex(self.pointer)}


# ── Built-in schemes ─────────────────────────────────────────────────────

SCHEMES: Dict[str, ColorScheme] = {
    "mono": ColorScheme(
        name="Ink",
        item=(0, 0, 0), label=(255, 255, 255),
        pointer=(0, 0, 0), background=(255, 255, 255),
    ),
    "classic": ColorScheme(
        name="Classic Red",
        item=(180, 30, 10), label=(255, 230, 200),
        pointer=(180, 30, 10), background=(20, 8, 5),
    ),
    "blue": ColorScheme(
        name="Cosmic Blue",
        item=(20, 40, 180), label=(200, 225, 255),
        pointer=(20, 40, 180), background=(5, 8, 25),
    ),
    "green": ColorScheme(
        name="Acid Green",
        item=(30, 160, 20), label=(235, 255, 220),
        pointer=(30, 160, 20), background=(5, 20, 5),
    ),
    "gold": ColorScheme(
        name="Molten Gold",
        item=(180, 120, 10), label=(40, 28, 8),
        pointer=(180, 120, 10), background=(20, 14, 5),
    ),
    "sunset": ColorScheme(
        name="Sunset",
        item=(200, 50, 30), label=(255, 220, 180),
        pointer=(80, 20, 140), background=(20, 6, 4),
    ),
    "ocean_fire": ColorScheme(
        name="Ocean & Fire",
        item=(20, 60, 180), label=(220, 235, 255),
        pointer=(200, 60, 10), background=(4, 8, 20),
    ),
}

DEFAULT_SCHEME = "mono"


# ── Custom schemes ────────────────────────────────────────────────────────

def _clamp_rgb(r: float, g: float, b: float) -> RGB:
    return (
        max(0, min(255, int(r * 255))),
        max(0, min(255, int(g * 255))),
        max(0, min(255, int(b * 255))),
    )


def complementary(base: RGB) -> RGB:
    """Return the complementary (opposite hue) colour."""
    h, s, v = colorsys.rgb_to_hsv(base[0]/255, base[1]/255, base[2]/255)
    r, g, b = colorsys.hsv_to_rgb((h + 0.5) % 1.0, s, v)
    return _clamp_rgb(r, g, b)


def readable_label(base: RGB) -> RGB:
    """Black or white, whichever reads better on *base*."""
    luma = 0.299 * base[0] + 0.587 * base[1] + 0.114 * base[2]
    return (0, 0, 0) if luma > 150 else (255, 255, 255)


def make_bg_from_base(base: RGB) -> RGB:
    """Generate a very dark background tint from base."""
    return (max(1, base[0] // 12), max(1, base[1] // 12), max(1, base[2] // 12))


def create_custom_scheme(name: str, base: RGB, contrast_pointer: bool = False) -> ColorScheme:
    """Build a complete scheme from just an item colour.

    Args:
        name:             Display name.
        base:             Item fill RGB.
        contrast_pointer: Give the pointer the complementary colour.
    """
    pointer = complementary(base) if contrast_pointer else base
    return ColorScheme(
        name=name,
        item=base,
        label=readable_label(base),
        pointer=pointer,
        background=make_bg_from_base(base),
    )


def scheme_config(
    scheme: ColorScheme,
    max_distance: float = DEFAULT_MAX_DISTANCE,
    handle_len_rate: float = DEFAULT_HANDLE_LEN_RATE,
    pointer_radius: float = DEFAULT_POINTER_RADIUS,
) -> MenuConfig:
    """Menu settings with *scheme* as the style layers."""
    pointer = scheme.pointer_style()
    pointer["radius"] = float(pointer_radius)
    return build_config(
        item_style=scheme.item_style(),
        item_text_style=scheme.text_style(),
        pointer_style=pointer,
        max_distance=max_distance,
        handle_len_rate=handle_len_rate,
    )


# ── Accessors ─────────────────────────────────────────────────────────────

def get_scheme(name: str) -> ColorScheme:
    if name not in SCHEMES:
        available = ", ".join(sorted(SCHEMES.keys()))
        raise KeyError(f"Unknown scheme '{name}'. Available: {available}")
    return SCHEMES[name]


def list_schemes() -> List[str]:
    return sorted(SCHEMES.keys())
