"""
Menu configuration — style records and the layered config builder.

Styles resolve in tiers, each layer a plain mapping of overrides applied
over an immutable record:

  - item style:    defaults → ``item_style``
  - text style:    defaults → ``item_text_style``
  - pointer style: defaults → ``item_style`` → ``pointer_style``

Per-item ``style`` / ``text_style`` overrides are layered on top at
layout time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Optional

DEFAULT_MAX_DISTANCE = 300.0
DEFAULT_HANDLE_LEN_RATE = 2.4
DEFAULT_POINTER_RADIUS = 50.0
BLEND_FACTOR = 0.5


class ConfigError(ValueError):
    """Raised for unknown style keys or out-of-range settings."""


def _merge(record, overrides: Optional[Mapping[str, Any]]):
    if not overrides:
        return record
    known = {f.name for f in fields(record)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(
            f"Unknown {type(record).__name__} key(s): {', '.join(unknown)}. "
            f"Known: {', '.join(sorted(known))}"
        )
    return replace(record, **overrides)


# ---------------------------------------------------------------------------
# Style records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ItemStyle:
    """Fill/stroke of an item circle (and of the connectors it starts)."""
    fill_color: str = "black"
    stroke_color: Optional[str] = None
    stroke_width: float = 0.0
    opacity: float = 1.0

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "ItemStyle":
        return _merge(self, overrides)


@dataclass(frozen=True)
class TextStyle:
    """Item label appearance."""
    fill_color: str = "white"
    font_size: float = 32.0
    font_family: str = "sans-serif"
    justification: str = "center"

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "TextStyle":
        return _merge(self, overrides)


@dataclass(frozen=True)
class PointerStyle(ItemStyle):
    """Item style plus the pointer's fixed radius."""
    radius: float = DEFAULT_POINTER_RADIUS

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "PointerStyle":
        return _merge(self, overrides)


# ---------------------------------------------------------------------------
# Menu configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MenuConfig:
    """Fully resolved menu settings.

    Attributes:
        item_style:      Default style of every item circle.
        item_text_style: Default style of every label.
        pointer_style:   Style and radius of the pointer circle.
        max_distance:    Centre distance beyond which no connector is drawn.
        handle_len_rate: Curvature aggressiveness of connector waists.
    """
    item_style: ItemStyle = field(default_factory=ItemStyle)
    item_text_style: TextStyle = field(default_factory=TextStyle)
    pointer_style: PointerStyle = field(default_factory=PointerStyle)
    max_distance: float = DEFAULT_MAX_DISTANCE
    handle_len_rate: float = DEFAULT_HANDLE_LEN_RATE

    def __post_init__(self):
        if not math.isfinite(self.max_distance) or self.max_distance <= 0:
            raise ConfigError(f"max_distance must be > 0, got {self.max_distance!r}")
        if not math.isfinite(self.handle_len_rate) or self.handle_len_rate < 0:
            raise ConfigError(f"handle_len_rate must be >= 0, got {self.handle_len_rate!r}")
        r = self.pointer_style.radius
        if not math.isfinite(r) or r < 0:
            raise ConfigError(f"pointer radius must be >= 0, got {r!r}")


def build_config(
    item_style: Optional[Mapping[str, Any]] = None,
    item_text_style: Optional[Mapping[str, Any]] = None,
    pointer_style: Optional[Mapping[str, Any]] = None,
    max_distance: float = DEFAULT_MAX_DISTANCE,
    handle_len_rate: float = DEFAULT_HANDLE_LEN_RATE,
) -> MenuConfig:
    """Resolve user overrides into a :class:`MenuConfig`.

    The pointer inherits the caller's ``item_style`` before its own
    ``pointer_style`` overrides apply.
    """
    items = ItemStyle().merged(item_style)
    text = TextStyle().merged(item_text_style)
    pointer = PointerStyle().merged(item_style).merged(pointer_style)
    return MenuConfig(
        item_style=items,
        item_text_style=text,
        pointer_style=pointer,
        max_distance=float(max_distance),
        handle_len_rate=float(handle_len_rate),
    )
