"""
Menu orchestrator.

Owns the menu items and the pointer, lays them out on the surface and
re-derives every pairwise connector whenever the pointer moves or the
surface is resized.  The visible state is published as one immutable
:class:`Frame`, replaced wholesale after each recomputation, so a
renderer never sees a half-updated menu.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .config import BLEND_FACTOR, ItemStyle, MenuConfig, PointerStyle, TextStyle
from .geometry import ORIGIN, Circle, Connector, Point, metaball

logger = logging.getLogger(__name__)

ClickObserver = Callable[[float, float], None]


# ---------------------------------------------------------------------------
# Items and visuals
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class MenuItem:
    """A menu entry.

    ``x`` and ``y`` are fractions of the surface size (0..1); they are
    turned into pixels only at layout time.
    """
    x: float
    y: float
    radius: float
    label: str = ""
    style: Optional[Mapping[str, Any]] = None
    text_style: Optional[Mapping[str, Any]] = None
    on_click: Optional[Callable[[], Any]] = None

    def __post_init__(self):
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Item '{self.label}' position must be finite, got ({self.x!r}, {self.y!r})")
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(f"Item '{self.label}' radius must be finite and >= 0, got {self.radius!r}")


@dataclass(frozen=True)
class ItemVisual:
    item: MenuItem
    circle: Circle
    style: ItemStyle


# Label boxes are estimated from the text style so hit-testing stays
# toolkit-free: average glyph width and line height as fractions of font size.
GLYPH_WIDTH = 0.6
LINE_HEIGHT = 1.2


@dataclass(frozen=True)
class LabelVisual:
    item: MenuItem
    text: str
    position: Point
    style: TextStyle

    def bounds(self) -> Tuple[float, float, float, float]:
        """``(left, top, right, bottom)`` of the text block centred on ``position``."""
        lines = self.text.split("\n")
        size = self.style.font_size
        w = max(len(line) for line in lines) * size * GLYPH_WIDTH
        h = len(lines) * size * LINE_HEIGHT
        x, y = self.position.x, self.position.y
        return x - w / 2, y - h / 2, x + w / 2, y + h / 2

    def contains(self, point: Point) -> bool:
        if not self.text:
            return False
        left, top, right, bottom = self.bounds()
        return left <= point.x <= right and top <= point.y <= bottom


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs, bottom layer first."""
    width: float
    height: float
    connectors: Tuple[Connector, ...]
    items: Tuple[ItemVisual, ...]
    pointer: Circle
    pointer_style: PointerStyle
    labels: Tuple[LabelVisual, ...]


def compute_connections(
    circles: Sequence[Circle],
    styles: Sequence[Any],
    max_distance: float,
    handle_len_rate: float,
) -> Tuple[Connector, ...]:
    """Connectors for every unordered pair of *circles*.

    Each pair is visited once with the later circle as the first ball,
    so a connector takes the style of the later circle.
    """
    out: List[Connector] = []
    for i in range(len(circles)):
        for j in range(i - 1, -1, -1):
            path = metaball(
                circles[i], circles[j],
                BLEND_FACTOR, handle_len_rate, max_distance,
                style=styles[i],
            )
            if path is not None:
                out.append(path)
    return tuple(out)


def _log_click(x: float, y: float) -> None:
    logger.info("click x=%.3f y=%.3f", x, y)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

class CircleMenu:
    """Radial menu whose items blob into the pointer.

    Parameters:
        width, height:  Surface size in pixels.
        items:          Menu entries, in drawing order.
        config:         Resolved settings (or defaults).
        on_update:      Called after every change that needs a repaint.
        click_observer: Receives normalized coordinates of surface clicks.
    """

    def __init__(
        self,
        width: float,
        height: float,
        items: Sequence[MenuItem],
        config: Optional[MenuConfig] = None,
        on_update: Optional[Callable[[], None]] = None,
        click_observer: Optional[ClickObserver] = None,
    ) -> None:
        self.config = config or MenuConfig()
        self.items: Tuple[MenuItem, ...] = tuple(items)
        self._positions = np.array(
            [[it.x, it.y] for it in self.items], dtype=np.float64,
        ).reshape(-1, 2)
        self.width = float(width)
        self.height = float(height)
        self.on_update = on_update
        self.click_observer: ClickObserver = click_observer or _log_click

        self._pointer = Circle(ORIGIN, self.config.pointer_style.radius)
        self._item_visuals: Tuple[ItemVisual, ...] = ()
        self._labels: Tuple[LabelVisual, ...] = ()
        self.frame: Optional[Frame] = None
        self.draw_menu()

    # ── properties ────────────────────────────────────────────────────────

    @property
    def pointer(self) -> Circle:
        return self._pointer

    @property
    def connectors(self) -> Tuple[Connector, ...]:
        return self.frame.connectors if self.frame else ()

    def item_centers(self) -> np.ndarray:
        """(N, 2) pixel centres for the current surface size."""
        return self._positions * np.array([self.width, self.height])

    # ── layout ────────────────────────────────────────────────────────────

    def draw_menu(self) -> None:
        """Rebuild every item, label and the pointer, then reconnect."""
        cfg = self.config
        visuals: List[ItemVisual] = []
        labels: List[LabelVisual] = []
        for item, (x, y) in zip(self.items, self.item_centers()):
            center = Point(float(x), float(y))
            visuals.append(ItemVisual(
                item=item,
                circle=Circle(center, item.radius),
                style=cfg.item_style.merged(item.style),
            ))
            labels.append(LabelVisual(
                item=item,
                text=item.label,
                position=center,
                style=cfg.item_text_style.merged(item.text_style),
            ))
        self._item_visuals = tuple(visuals)
        self._labels = tuple(labels)
        self._pointer = Circle(self._pointer.center, cfg.pointer_style.radius)

        logger.info("Menu laid out: %d items on %dx%d",
                    len(self.items), self.width, self.height)
        self.draw_connections()

    def draw_connections(self) -> Tuple[Connector, ...]:
        """Recompute all connectors and publish a new frame."""
        cfg = self.config
        circles = [v.circle for v in self._item_visuals] + [self._pointer]
        styles = [v.style for v in self._item_visuals] + [cfg.pointer_style]
        connectors = compute_connections(
            circles, styles, cfg.max_distance, cfg.handle_len_rate,
        )
        self.frame = Frame(
            width=self.width,
            height=self.height,
            connectors=connectors,
            items=self._item_visuals,
            pointer=self._pointer,
            pointer_style=cfg.pointer_style,
            labels=self._labels,
        )
        logger.debug("Connections: %d", len(connectors))
        self._request_update()
        return connectors

    def set_config(self, config: MenuConfig) -> None:
        """Swap in new settings and relayout."""
        self.config = config
        self.draw_menu()

    def _request_update(self) -> None:
        if self.on_update is not None:
            self.on_update()

    # ── events ────────────────────────────────────────────────────────────

    def on_pointer_move(self, point: Point) -> None:
        self._pointer = self._pointer.moved_to(point)
        self.draw_connections()

    def on_resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.draw_menu()

    def item_at(self, point: Point) -> Optional[MenuItem]:
        """Topmost item whose label or circle contains *point*.

        Labels are drawn above every circle, so they are tested first.
        """
        for label in reversed(self._labels):
            if label.contains(point):
                return label.item
        for visual in reversed(self._item_visuals):
            if visual.circle.contains(point):
                return visual.item
        return None

    def on_item_click(self, item: MenuItem) -> bool:
        """Run the item's callback; a failing callback is logged, not raised.

        Returns True when the callback ran to completion.
        """
        if item.on_click is None:
            return False
        try:
            item.on_click()
        except Exception:
            logger.exception("Click handler for item '%s' failed", item.label)
            return False
        return True

    def on_surface_click(self, point: Point) -> Tuple[float, float]:
        x = point.x / self.width if self.width else 0.0
        y = point.y / self.height if self.height else 0.0
        self.click_observer(x, y)
        return x, y

    def click(self, point: Point) -> Optional[MenuItem]:
        """Delegate a click to the item under *point*, or to the surface."""
        item = self.item_at(point)
        if item is not None:
            self.on_item_click(item)
        else:
            self.on_surface_click(point)
        return item


# ---------------------------------------------------------------------------
# Demo menu
# ---------------------------------------------------------------------------

DEMO_LABELS = [
    "Home", "Search", "Mail", "Music", "Photos", "Maps",
    "Notes", "Clock", "Files", "Chat", "Store", "Settings",
]


def demo_items(count: int = 6, radius: float = 40.0, ring: float = 0.3) -> List[MenuItem]:
    """Items evenly spaced on a ring around the surface centre."""
    items: List[MenuItem] = []
    for i in range(count):
        angle = (i / max(count, 1)) * math.pi * 2 - math.pi / 2
        label = DEMO_LABELS[i % len(DEMO_LABELS)]
        items.append(MenuItem(
            x=0.5 + math.cos(angle) * ring,
            y=0.5 + math.sin(angle) * ring,
            radius=radius,
            label=label,
            text_style={"font_size": radius * 0.4},
            on_click=lambda label=label: logger.info("Selected %s", label),
        ))
    return items
