"""
Menu canvas widget — binds a :class:`CircleMenu` to a Qt surface.

Mouse tracking feeds pointer moves, resizes trigger a full relayout and
left clicks are delegated to the item under the cursor (or reported as a
surface click).  Painting happens in the main thread on ``update()``.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QImage, QPainter
from PyQt5.QtWidgets import QWidget

from .config import MenuConfig
from .geometry import Point
from .menu import CircleMenu, MenuItem
from .palettes import ColorScheme
from .renderer import render_frame

logger = logging.getLogger(__name__)


class MenuCanvas(QWidget):
    """Interactive blob menu display.

    Signals:
        connections_changed(int):       connector count after a recompute
        item_clicked(str):              label of a clicked item
        surface_clicked(float, float):  normalized position of a background click
    """

    connections_changed = pyqtSignal(int)
    item_clicked = pyqtSignal(str)
    surface_clicked = pyqtSignal(float, float)

    def __init__(
        self,
        items: Sequence[MenuItem],
        config: MenuConfig,
        scheme: ColorScheme,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.scheme = scheme
        self._last_count = -1

        self.setMinimumSize(320, 320)
        self.setMouseTracking(True)

        self.menu = CircleMenu(
            self.width(), self.height(), items, config,
            click_observer=self._on_surface_click,
        )
        self.menu.on_update = self._on_menu_update

    # ── configuration ─────────────────────────────────────────────────────

    def set_scheme(self, scheme: ColorScheme) -> None:
        self.scheme = scheme
        self.update()

    def set_config(self, config: MenuConfig) -> None:
        self.menu.set_config(config)

    # ── menu callbacks ────────────────────────────────────────────────────

    def _on_menu_update(self) -> None:
        count = len(self.menu.connectors)
        if count != self._last_count:
            self._last_count = count
            self.connections_changed.emit(count)
        self.update()

    def _on_surface_click(self, x: float, y: float) -> None:
        logger.info("click x=%.3f y=%.3f", x, y)
        self.surface_clicked.emit(x, y)

    # ── Qt events ─────────────────────────────────────────────────────────

    def paintEvent(self, event):
        frame = self.menu.frame
        if frame is None:
            return
        painter = QPainter(self)
        render_frame(painter, frame, self.scheme.background)
        painter.end()

    def resizeEvent(self, event):
        size = event.size()
        self.menu.on_resize(size.width(), size.height())
        super().resizeEvent(event)

    def mouseMoveEvent(self, event):
        pos = event.pos()
        self.menu.on_pointer_move(Point(pos.x(), pos.y()))

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return
        pos = event.pos()
        item = self.menu.click(Point(pos.x(), pos.y()))
        if item is not None:
            self.item_clicked.emit(item.label)

    # ── save ──────────────────────────────────────────────────────────────

    def get_image(self) -> QImage:
        return self.grab().toImage()
