"""
Control panel — live settings for the menu.

Organised into groups:
  - Colour scheme (with a custom item colour)
  - Connectors (max distance, handle rate)
  - Pointer (radius)
  - Actions (save)
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .canvas import MenuCanvas
from .config import ConfigError, MenuConfig
from .palettes import (
    SCHEMES,
    ColorScheme,
    create_custom_scheme,
    get_scheme,
    list_schemes,
    scheme_config,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Labelled slider helper
# ---------------------------------------------------------------------------

class LSlider(QWidget):
    """Horizontal slider with label and readout."""

    valueChanged = pyqtSignal(int)

    def __init__(self, label, lo, hi, val, suffix="", scale=1, parent=None):
        super().__init__(parent)
        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 1, 0, 1)

        self._lbl = QLabel(label)
        self._lbl.setFixedWidth(110)
        lay.addWidget(self._lbl)

        self._slider = QSlider(Qt.Horizontal)
        self._slider.setRange(lo, hi)
        self._slider.setValue(val)
        lay.addWidget(self._slider, stretch=1)

        self._suffix = suffix
        self._scale = scale
        self._ro = QLabel(self._fmt(val))
        self._ro.setFixedWidth(48)
        self._ro.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        lay.addWidget(self._ro)

        self._slider.valueChanged.connect(self._changed)

    def _fmt(self, v):
        if self._scale == 1:
            return f"{v}{self._suffix}"
        return f"{v / self._scale:g}{self._suffix}"

    def _changed(self, v):
        self._ro.setText(self._fmt(v))
        self.valueChanged.emit(v)

    def value(self):
        return self._slider.value()

    def scaled(self) -> float:
        return self._slider.value() / self._scale

    def setValue(self, v):
        self._slider.setValue(v)


# ---------------------------------------------------------------------------
# Control panel
# ---------------------------------------------------------------------------

class ControlPanel(QWidget):
    """Side panel with all menu controls."""

    save_requested = pyqtSignal()

    def __init__(
        self,
        canvas: MenuCanvas,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.canvas = canvas
        self._custom_scheme: Optional[ColorScheme] = None
        self.setFixedWidth(300)

        cfg = canvas.menu.config
        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        # ══════════════════════════════════════════════════════════════════
        # COLOUR SCHEME
        # ══════════════════════════════════════════════════════════════════
        color_group = QGroupBox("Colour Scheme")
        cg = QVBoxLayout(color_group)

        self._scheme_combo = QComboBox()
        for key in list_schemes():
            self._scheme_combo.addItem(SCHEMES[key].name, key)
            if SCHEMES[key] == canvas.scheme:
                self._scheme_combo.setCurrentIndex(self._scheme_combo.count() - 1)
        self._scheme_combo.currentIndexChanged.connect(self._on_scheme_changed)
        cg.addWidget(self._scheme_combo)

        custom_row = QHBoxLayout()
        custom_row.addWidget(QLabel("Custom Item:"))
        self._pick_btn = QPushButton("Pick…")
        self._pick_btn.setFixedWidth(60)
        self._pick_btn.clicked.connect(self._pick_item_color)
        custom_row.addWidget(self._pick_btn)
        custom_row.addStretch()
        cg.addLayout(custom_row)

        self._contrast_box = QCheckBox("Contrast pointer")
        self._contrast_box.toggled.connect(lambda _c: self._rebuild_custom())
        cg.addWidget(self._contrast_box)

        layout.addWidget(color_group)

        # ══════════════════════════════════════════════════════════════════
        # CONNECTORS
        # ══════════════════════════════════════════════════════════════════
        conn_group = QGroupBox("Connectors")
        kg = QVBoxLayout(conn_group)

        self._distance_slider = LSlider("Max Distance", 50, 800, int(cfg.max_distance), "px")
        self._distance_slider.valueChanged.connect(lambda _v: self._apply())
        kg.addWidget(self._distance_slider)

        self._rate_slider = LSlider("Handle Rate", 0, 50, int(round(cfg.handle_len_rate * 10)), scale=10)
        self._rate_slider.valueChanged.connect(lambda _v: self._apply())
        kg.addWidget(self._rate_slider)

        layout.addWidget(conn_group)

        # ══════════════════════════════════════════════════════════════════
        # POINTER
        # ══════════════════════════════════════════════════════════════════
        ptr_group = QGroupBox("Pointer")
        pg = QVBoxLayout(ptr_group)

        self._radius_slider = LSlider("Radius", 0, 150, int(cfg.pointer_style.radius), "px")
        self._radius_slider.valueChanged.connect(lambda _v: self._apply())
        pg.addWidget(self._radius_slider)

        layout.addWidget(ptr_group)

        # ══════════════════════════════════════════════════════════════════
        # ACTIONS
        # ══════════════════════════════════════════════════════════════════
        save_btn = QPushButton("↓  Save PNG")
        save_btn.clicked.connect(self.save_requested.emit)
        layout.addWidget(save_btn)

        # ── Status ────────────────────────────────────────────────────────
        self._status = QLabel("Move the pointer near an item")
        self._status.setWordWrap(True)
        self._status.setStyleSheet("color: #888; font-size: 11px; font-style: italic;")
        layout.addWidget(self._status)

        layout.addStretch()

        # ── wire signals ──────────────────────────────────────────────────
        canvas.connections_changed.connect(self._on_connections)

    # ── slots ─────────────────────────────────────────────────────────────

    def current_scheme(self) -> ColorScheme:
        if self._custom_scheme is not None:
            return self._custom_scheme
        return get_scheme(self._scheme_combo.currentData())

    def current_config(self) -> MenuConfig:
        return scheme_config(
            self.current_scheme(),
            max_distance=self._distance_slider.value(),
            handle_len_rate=self._rate_slider.scaled(),
            pointer_radius=self._radius_slider.value(),
        )

    def _apply(self) -> None:
        try:
            config = self.current_config()
        except ConfigError as e:
            logger.error("Config error: %s", e)
            return
        self.canvas.set_scheme(self.current_scheme())
        self.canvas.set_config(config)

    def _on_scheme_changed(self, idx: int) -> None:
        self._custom_scheme = None
        self._apply()

    def _pick_item_color(self) -> None:
        current = self.current_scheme().item
        color = QColorDialog.getColor(QColor(*current), self, "Pick Item Colour")
        if color.isValid():
            self._custom_scheme = create_custom_scheme(
                "Custom", (color.red(), color.green(), color.blue()),
                contrast_pointer=self._contrast_box.isChecked(),
            )
            self._apply()

    def _rebuild_custom(self) -> None:
        if self._custom_scheme is None:
            return
        self._custom_scheme = create_custom_scheme(
            "Custom", self._custom_scheme.item,
            contrast_pointer=self._contrast_box.isChecked(),
        )
        self._apply()

    def _on_connections(self, count: int) -> None:
        self._status.setText(f"{count} connector{'s' if count != 1 else ''} drawn")
