"""
Main window — assembles the menu canvas, control panel, and menu bar.
"""

from __future__ import annotations

import logging
from typing import Sequence

from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import (
    QAction,
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QWidget,
)

from . import __version__
from .canvas import MenuCanvas
from .config import MenuConfig
from .controls import ControlPanel
from .menu import MenuItem
from .palettes import ColorScheme

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window for the Blob Menu demo."""

    def __init__(
        self,
        items: Sequence[MenuItem],
        config: MenuConfig,
        scheme: ColorScheme,
    ) -> None:
        super().__init__()
        self.setWindowTitle(f"Blob Menu  v{__version__}")
        self.setMinimumSize(720, 480)

        self.canvas = MenuCanvas(items, config, scheme)
        self.controls = ControlPanel(self.canvas)

        # Layout
        central = QWidget()
        self.setCentralWidget(central)
        h_layout = QHBoxLayout(central)
        h_layout.setContentsMargins(8, 8, 8, 8)
        h_layout.setSpacing(12)
        h_layout.addWidget(self.canvas, stretch=1)
        h_layout.addWidget(self.controls)

        self._build_menu()

        self.statusBar().showMessage("Move the pointer towards an item")

        # Signals
        self.controls.save_requested.connect(self._save)
        self.canvas.item_clicked.connect(self._on_item_clicked)
        self.canvas.surface_clicked.connect(self._on_surface_clicked)

    def _build_menu(self) -> None:
        menu = self.menuBar()

        file_menu = menu.addMenu("&File")
        save_act = QAction("&Save Image…", self)
        save_act.setShortcut(QKeySequence.Save)
        save_act.triggered.connect(self._save)
        file_menu.addAction(save_act)
        file_menu.addSeparator()
        quit_act = QAction("&Quit", self)
        quit_act.setShortcut(QKeySequence.Quit)
        quit_act.triggered.connect(self.close)
        file_menu.addAction(quit_act)

        help_menu = menu.addMenu("&Help")
        about_act = QAction("&About", self)
        about_act.triggered.connect(self._about)
        help_menu.addAction(about_act)

    def _save(self) -> None:
        img = self.canvas.get_image()
        path, _ = QFileDialog.getSaveFileName(
            self, "Save Menu Image", "blobmenu.png",
            "PNG (*.png);;JPEG (*.jpg);;All (*)",
        )
        if path:
            if img.save(path):
                self.statusBar().showMessage(f"Saved to {path}")
            else:
                QMessageBox.critical(self, "Save Error", f"Failed to save:\n{path}")

    def _on_item_clicked(self, label: str) -> None:
        self.statusBar().showMessage(f"Selected: {label}")

    def _on_surface_clicked(self, x: float, y: float) -> None:
        self.statusBar().showMessage(f"Clicked at x={x:.3f}, y={y:.3f}")

    def _about(self) -> None:
        QMessageBox.about(
            self,
            "About Blob Menu",
            f"<h3>Blob Menu v{__version__}</h3>"
            "<p>A radial menu whose items melt into the pointer.</p>"
            "<p>Every pair of circles closer than the maximum distance "
            "is joined by a metaball connector: a closed outline that "
            "leaves each circle at a blended tangent angle and pinches "
            "into a waist drawn with cubic Bézier handles.</p>"
            "<p><b>Interactions:</b></p>"
            "<ul>"
            "<li>Move the mouse to drag the pointer blob</li>"
            "<li>Click an item to select it</li>"
            "<li>Tune distance, handle rate and pointer size on the right</li>"
            "</ul>",
        )
