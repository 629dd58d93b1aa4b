"""
Frame renderer — paints a :class:`~blobmenu.menu.Frame` with QPainter.

Layers go bottom to top: connectors, item circles, pointer, labels, so
connectors never cover an item fill or its text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPainterPath, QPen

if TYPE_CHECKING:
    from .config import ItemStyle, TextStyle
    from .geometry import Circle, Connector
    from .menu import Frame

logger = logging.getLogger(__name__)

_ALIGN = {
    "left": Qt.AlignLeft,
    "center": Qt.AlignHCenter,
    "right": Qt.AlignRight,
}


def _qpoint(p) -> QPointF:
    return QPointF(p.x, p.y)


def connector_path(connector: "Connector") -> QPainterPath:
    """Closed QPainterPath for a connector; unhandled edges are lines."""
    path = QPainterPath()
    first = True
    for start, c1, c2, end in connector.edges():
        if first:
            path.moveTo(_qpoint(start))
            first = False
        if c1 == start and c2 == end:
            path.lineTo(_qpoint(end))
        else:
            path.cubicTo(_qpoint(c1), _qpoint(c2), _qpoint(end))
    if connector.closed:
        path.closeSubpath()
    return path


def _apply_style(painter: QPainter, style: Optional["ItemStyle"]) -> None:
    if style is None:
        painter.setBrush(QBrush(QColor("black")))
        painter.setPen(Qt.NoPen)
        return
    fill = QColor(style.fill_color)
    fill.setAlphaF(max(0.0, min(1.0, style.opacity)))
    painter.setBrush(QBrush(fill))
    if style.stroke_color and style.stroke_width > 0:
        painter.setPen(QPen(QColor(style.stroke_color), style.stroke_width))
    else:
        painter.setPen(Qt.NoPen)


def _draw_circle(painter: QPainter, circle: "Circle", style: "ItemStyle") -> None:
    _apply_style(painter, style)
    painter.drawEllipse(_qpoint(circle.center), circle.radius, circle.radius)


def label_rect(text: str, center, font: QFont) -> QRectF:
    """Tight box around *text*, centred on *center*."""
    fm = QFontMetricsF(font)
    lines = text.split("\n")
    w = max(fm.horizontalAdvance(line) for line in lines)
    h = fm.lineSpacing() * len(lines)
    return QRectF(center.x - w / 2, center.y - h / 2, w, h)


def _draw_label(painter: QPainter, text: str, center, style: "TextStyle") -> None:
    font = QFont(style.font_family)
    font.setPixelSize(max(1, int(round(style.font_size))))
    painter.setFont(font)
    painter.setPen(QColor(style.fill_color))
    # Block is always centred on the item; justification aligns lines within it
    rect = label_rect(text, center, font)
    align = _ALIGN.get(style.justification, Qt.AlignHCenter) | Qt.AlignVCenter
    painter.drawText(rect, int(align) | Qt.TextDontClip, text)


def render_frame(
    painter: QPainter,
    frame: "Frame",
    background: Optional[Tuple[int, int, int]] = None,
) -> None:
    """Paint one frame onto *painter*.

    Parameters:
        painter:    Active painter on the target surface.
        frame:      Snapshot published by the menu.
        background: RGB fill for the whole surface, or None to leave it.
    """
    painter.setRenderHint(QPainter.Antialiasing)
    if background is not None:
        painter.fillRect(QRectF(0, 0, frame.width, frame.height), QColor(*background))

    for connector in frame.connectors:
        _apply_style(painter, connector.style)
        painter.drawPath(connector_path(connector))

    for visual in frame.items:
        _draw_circle(painter, visual.circle, visual.style)

    _draw_circle(painter, frame.pointer, frame.pointer_style)

    for label in frame.labels:
        if label.text:
            _draw_label(painter, label.text, label.position, label.style)
