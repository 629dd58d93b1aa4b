import os

import pytest

# Qt tests render without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from blobmenu.config import build_config
from blobmenu.geometry import Point
from blobmenu.menu import CircleMenu, MenuItem


def ring_items(width, height, center, distance, radius=40.0, count=3):
    """Items evenly spaced at *distance* pixels around *center*."""
    import math
    items = []
    for i in range(count):
        angle = -math.pi / 2 + i * 2 * math.pi / count
        x = center.x + math.cos(angle) * distance
        y = center.y + math.sin(angle) * distance
        items.append(MenuItem(x=x / width, y=y / height, radius=radius, label=f"item{i}"))
    return items


@pytest.fixture
def triangle_menu():
    """Three radius-40 items 100px from the surface centre of an 800x600 menu."""
    def make(max_distance=300.0, **kwargs):
        config = build_config(max_distance=max_distance)
        items = ring_items(800, 600, Point(400, 300), 100.0)
        return CircleMenu(800, 600, items, config, **kwargs)
    return make
