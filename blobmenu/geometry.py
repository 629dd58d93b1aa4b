"""
Metaball geometry engine.

Blends two circles into a single closed outline with Bezier-style handles.
Everything here is pure: the same circles and parameters always produce the
same connector, and rejected pairs yield ``None`` rather than an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

HALF_PI = math.pi / 2


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    """Immutable 2-D vector (y grows downwards, like the screen)."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def polar(cls, angle: float, length: float) -> "Point":
        """Vector of *length* pointing along *angle* (radians)."""
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0


ORIGIN = Point(0.0, 0.0)


# ---------------------------------------------------------------------------
# Circle
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Circle:
    """Snapshot of a circular shape at connection-computation time."""
    center: Point
    radius: float

    def __post_init__(self):
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(f"Circle radius must be finite and >= 0, got {self.radius!r}")
        if not (math.isfinite(self.center.x) and math.isfinite(self.center.y)):
            raise ValueError(f"Circle center must be finite, got {self.center!r}")

    def contains(self, point: Point) -> bool:
        return self.center.distance_to(point) <= self.radius

    def moved_to(self, center: Point) -> "Circle":
        return Circle(center, self.radius)


# ---------------------------------------------------------------------------
# Connector
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Segment:
    """Curve vertex with handles relative to ``point``."""
    point: Point
    handle_in: Point = ORIGIN
    handle_out: Point = ORIGIN


@dataclass(frozen=True)
class Connector:
    """Closed outline blending two circles.

    Segments run ``p1a -> p2a -> p2b -> p1b``.  Only the edges
    ``p1a -> p2a`` and ``p2b -> p1b`` carry handles; the other two are
    straight chords across each circle.
    """
    segments: Tuple[Segment, Segment, Segment, Segment]
    handle_scale: float
    style: Any = None
    closed: bool = True

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(s.point for s in self.segments)

    def edges(self):
        """Yield ``(start, control1, control2, end)`` for each edge.

        Controls are absolute; an edge whose controls coincide with its
        end points is a straight line.
        """
        n = len(self.segments)
        count = n if self.closed else n - 1
        for i in range(count):
            a = self.segments[i]
            b = self.segments[(i + 1) % n]
            yield a.point, a.point + a.handle_out, b.point + b.handle_in, b.point


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def _acos(x: float) -> float:
    return math.acos(max(-1.0, min(1.0, x)))


def metaball(
    ball1: Circle,
    ball2: Circle,
    v: float,
    handle_len_rate: float,
    max_distance: float,
    style: Any = None,
) -> Optional[Connector]:
    """Compute the blob connecting *ball1* and *ball2*.

    Parameters:
        ball1, ball2:    The circles to blend.
        v:               Blend factor; 0 hugs the raw tangent, 1 the full
                         outer-tangent silhouette.
        handle_len_rate: Curvature aggressiveness of the waist.
        max_distance:    Centre distance beyond which nothing is drawn.
        style:           Opaque style carried by the result (ball1's).

    Returns ``None`` when the circles cannot blend: a zero radius, too far
    apart, coincident centres, or one circle containing the other.
    """
    center1, center2 = ball1.center, ball2.center
    radius1, radius2 = ball1.radius, ball2.radius

    if radius1 == 0 or radius2 == 0:
        return None

    d = center1.distance_to(center2)
    if d == 0 or d > max_distance or d <= abs(radius1 - radius2):
        return None

    if d < radius1 + radius2:
        # overlapping: pull the departure points inward
        u1 = _acos((radius1 * radius1 + d * d - radius2 * radius2) / (2 * radius1 * d))
        u2 = _acos((radius2 * radius2 + d * d - radius1 * radius1) / (2 * radius2 * d))
    else:
        u1 = 0.0
        u2 = 0.0

    angle1 = (center2 - center1).angle
    angle2 = _acos((radius1 - radius2) / d)
    angle1a = angle1 + u1 + (angle2 - u1) * v
    angle1b = angle1 - u1 - (angle2 - u1) * v
    angle2a = angle1 + math.pi - u2 - (math.pi - u2 - angle2) * v
    angle2b = angle1 - math.pi + u2 + (math.pi - u2 - angle2) * v

    p1a = center1 + Point.polar(angle1a, radius1)
    p1b = center1 + Point.polar(angle1b, radius1)
    p2a = center2 + Point.polar(angle2a, radius2)
    p2b = center2 + Point.polar(angle2b, radius2)

    total_radius = radius1 + radius2
    d2 = min(v * handle_len_rate, (p1a - p2a).length / total_radius)
    # Shorter handles while the circles still overlap heavily
    d2 *= min(1.0, d * 2 / total_radius)

    h1 = radius1 * d2
    h2 = radius2 * d2

    segments = (
        Segment(p1a, handle_out=Point.polar(angle1a - HALF_PI, h1)),
        Segment(p2a, handle_in=Point.polar(angle2a + HALF_PI, h2)),
        Segment(p2b, handle_out=Point.polar(angle2b - HALF_PI, h2)),
        Segment(p1b, handle_in=Point.polar(angle1b + HALF_PI, h1)),
    )
    return Connector(segments=segments, handle_scale=d2, style=style)
