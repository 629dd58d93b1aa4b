import math

import pytest

from blobmenu.geometry import Circle, Connector, Point, metaball


def ball(x, y, r):
    return Circle(Point(x, y), r)


def connect(a, b, v=0.5, rate=2.4, max_distance=300.0, **kw):
    return metaball(a, b, v, rate, max_distance, **kw)


# ---------------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("r1, r2", [(0, 40), (40, 0), (0, 0)])
def test_zero_radius_never_connects(r1, r2):
    assert connect(ball(0, 0, r1), ball(60, 0, r2)) is None


def test_beyond_max_distance():
    assert connect(ball(0, 0, 40), ball(301, 0, 50)) is None
    assert connect(ball(0, 0, 40), ball(300, 0, 50)) is not None


def test_contained_circle():
    # d <= |r1 - r2|
    assert connect(ball(0, 0, 100), ball(20, 0, 30)) is None
    assert connect(ball(0, 0, 100), ball(70, 0, 30)) is None
    assert connect(ball(20, 0, 30), ball(0, 0, 100)) is None


def test_coincident_centres_rejected():
    assert connect(ball(10, 10, 40), ball(10, 10, 40)) is None
    assert connect(ball(10, 10, 40), ball(10, 10, 60)) is None


# ---------------------------------------------------------------------------
# Outline shape
# ---------------------------------------------------------------------------

def test_separate_equal_circles_leave_at_quarter_angles():
    c = connect(ball(0, 0, 40), ball(200, 0, 40))
    p1a, p2a, p2b, p1b = c.points
    # u = 0, angle2 = pi/2, v = 0.5 -> 45 degrees off the axis
    s = 40 * math.sqrt(0.5)
    assert p1a.x == pytest.approx(s)
    assert p1a.y == pytest.approx(s)
    assert p2a.x == pytest.approx(200 - s)
    assert p2a.y == pytest.approx(s)
    assert p1b.y == pytest.approx(-s)
    assert p2b.y == pytest.approx(-s)


def test_vertices_lie_on_their_circles():
    a, b = ball(10, 20, 35), ball(90, 70, 55)
    c = connect(a, b)
    p1a, p2a, p2b, p1b = c.points
    for p in (p1a, p1b):
        assert a.center.distance_to(p) == pytest.approx(a.radius)
    for p in (p2a, p2b):
        assert b.center.distance_to(p) == pytest.approx(b.radius)


@pytest.mark.parametrize("d", [30.0, 60.0, 80.0, 150.0, 250.0])
def test_equal_circles_are_symmetric_about_axis(d):
    c = connect(ball(0, 0, 50), ball(d, 0, 50))
    s0, s1, s2, s3 = c.segments
    # p1a mirrors p1b, p2a mirrors p2b across y = 0
    assert s0.point.x == pytest.approx(s3.point.x)
    assert s0.point.y == pytest.approx(-s3.point.y)
    assert s1.point.x == pytest.approx(s2.point.x)
    assert s1.point.y == pytest.approx(-s2.point.y)
    assert s0.handle_out.x == pytest.approx(s3.handle_in.x)
    assert s0.handle_out.y == pytest.approx(-s3.handle_in.y)
    assert s1.handle_in.x == pytest.approx(s2.handle_out.x)
    assert s1.handle_in.y == pytest.approx(-s2.handle_out.y)
    # and the two circles mirror each other across x = d / 2
    assert s0.point.x + s1.point.x == pytest.approx(d)


def test_handles_are_tangent_with_scaled_radii():
    a, b = ball(0, 0, 40), ball(120, 30, 60)
    c = connect(a, b)
    s0, s1, s2, s3 = c.segments
    d2 = c.handle_scale
    for seg, circle, handle in (
        (s0, a, s0.handle_out),
        (s3, a, s3.handle_in),
        (s1, b, s1.handle_in),
        (s2, b, s2.handle_out),
    ):
        radial = seg.point - circle.center
        assert handle.length == pytest.approx(circle.radius * d2)
        assert radial.x * handle.x + radial.y * handle.y == pytest.approx(0.0, abs=1e-9)
    # unused handles stay zero
    assert s0.handle_in.is_zero()
    assert s1.handle_out.is_zero()
    assert s2.handle_in.is_zero()
    assert s3.handle_out.is_zero()


def test_touching_circles_use_outer_tangents():
    # d == r1 + r2 is not an overlap, so u = 0
    c = connect(ball(0, 0, 40), ball(80, 0, 40))
    p1a = c.points[0]
    assert p1a.angle == pytest.approx(math.pi / 4)


def test_overlapping_circles_pull_inward():
    near = connect(ball(0, 0, 50), ball(60, 0, 50))
    far = connect(ball(0, 0, 50), ball(200, 0, 50))
    # with overlap the departure angle moves away from the axis
    assert near.points[0].angle > far.points[0].angle


def test_handle_scale_shrinks_as_circles_close_in():
    scales = [
        connect(ball(0, 0, 50), ball(d, 0, 50)).handle_scale
        for d in (40.0, 80.0, 150.0, 290.0)
    ]
    assert scales == sorted(scales)
    # overlap factor min(1, 2d / total) = 0.4 at d = 40
    assert scales[0] < 0.4 * 1.2
    # distant circles are capped at v * handle_len_rate
    assert scales[-1] == pytest.approx(0.5 * 2.4)


def test_handle_scale_follows_handle_len_rate():
    a, b = ball(0, 0, 40), ball(280, 0, 40)
    assert connect(a, b, rate=1.0).handle_scale == pytest.approx(0.5)
    assert connect(a, b, rate=0.0).handle_scale == 0.0


def test_metaball_is_pure():
    a, b = ball(3.5, -7.25, 33), ball(61, 40, 47)
    assert connect(a, b, style="x") == connect(a, b, style="x")


def test_style_and_closed_flag():
    c = connect(ball(0, 0, 40), ball(100, 0, 50), style={"fill": "red"})
    assert isinstance(c, Connector)
    assert c.style == {"fill": "red"}
    assert c.closed


def test_edges_walk_the_closed_outline():
    c = connect(ball(0, 0, 40), ball(100, 0, 40))
    edges = list(c.edges())
    assert len(edges) == 4
    assert edges[0][0] == c.points[0]
    assert edges[-1][3] == c.points[0]
    # chord across circle B has no handles
    start, c1, c2, end = edges[1]
    assert c1 == start and c2 == end


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

def test_point_arithmetic():
    p = Point(3, 4)
    assert p.length == 5
    assert (p + Point(1, 1)) == Point(4, 5)
    assert (p - Point(3, 4)).is_zero()
    assert 2 * p == Point(6, 8)
    assert Point.polar(math.pi / 2, 2).x == pytest.approx(0.0, abs=1e-12)
    assert Point.polar(math.pi / 2, 2).y == pytest.approx(2.0)


@pytest.mark.parametrize("radius", [-1.0, float("nan"), float("inf")])
def test_circle_rejects_bad_radius(radius):
    with pytest.raises(ValueError):
        Circle(Point(0, 0), radius)


def test_circle_contains():
    c = Circle(Point(10, 10), 5)
    assert c.contains(Point(13, 14))
    assert not c.contains(Point(16, 10))
