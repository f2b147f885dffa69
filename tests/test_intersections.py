import pytest

from kinechain.geometry import Rectangle, Vec2
from kinechain.intersections import (
    cross,
    inside_rectangle,
    segment_intersects_rectangle,
    segments_intersect,
)


def test_cross_of_unit_axes():
    assert cross(Vec2(1.0, 0.0), Vec2(0.0, 1.0)) == 1.0


def test_cross_is_antisymmetric_and_zero_for_parallel():
    a = Vec2(2.0, -1.0)
    b = Vec2(0.5, 3.0)
    assert cross(a, b) == -cross(b, a)
    assert cross(a, a * 4.0) == 0.0


CASES = [
    # crossing diagonals
    (Vec2(0, 0), Vec2(2, 2), Vec2(0, 2), Vec2(2, 0), True),
    # parallel, apart
    (Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), Vec2(1, 1), False),
    # sharing an endpoint
    (Vec2(0, 0), Vec2(1, 0), Vec2(1, 0), Vec2(1, 1), True),
    # collinear and overlapping
    (Vec2(0, 0), Vec2(2, 0), Vec2(1, 0), Vec2(3, 0), True),
    # collinear and disjoint
    (Vec2(0, 0), Vec2(1, 0), Vec2(2, 0), Vec2(3, 0), False),
    # T-shape, one end touching the middle of the other
    (Vec2(0, 0), Vec2(2, 0), Vec2(1, 0), Vec2(1, 5), True),
    # would cross if extended, but too short
    (Vec2(0, 0), Vec2(1, 1), Vec2(3, 0), Vec2(2, 1), False),
]


@pytest.mark.parametrize("p1, p2, p3, p4, expected", CASES)
def test_segments_intersect(p1, p2, p3, p4, expected):
    assert segments_intersect(p1, p2, p3, p4) is expected


@pytest.mark.parametrize("p1, p2, p3, p4, expected", CASES)
def test_segments_intersect_is_symmetric(p1, p2, p3, p4, expected):
    assert segments_intersect(p3, p4, p1, p2) is expected
    assert segments_intersect(p2, p1, p4, p3) is expected


def test_inside_rectangle_includes_boundary():
    low, high = Vec2(1, 1), Vec2(3, 3)
    assert inside_rectangle(low, high, Vec2(2, 2))
    assert inside_rectangle(low, high, low)
    assert inside_rectangle(low, high, high)
    assert not inside_rectangle(low, high, Vec2(3.01, 2))
    assert not inside_rectangle(low, high, Vec2(2, 0.99))


@pytest.fixture
def square():
    return Rectangle.from_corners(Vec2(1, 1), Vec2(3, 3))


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (Vec2(1.5, 1.5), Vec2(2, 2), True),  # wholly inside
        (Vec2(0, 2), Vec2(4, 2), True),  # passes through
        (Vec2(0, 2), Vec2(1, 2), True),  # ends on the left edge
        (Vec2(0, 0), Vec2(0.5, 0.5), False),  # left and below
        (Vec2(4, 0), Vec2(5, 5), False),  # to the right
        (Vec2(0, 2.5), Vec2(1.5, 4.5), False),  # passes the corner outside
    ],
)
def test_segment_intersects_rectangle(square, start, end, expected):
    assert segment_intersects_rectangle(square, start, end) is expected
    assert segment_intersects_rectangle(square, end, start) is expected


def test_degenerate_rectangle_hit_by_crossing_segment():
    point_rect = Rectangle(Vec2(1, 1), 0.0, 0.0)
    assert segment_intersects_rectangle(point_rect, Vec2(0, 0), Vec2(2, 2))
    assert not segment_intersects_rectangle(point_rect, Vec2(0, 1.5), Vec2(2, 1.5))