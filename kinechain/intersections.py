"""Segment-segment and segment-rectangle intersection tests."""

from __future__ import annotations

from .geometry import Rectangle, Vec2


def cross(v1: Vec2, v2: Vec2) -> float:
    """The z component of the cross product of two plane vectors."""
    return v1.x * v2.y - v2.x * v1.y


def segments_intersect(p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2) -> bool:
    """Whether segment p1-p2 meets segment p3-p4, touching included."""
    d1 = cross(p4 - p3, p1 - p3)
    d2 = cross(p4 - p3, p2 - p3)
    d3 = cross(p2 - p1, p3 - p1)
    d4 = cross(p2 - p1, p4 - p1)

    d12 = d1 * d2
    d34 = d3 * d4

    if d12 > 0.0 or d34 > 0.0:
        return False
    if d12 < 0.0 and d34 < 0.0:
        return True
    if p1 in (p3, p4) or p2 in (p3, p4):
        return True

    return not (
        max(p1.x, p2.x) < min(p3.x, p4.x)
        or max(p3.x, p4.x) < min(p1.x, p2.x)
        or max(p1.y, p2.y) < min(p3.y, p4.y)
        or max(p3.y, p4.y) < min(p1.y, p2.y)
    )


def inside_rectangle(lower_left: Vec2, upper_right: Vec2, point: Vec2) -> bool:
    """Whether the point lies in the closed box between the two corners."""
    return (
        lower_left.x <= point.x <= upper_right.x
        and lower_left.y <= point.y <= upper_right.y
    )


def segment_intersects_rectangle(rectangle: Rectangle, start: Vec2, end: Vec2) -> bool:
    """Whether the segment start-end touches the closed rectangle."""
    lower_left = rectangle.lower_left()
    if start.x < lower_left.x and end.x < lower_left.x:
        return False
    if start.y < lower_left.y and end.y < lower_left.y:
        return False

    upper_right = rectangle.upper_right()
    if start.x > upper_right.x and end.x > upper_right.x:
        return False
    if start.y > upper_right.y and end.y > upper_right.y:
        return False

    if inside_rectangle(lower_left, upper_right, start) and inside_rectangle(
        lower_left, upper_right, end
    ):
        return True

    upper_left = rectangle.upper_left()
    lower_right = rectangle.lower_right()
    edges = (
        (lower_left, upper_left),
        (upper_left, upper_right),
        (upper_right, lower_right),
        (lower_right, lower_left),
    )
    return any(segments_intersect(a, b, start, end) for a, b in edges)