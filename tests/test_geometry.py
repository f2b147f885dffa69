import pytest

from kinechain.geometry import Rectangle, Vec2


def test_vector_length_of_pythagorean_triple():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_vector_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a + b) - b == a
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0
    assert -(-a) == a


def test_vector_unpacks():
    x, y = Vec2(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)


def test_from_corners_orders_coordinates():
    rect = Rectangle.from_corners(Vec2(1.0, 3.0), Vec2(4.0, 1.0))
    assert rect.lower_left() == Vec2(1.0, 1.0)
    assert rect.upper_right() == Vec2(4.0, 3.0)
    assert rect.upper_left() == Vec2(1.0, 3.0)
    assert rect.lower_right() == Vec2(4.0, 1.0)


@pytest.mark.parametrize(
    "a, b",
    [
        (Vec2(0.0, 0.0), Vec2(2.0, 5.0)),
        (Vec2(-1.0, 2.0), Vec2(3.0, -4.0)),
        (Vec2(2.5, 2.5), Vec2(2.5, 2.5)),
    ],
)
def test_from_corners_is_symmetric(a, b):
    assert Rectangle.from_corners(a, b) == Rectangle.from_corners(b, a)
    rect = Rectangle.from_corners(a, b)
    assert rect.width >= 0
    assert rect.height >= 0


def test_corners_agree_with_size():
    rect = Rectangle(Vec2(-1.0, 2.0), 3.0, 0.5)
    assert rect.upper_right() - rect.lower_left() == Vec2(rect.width, rect.height)
    assert rect.lower_right().y == rect.lower_left().y
    assert rect.upper_left().x == rect.lower_left().x


def test_rectangle_equality():
    assert Rectangle(Vec2(1.0, 1.0), 2.0, 2.0) == Rectangle.from_corners(
        Vec2(1.0, 1.0), Vec2(3.0, 3.0)
    )
    assert Rectangle(Vec2(1.0, 1.0), 2.0, 2.0) != Rectangle(Vec2(1.0, 1.0), 2.0, 1.0)


def test_default_rectangle_is_degenerate_at_origin():
    rect = Rectangle()
    assert rect.lower_left() == Vec2()
    assert rect.upper_right() == Vec2()