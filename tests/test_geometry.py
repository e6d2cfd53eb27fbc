import pytest

from moonfield.geometry import (
    Rect,
    Vector2,
    any_collides,
    circle_rect_collide,
    point_in_rect,
    rects_overlap,
)


def test_vector_arithmetic_round_trip():
    a = Vector2(3.0, -2.0)
    b = Vector2(1.5, 4.0)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert tuple(a) == (3.0, -2.0)


def test_rect_edges_and_center():
    r = Rect(10, 20, 32, 32)
    assert r.right == 10 + 32
    assert r.bottom == 20 + 32
    assert r.center == Vector2(10 + 16, 20 + 16)


def test_circle_inside_rect_collides():
    assert circle_rect_collide(Vector2(16, 16), 16, Rect(0, 0, 32, 32)) is True


def test_circle_far_away_does_not_collide():
    assert circle_rect_collide(Vector2(200, 200), 16, Rect(0, 0, 32, 32)) is False


def test_circle_touching_edge_collides():
    # centre exactly one radius to the left of the rectangle
    assert circle_rect_collide(Vector2(-16, 16), 16, Rect(0, 0, 32, 32)) is True


def test_circle_near_corner_but_outside_diagonal():
    # within the bounding box expanded by the radius, but beyond the corner arc
    assert circle_rect_collide(Vector2(-12, -12), 16, Rect(0, 0, 32, 32)) is False


@pytest.mark.parametrize(
    "point, inside",
    [
        (Vector2(0, 0), True),
        (Vector2(31.9, 31.9), True),
        (Vector2(32, 10), False),
        (Vector2(10, 32), False),
        (Vector2(-0.1, 10), False),
    ],
)
def test_point_in_rect_edges(point, inside):
    assert point_in_rect(point, Rect(0, 0, 32, 32)) is inside


def test_rects_overlap_is_symmetric():
    a = Rect(0, 0, 32, 32)
    b = Rect(16, 16, 32, 32)
    assert rects_overlap(a, b) is True
    assert rects_overlap(b, a) is True


def test_adjacent_rects_do_not_overlap():
    assert rects_overlap(Rect(0, 0, 32, 32), Rect(32, 0, 32, 32)) is False


def test_any_collides():
    assert any_collides([1, 2, 3], lambda n: n > 2) is True
    assert any_collides([1, 2, 3], lambda n: n > 3) is False
    assert any_collides([], lambda n: True) is False