import math

import pytest

from mazechase.geometry import (
    Rect,
    angle,
    distance,
    rect_make,
    rect_make_center,
    resolve_collision,
)


def test_rect_make_keeps_corner_and_size():
    r = rect_make(1, 2, 3, 4)
    assert (r.left, r.top) == (1, 2)
    assert r.width() == 3
    assert r.height() == 4


def test_rect_make_truncates_floats():
    assert rect_make(1.9, 2.2, 3, 4) == rect_make(1, 2, 3, 4)


def test_rect_make_center_is_centred():
    r = rect_make_center(50, 60, 20, 10)
    assert (r.left + r.right) // 2 == 50
    assert (r.top + r.bottom) // 2 == 60
    assert r.width() == 20
    assert r.height() == 10


def test_offset_round_trip():
    r = rect_make(5, 7, 11, 13)
    assert r.offset(3, -4).offset(-3, 4) == r
    moved = r.offset(3, -4)
    assert moved.width() == r.width()
    assert moved.left == r.left + 3


def test_intersection_disjoint_and_touching():
    a = rect_make(0, 0, 10, 10)
    assert a.intersection(rect_make(20, 20, 5, 5)) is None
    assert a.intersection(rect_make(10, 0, 5, 5)) is None


def test_intersection_symmetric_and_contained():
    a = rect_make(0, 0, 10, 10)
    b = rect_make(5, 5, 10, 10)
    assert a.intersection(b) == b.intersection(a)
    inner = rect_make(2, 3, 4, 5)
    assert a.intersection(inner) == inner


def test_contains_edges():
    r = rect_make(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert not r.contains(10, 5)
    assert not r.contains(5, 10)
    assert r.contains(9, 9)


def test_resolve_no_collision():
    assert resolve_collision(rect_make(0, 0, 10, 10), rect_make(50, 50, 5, 5)) is None


def test_resolve_from_top():
    hold = rect_make(0, 10, 100, 20)
    move = rect_make(40, 5, 20, 10)
    result = resolve_collision(hold, move)
    assert result.bottom == hold.top
    assert result.left == move.left
    assert hold.intersection(result) is None


def test_resolve_from_bottom():
    hold = rect_make(0, 10, 100, 20)
    move = rect_make(40, 25, 20, 10)
    result = resolve_collision(hold, move)
    assert result.top == hold.bottom
    assert hold.intersection(result) is None


def test_resolve_from_left():
    hold = rect_make(10, 0, 20, 100)
    move = rect_make(5, 40, 10, 20)
    result = resolve_collision(hold, move)
    assert result.right == hold.left
    assert result.top == move.top


def test_resolve_from_right():
    hold = rect_make(10, 0, 20, 100)
    move = rect_make(25, 40, 10, 20)
    result = resolve_collision(hold, move)
    assert result.left == hold.right


def test_distance():
    assert distance(0, 0, 3, 4) == pytest.approx(5.0)
    assert distance(1, 2, 7, -3) == pytest.approx(distance(7, -3, 1, 2))


def test_angle_right_is_zero():
    assert angle(0, 0, 10, 0) == pytest.approx(0.0)


@pytest.mark.parametrize("dx,dy", [(3, 4), (-2, 5), (-6, -1), (4, -4), (0, -7)])
def test_angle_round_trip(dx, dy):
    a = angle(10, 20, 10 + dx, 20 + dy)
    d = distance(10, 20, 10 + dx, 20 + dy)
    assert 0 <= a < 2 * math.pi
    assert math.cos(a) * d == pytest.approx(dx)
    assert -math.sin(a) * d == pytest.approx(dy)


def test_rect_is_immutable():
    r = Rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        r.left = 5
    assert r.left == 0
    assert r == Rect(0, 0, 1, 1)