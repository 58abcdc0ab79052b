import math

import pytest

from brickbreaker.geometry import Rect, Vec2


def test_add_sub_round_trip():
    a = Vec2(3.5, -2.0)
    b = Vec2(1.25, 7.0)
    assert (a + b) - b == a


def test_scalar_ops_round_trip():
    a = Vec2(4.0, -6.0)
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0
    assert -(-a) == a


def test_normalized_has_unit_length():
    v = Vec2(3.0, -7.0).normalized()
    assert math.isclose(v.length_sq(), 1.0)


def test_normalized_zero_stays_zero():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


def test_rounded_halves_away_from_zero():
    assert Vec2(2.5, -2.5).rounded() == Vec2(3.0, -3.0)


def test_from_center_round_trip():
    center = Vec2(100.0, 50.0)
    rect = Rect.from_center(center, 20.0, 5.0)
    assert rect.center == center
    assert rect.width == 40.0
    assert rect.height == 10.0


def test_from_pos_size():
    rect = Rect.from_pos_size(Vec2(24.0, 24.0), 605.0, 576.0)
    assert rect.left == 24.0
    assert rect.top == 24.0
    assert rect.width == 605.0
    assert rect.height == 576.0


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rect(0, 10, 0, 10), Rect(5, 15, 5, 15), True),
        (Rect(0, 10, 0, 10), Rect(10, 20, 0, 10), False),
        (Rect(0, 10, 0, 10), Rect(0, 10, 10, 20), False),
        (Rect(0, 10, 0, 10), Rect(2, 3, 2, 3), True),
    ],
)
def test_overlaps_is_symmetric(a, b, expected):
    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_contains_excludes_right_and_bottom():
    rect = Rect(0, 10, 0, 10)
    assert rect.contains(Vec2(0, 0))
    assert rect.contains(rect.center)
    assert not rect.contains(Vec2(10, 5))
    assert not rect.contains(Vec2(5, 10))