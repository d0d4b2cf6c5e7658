import math

import pytest

from tilemerge.geometry import (
    PI,
    PI2,
    Rect,
    get_angle,
    get_distance,
    rect_make,
    rect_make_center,
)


def test_rect_make_edges():
    rc = rect_make(10, 20, 30, 40)
    assert rc == Rect(10, 20, 40, 60)
    assert (rc.width, rc.height) == (30, 40)


def test_rect_make_center_is_centred():
    rc = rect_make_center(100, 200, 40, 60)
    assert (rc.left + rc.right) // 2 == 100
    assert (rc.top + rc.bottom) // 2 == 200
    assert (rc.width, rc.height) == (40, 60)


def test_rect_make_center_odd_size_truncates():
    rc = rect_make_center(0, 0, 5, 5)
    assert rc == Rect(-2, -2, 2, 2)


def test_distance_three_four_five():
    assert get_distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_distance_symmetric():
    assert get_distance(1.5, -2, 7, 3) == pytest.approx(get_distance(7, 3, 1.5, -2))


def test_angle_east_is_zero():
    assert get_angle(0, 0, 10, 0) == pytest.approx(0.0)


def test_angle_up_is_quarter_turn():
    assert get_angle(0, 0, 0, -5) == pytest.approx(math.pi / 2)


def test_angle_down_mirrors_up():
    up = get_angle(0, 0, 0, -5)
    down = get_angle(0, 0, 0, 5)
    assert up + down == pytest.approx(PI2)


def test_angle_west_is_pi():
    assert get_angle(5, 5, 0, 5) == pytest.approx(math.pi)
    assert PI == pytest.approx(math.pi, abs=1e-5)


def test_angle_of_same_point_raises():
    with pytest.raises(ValueError):
        get_angle(1, 1, 1, 1)