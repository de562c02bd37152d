import math

import pytest

from framekit.vec2 import Vec2, rect_make


def test_add_then_subtract_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(7.0, 3.25)
    assert (a + b) - b == a


def test_scalar_multiplication_matches_repeated_addition():
    a = Vec2(2.5, -1.0)
    assert a * 3 == a + a + a
    assert 3 * a == a * 3


def test_componentwise_multiplication_and_division_round_trip():
    a = Vec2(6.0, -4.0)
    b = Vec2(2.0, 8.0)
    assert (a * b) / b == a


def test_division_by_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / Vec2(0.0, 2.0)
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / Vec2(2.0, 0.0)


def test_length_worked_example():
    assert Vec2(3, 4).length() == 5.0


def test_dot_with_self_is_length_squared():
    a = Vec2(-3.5, 1.25)
    assert a.dot(a) == pytest.approx(a.length_squared())


def test_cross_is_antisymmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-4.0, 0.5)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0


def test_normalized_has_unit_length_and_same_direction():
    a = Vec2(10.0, -7.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.cross(a) == pytest.approx(0.0, abs=1e-9)
    assert n.dot(a) > 0


def test_normalized_zero_vector_unchanged():
    assert Vec2().normalized() == Vec2(0.0, 0.0)


def test_ints_become_floats_and_unpack():
    x, y = Vec2(1, 2)
    assert isinstance(x, float) and (x, y) == (1.0, 2.0)


def test_rect_make_is_centred_on_position():
    pos = Vec2(40.0, 60.0)
    size = Vec2(20.0, 10.0)
    left, top, right, bottom = rect_make(pos, size)
    assert right - left == size.x
    assert bottom - top == size.y
    assert (left + right) / 2 == pos.x
    assert (top + bottom) / 2 == pos.y


def test_rect_make_truncates_toward_zero():
    left, top, right, bottom = rect_make(Vec2(10.7, 10.7), Vec2(1.0, 1.0))
    assert (left, right) == (math.trunc(10.2), math.trunc(11.2))
    assert (top, bottom) == (math.trunc(10.2), math.trunc(11.2))