import math

from pytest import approx, raises

from planevec import DivisionByZeroError
from planevec.linalg import add, div, dot, make_vector, mul, norm, polar, rotate, sub, unit


def test_componentwise():
    assert add((2, 4), (2, 2)) == (4, 6)
    assert sub((2, 4), (2, 2)) == (0, 2)
    assert mul((2, 4), (2, 2)) == (4, 8)
    assert div((2, 4), (2, 2)) == (1, 2)


def test_div_checks_before_dividing():
    with raises(DivisionByZeroError):
        div((1, 1), (1, 0))
    with raises(DivisionByZeroError):
        div((1, 1), (0, 1))


def test_norm_and_dot():
    assert norm((3, 4)) == 5
    assert norm((0, 0)) == 0
    assert norm((-3, -4)) == 5
    assert dot((3, 4), (1, 1)) == 7


def test_unit():
    assert unit((3, 4)) == (0.6, 0.8)
    with raises(DivisionByZeroError):
        unit((0.0, 0.0))


def test_make_vector_points_from_start_to_end():
    assert make_vector((3, 4), (1, 1)) == (2, 3)


def test_rotate_and_polar():
    x, y = rotate((1, 0), math.pi / 2)
    assert (x, y) == approx((0, 1), abs=1e-15)
    x, y = polar(math.pi, 2)
    assert (x, y) == approx((-2, 0), abs=1e-15)


def test_norm_and_dot_do_not_raise_on_large_components():
    assert norm((1e200, 1e200)) == approx(math.sqrt(2) * 1e200)
    assert math.isinf(dot((1e200, 0), (1e200, 0)))
    assert math.isnan(dot((1e308, -1e308), (10, 10)))
    assert unit((1e308, 0)) == (1.0, 0.0)
