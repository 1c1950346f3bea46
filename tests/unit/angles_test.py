import math

from pytest import approx, mark

from planevec import to_degrees, to_radians


@mark.parametrize(
    "radians, degrees",
    [(0, 0), (math.pi, 180), (math.pi / 2, 90), (math.pi / 4, 45), (-math.pi, -180), (2 * math.pi, 360)],
)
def test_conversion(radians, degrees):
    assert to_degrees(radians) == approx(degrees)
    assert to_radians(degrees) == approx(radians)
