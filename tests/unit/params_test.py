from collections import namedtuple

from pytest import mark, raises

from planevec import Point, UnsupportedParameterError, Vector
from planevec.params import is_named_point, is_ordered_pair, normalize_one, normalize_two


class XY:
    def __init__(self, x, y):
        self.x = x
        self.y = y


Pair = namedtuple("Pair", "first second")


@mark.parametrize(
    "value",
    [XY(3, 4), {"x": 3, "y": 4}, Point(3, 4), Vector((3, 4)), (3, 4), [3.0, 4.0], Pair(3, 4)],
    ids=["object", "mapping", "point", "vector", "tuple", "list", "namedtuple-pair"],
)
def test_every_shape_normalizes_to_same_pair(value):
    x, y = normalize_one(value)
    assert (x, y) == (3.0, 4.0)
    assert type(x) is float and type(y) is float


def test_named_fields_win_over_pair():
    # a sequence of two numbers which also carries x/y
    class Both(list):
        x = 10
        y = 20

    value = Both([1, 2])
    assert is_named_point(value)
    assert is_ordered_pair(value)
    assert normalize_one(value) == (10.0, 20.0)


def test_vector_is_not_a_pair():
    assert is_named_point(Vector((1, 2)))
    assert not is_ordered_pair(Vector((1, 2)))


@mark.parametrize(
    "value",
    [[1], (1, 2, 3), [], "12", {"x": 1}, {"x": "1", "y": 2}, XY(1, None), (True, False), ("1", "2"), None, 5],
    ids=["single", "triple", "empty", "string", "mapping-missing-y", "mapping-str", "object-none",
         "bools", "strings", "none", "scalar"],
)
def test_unsupported_shapes(value):
    with raises(UnsupportedParameterError) as exc:
        normalize_one(value)
    assert exc.value.value is value
    assert isinstance(exc.value, TypeError)
    assert str(exc.value) == "Unsupported parameters, please provide a PointLike value."


def test_normalize_two_concatenates():
    assert normalize_two((1, 2), {"x": 3, "y": 4}) == (1.0, 2.0, 3.0, 4.0)


def test_normalize_two_fails_on_either_side():
    with raises(UnsupportedParameterError):
        normalize_two((1, 2), [3])
    with raises(UnsupportedParameterError):
        normalize_two("ab", (1, 2))
