from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from . import linalg
from .angles import to_degrees, to_radians
from .errors import check_nonnegative_length
from .params import Point, PointLike, is_named_point, is_ordered_pair, normalize_one, normalize_two
from .tolerances import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, is_close

logger = logging.getLogger(__name__)

X_AXIS = (1.0, 0.0)


@dataclass(slots=True, init=False)
class Vector:
    """
    Mutable 2d vector.

    Instance methods that change the vector do so in place and return the
    same instance, so calls chain. The module-level functions of the same
    name leave their arguments alone and return a new ``Vector``.

    Every mutating method validates its input before touching ``x``/``y``.
    """
    x: float
    y: float

    def __init__(self, point: PointLike) -> None:
        self.x, self.y = normalize_one(point)

    @classmethod
    def from_angle(cls, radians: float, length: float = 1) -> "Vector":
        """Vector at ``radians`` from the positive x axis with the given length (>= 0)."""
        check_nonnegative_length(length)
        return cls(linalg.polar(radians, length))

    @classmethod
    def from_angle_deg(cls, degrees: float, length: float = 1) -> "Vector":
        return cls.from_angle(to_radians(degrees), length)

    @classmethod
    def from_points(cls, a: PointLike, b: PointLike) -> "Vector":
        """Displacement leading from point ``a`` to point ``b``."""
        x1, y1, x2, y2 = normalize_two(a, b)
        return cls(linalg.make_vector((x2, y2), (x1, y1)))

    def copy(self) -> "Vector":
        return Vector(self)

    # arithmetic

    def add(self, other: PointLike) -> "Vector":
        self.x, self.y = linalg.add((self.x, self.y), normalize_one(other))
        return self

    def subtract(self, other: PointLike) -> "Vector":
        self.x, self.y = linalg.sub((self.x, self.y), normalize_one(other))
        return self

    def multiply(self, other: PointLike) -> "Vector":
        self.x, self.y = linalg.mul((self.x, self.y), normalize_one(other))
        return self

    def divide(self, other: PointLike) -> "Vector":
        self.x, self.y = linalg.div((self.x, self.y), normalize_one(other))
        return self

    def invert_x(self) -> "Vector":
        self.x = -self.x
        return self

    def invert_y(self) -> "Vector":
        self.y = -self.y
        return self

    def invert(self) -> "Vector":
        return self.invert_x().invert_y()

    # geometry

    def magnitude(self) -> float:
        return linalg.norm((self.x, self.y))

    def normalize(self) -> "Vector":
        """Scale to length 1; a zero vector raises ``DivisionByZeroError``."""
        self.x, self.y = linalg.unit((self.x, self.y))
        return self

    def set_magnitude(self, length: float) -> "Vector":
        """Scale to ``length`` (>= 0) keeping the direction."""
        check_nonnegative_length(length)
        return self.normalize().multiply((length, length))

    def rotate_by(self, radians: float) -> "Vector":
        self.x, self.y = linalg.rotate((self.x, self.y), radians)
        return self

    def rotate_by_deg(self, degrees: float) -> "Vector":
        return self.rotate_by(to_radians(degrees))

    def rotate_to(self, radians: float) -> "Vector":
        """Point the vector at ``radians`` from the positive x axis, keeping its length."""
        self.x, self.y = linalg.polar(radians, self.magnitude())
        return self

    def rotate_to_deg(self, degrees: float) -> "Vector":
        return self.rotate_to(to_radians(degrees))

    def dot_product(self, other: PointLike) -> float:
        return dot_product(self, other)

    def angle_between(self, other: PointLike) -> float:
        return angle_between(self, other)

    def angle_between_deg(self, other: PointLike) -> float:
        return angle_between_deg(self, other)

    def angle(self) -> float:
        return angle(self)

    def angle_deg(self) -> float:
        return angle_deg(self)

    def is_close(
        self,
        other: PointLike,
        *,
        rel_tol: float = DEFAULT_REL_TOL,
        abs_tol: float = DEFAULT_ABS_TOL,
    ) -> bool:
        ox, oy = normalize_one(other)
        return is_close(self.x, ox, rel_tol, abs_tol) and is_close(self.y, oy, rel_tol, abs_tol)

    # conversion

    def to_ordered_pair(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_named_point(self) -> Point:
        return Point(self.x, self.y)

    def to_display_string(self) -> str:
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.to_display_string()

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    # operators never mutate

    def __add__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other: object) -> "Vector":
        if not _is_point_like(other):
            return NotImplemented
        return divide(self, other)

    def __neg__(self) -> "Vector":
        return invert(self)

    def __abs__(self) -> float:
        return self.magnitude()


def _is_point_like(value: object) -> bool:
    return is_named_point(value) or is_ordered_pair(value)


def add(a: PointLike, b: PointLike) -> Vector:
    return Vector(linalg.add(normalize_one(a), normalize_one(b)))


def subtract(a: PointLike, b: PointLike) -> Vector:
    return Vector(linalg.sub(normalize_one(a), normalize_one(b)))


def multiply(a: PointLike, b: PointLike) -> Vector:
    return Vector(linalg.mul(normalize_one(a), normalize_one(b)))


def divide(a: PointLike, b: PointLike) -> Vector:
    return Vector(linalg.div(normalize_one(a), normalize_one(b)))


def invert_x(p: PointLike) -> Vector:
    return Vector(p).invert_x()


def invert_y(p: PointLike) -> Vector:
    return Vector(p).invert_y()


def invert(p: PointLike) -> Vector:
    return Vector(p).invert()


def magnitude(p: PointLike) -> float:
    return linalg.norm(normalize_one(p))


def normalize(p: PointLike) -> Vector:
    return Vector(linalg.unit(normalize_one(p)))


def set_magnitude(p: PointLike, length: float) -> Vector:
    check_nonnegative_length(length)
    return normalize(p).multiply((length, length))


def dot_product(a: PointLike, b: PointLike) -> float:
    """https://en.wikipedia.org/wiki/Dot_product"""
    return linalg.dot(normalize_one(a), normalize_one(b))


def angle_between(a: PointLike, b: PointLike) -> float:
    """
    Unsigned angle between ``a`` and ``b`` in radians, within [0, pi].

    Undefined (nan) when either operand has zero length.
    """
    va = normalize_one(a)
    vb = normalize_one(b)
    mag_a = linalg.norm(va)
    mag_b = linalg.norm(vb)
    if mag_a == 0 or mag_b == 0:
        logger.debug("Angle with a zero-length vector is undefined: %s, %s", va, vb)
        return math.nan
    # scale first so large components cannot overflow the dot product
    cos_theta = linalg.dot(
        (va[0] / mag_a, va[1] / mag_a),
        (vb[0] / mag_b, vb[1] / mag_b),
    )
    # rounding can push parallel vectors just past +-1
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def angle_between_deg(a: PointLike, b: PointLike) -> float:
    return to_degrees(angle_between(a, b))


def angle(p: PointLike) -> float:
    """Unsigned angle from the positive x axis, radians."""
    return angle_between(X_AXIS, p)


def angle_deg(p: PointLike) -> float:
    return to_degrees(angle(p))


def rotate_by(p: PointLike, radians: float) -> Vector:
    return Vector(linalg.rotate(normalize_one(p), radians))


def rotate_by_deg(p: PointLike, degrees: float) -> Vector:
    return rotate_by(p, to_radians(degrees))


def rotate_to(p: PointLike, radians: float) -> Vector:
    return from_angle(radians, magnitude(p))


def rotate_to_deg(p: PointLike, degrees: float) -> Vector:
    return rotate_to(p, to_radians(degrees))


def from_angle(radians: float, length: float = 1) -> Vector:
    return Vector.from_angle(radians, length)


def from_angle_deg(degrees: float, length: float = 1) -> Vector:
    return Vector.from_angle_deg(degrees, length)


def from_points(a: PointLike, b: PointLike) -> Vector:
    return Vector.from_points(a, b)
