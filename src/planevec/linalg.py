from __future__ import annotations

from math import cos, hypot, sin
from operator import add as _add, sub as _sub, mul as _mul, truediv as _div

from .errors import check_nonzero_divisor

Vec2 = tuple[float, float]


def dot(v1: Vec2, v2: Vec2) -> float:
    return v1[0] * v2[0] + v1[1] * v2[1]


def add(a: Vec2, b: Vec2) -> Vec2:
    return tuple(map(_add, a, b))  # type: ignore[return-value]


def sub(a: Vec2, b: Vec2) -> Vec2:
    return tuple(map(_sub, a, b))  # type: ignore[return-value]


def mul(a: Vec2, b: Vec2) -> Vec2:
    return tuple(map(_mul, a, b))  # type: ignore[return-value]


def div(a: Vec2, b: Vec2) -> Vec2:
    check_nonzero_divisor(b)
    return tuple(map(_div, a, b))  # type: ignore[return-value]


def norm(v: Vec2) -> float:
    # hypot neither overflows nor underflows on the intermediate squares
    return hypot(v[0], v[1])


def unit(v: Vec2) -> Vec2:
    n = norm(v)
    return div(v, (n, n))


def make_vector(end: Vec2, start: Vec2) -> Vec2:
    return sub(end, start)


def rotate(v: Vec2, radians: float) -> Vec2:
    x, y = v
    c = cos(radians)
    s = sin(radians)
    return (c * x - s * y, s * x + c * y)


def polar(radians: float, length: float) -> Vec2:
    return rotate((length, 0.0), radians)
