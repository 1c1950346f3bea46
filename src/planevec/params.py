from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Real
from typing import NamedTuple, Protocol, Sequence, Union

from .errors import UnsupportedParameterError

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


class SupportsXY(Protocol):
    x: float
    y: float


OrderedPair = Sequence[float]
PointLike = Union[SupportsXY, Mapping[str, float], OrderedPair]


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_named_point(value: object) -> bool:
    """True for anything carrying numeric ``x`` and ``y`` fields.

    Objects are inspected through their attributes, mappings through the
    ``"x"`` and ``"y"`` keys.
    """
    if isinstance(value, Mapping):
        return _is_number(value.get("x")) and _is_number(value.get("y"))
    return _is_number(getattr(value, "x", None)) and _is_number(getattr(value, "y", None))


def is_ordered_pair(value: object) -> bool:
    if isinstance(value, (str, bytes, Mapping)):
        return False
    if not (hasattr(value, "__len__") and hasattr(value, "__getitem__")):
        return False
    if len(value) != 2:  # type: ignore[arg-type]
        return False
    return _is_number(value[0]) and _is_number(value[1])  # type: ignore[index]


def normalize_one(p: PointLike) -> tuple[float, float]:
    # named fields win: Point and Vector must never be read as bare pairs
    if is_named_point(p):
        if isinstance(p, Mapping):
            return float(p["x"]), float(p["y"])
        return float(p.x), float(p.y)
    if is_ordered_pair(p):
        return float(p[0]), float(p[1])
    logger.debug("Unsupported point-like value %r", p)
    raise UnsupportedParameterError(p)


def normalize_two(a: PointLike, b: PointLike) -> tuple[float, float, float, float]:
    x1, y1 = normalize_one(a)
    x2, y2 = normalize_one(b)
    return x1, y1, x2, y2
