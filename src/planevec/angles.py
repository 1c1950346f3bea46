from __future__ import annotations

import math


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180
