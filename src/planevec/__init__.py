from .angles import to_degrees, to_radians
from .errors import (
    DivisionByZeroError,
    NegativeLengthError,
    UnsupportedParameterError,
    VectorError,
    check_nonnegative_length,
    check_nonzero_divisor,
)
from .params import Point, PointLike, normalize_one, normalize_two
from .vector import (
    Vector,
    add,
    angle,
    angle_between,
    angle_between_deg,
    angle_deg,
    divide,
    dot_product,
    from_angle,
    from_angle_deg,
    from_points,
    invert,
    invert_x,
    invert_y,
    magnitude,
    multiply,
    normalize,
    rotate_by,
    rotate_by_deg,
    rotate_to,
    rotate_to_deg,
    set_magnitude,
    subtract,
)

__all__ = [
    "Vector",
    "Point",
    "PointLike",
    "VectorError",
    "UnsupportedParameterError",
    "NegativeLengthError",
    "DivisionByZeroError",
    "check_nonnegative_length",
    "check_nonzero_divisor",
    "normalize_one",
    "normalize_two",
    "to_degrees",
    "to_radians",
    "add",
    "subtract",
    "multiply",
    "divide",
    "invert",
    "invert_x",
    "invert_y",
    "magnitude",
    "normalize",
    "set_magnitude",
    "dot_product",
    "angle_between",
    "angle_between_deg",
    "angle",
    "angle_deg",
    "rotate_by",
    "rotate_by_deg",
    "rotate_to",
    "rotate_to_deg",
    "from_angle",
    "from_angle_deg",
    "from_points",
]
