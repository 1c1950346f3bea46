from __future__ import annotations

import logging
from typing import Iterable, Union

logger = logging.getLogger(__name__)

UNSUPPORTED_PARAMETERS = "Unsupported parameters, please provide a PointLike value."
NEGATIVE_LENGTH = "Length/magnitude cannot be negative."
DIVISION_BY_ZERO = "Cannot divide by 0."


class VectorError(Exception):
    """Base class for every error raised by planevec."""


class UnsupportedParameterError(VectorError, TypeError):
    def __init__(self, value: object = None) -> None:
        super().__init__(UNSUPPORTED_PARAMETERS)
        self.value = value


class NegativeLengthError(VectorError, ValueError):
    def __init__(self, length: float) -> None:
        super().__init__(NEGATIVE_LENGTH)
        self.length = length


class DivisionByZeroError(VectorError, ZeroDivisionError):
    def __init__(self, divisor: object) -> None:
        super().__init__(DIVISION_BY_ZERO)
        self.divisor = divisor


def check_nonnegative_length(value: float) -> None:
    if value < 0:
        logger.debug("Rejected negative length %r", value)
        raise NegativeLengthError(value)


def check_nonzero_divisor(value: Union[float, Iterable[float]]) -> None:
    # a scalar or any component equal to 0 rejects the whole division
    components = tuple(value) if hasattr(value, "__iter__") else (value,)
    if any(c == 0 for c in components):
        logger.debug("Rejected divisor %r", value)
        raise DivisionByZeroError(value)
