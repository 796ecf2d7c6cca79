"""Operand validation for the numeric functions."""

import math
from typing import TypeVar

from calcengine.exceptions import InvalidInputError, OutOfRangeError

T = TypeVar("T", int, float)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_positive(value: T) -> T:
    """
    Validate that a value is strictly positive.

    Raises:
        OutOfRangeError: If value is zero or negative
    """
    validate_number(value)

    if value <= 0:
        raise OutOfRangeError(value, min_val=0)

    return value


def validate_range(value: T, min_val: float | None = None, max_val: float | None = None) -> T:
    """
    Validate that a value lies within the inclusive range [min_val, max_val].

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)

    Returns:
        The validated value

    Raises:
        OutOfRangeError: If value is outside the range
    """
    validate_number(value)

    if min_val is not None and value < min_val:
        raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None and value > max_val:
        raise OutOfRangeError(value, min_val, max_val)

    return value
