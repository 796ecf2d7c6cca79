"""Arithmetic and scientific functions with a tagged evaluation boundary."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from calcengine.events import Operation, ScientificFunction
from calcengine.exceptions import (
    ArithmeticOverflowError,
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    OutOfRangeError,
)
from calcengine.validators import validate_number, validate_positive, validate_range

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class Success:
    """A finite numeric result."""

    value: float


@dataclass(frozen=True)
class Undefined:
    """An evaluation with no numeric result (division by zero, domain error, overflow)."""

    reason: str


Outcome = Union[Success, Undefined]


def _finite(result: float, operation: str, *operands: float) -> float:
    if not math.isfinite(result):
        raise ArithmeticOverflowError(operation, *operands)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are invalid
        ArithmeticOverflowError: If the sum is not finite
    """
    validate_number(a)
    validate_number(b)
    return _finite(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        ArithmeticOverflowError: If the difference is not finite
    """
    validate_number(a)
    validate_number(b)
    return _finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        ArithmeticOverflowError: If the product is not finite
    """
    validate_number(a)
    validate_number(b)
    return _finite(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Properties:
        - Inverse of multiply: divide(multiply(a, b), b) == a (for b != 0)
        - Identity: divide(a, 1) == a

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        ArithmeticOverflowError: If the quotient is not finite
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    return _finite(a / b, "division", a, b)


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Properties:
        - Identity: power(a, 1) == a
        - Zero exponent: power(a, 0) == 1
        - One base: power(1, n) == 1

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent

    Raises:
        InvalidInputError: If inputs are invalid
        DomainError: If the power has no real value
        ArithmeticOverflowError: If the result is not finite
    """
    validate_number(base)
    validate_number(exponent)

    if base == 0 and exponent < 0:
        raise DomainError("Zero to a negative power", exponent)

    if base < 0 and not float(exponent).is_integer():
        raise DomainError("Negative base with non-integer exponent", exponent)

    try:
        result = math.pow(base, exponent)
    except OverflowError as e:
        raise ArithmeticOverflowError("exponentiation", base, exponent) from e
    except ValueError as e:
        raise DomainError("power", exponent) from e

    return _finite(result, "exponentiation", base, exponent)


def sin(x: float) -> float:
    """Sine of x radians."""
    return math.sin(validate_number(x))


def cos(x: float) -> float:
    """Cosine of x radians."""
    return math.cos(validate_number(x))


def tan(x: float) -> float:
    """Tangent of x radians."""
    return _finite(math.tan(validate_number(x)), "tan", x)


def asin(x: float) -> float:
    """
    Inverse sine in radians.

    Raises:
        DomainError: If x is outside [-1, 1]
    """
    try:
        validate_range(x, -1.0, 1.0)
    except OutOfRangeError as e:
        raise DomainError("asin", x) from e
    return math.asin(x)


def acos(x: float) -> float:
    """
    Inverse cosine in radians.

    Raises:
        DomainError: If x is outside [-1, 1]
    """
    try:
        validate_range(x, -1.0, 1.0)
    except OutOfRangeError as e:
        raise DomainError("acos", x) from e
    return math.acos(x)


def atan(x: float) -> float:
    return math.atan(validate_number(x))


def log10(x: float) -> float:
    """
    Base-10 logarithm.

    Raises:
        DomainError: If x is zero or negative
    """
    try:
        validate_positive(x)
    except OutOfRangeError as e:
        raise DomainError("log", x) from e
    return math.log10(x)


def ln(x: float) -> float:
    """
    Natural logarithm.

    Raises:
        DomainError: If x is zero or negative
    """
    try:
        validate_positive(x)
    except OutOfRangeError as e:
        raise DomainError("ln", x) from e
    return math.log(x)


BINARY_OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
    Operation.POWER: power,
}

SCIENTIFIC_FUNCTIONS: dict[ScientificFunction, Callable[[float], float]] = {
    ScientificFunction.SIN: sin,
    ScientificFunction.COS: cos,
    ScientificFunction.TAN: tan,
    ScientificFunction.ASIN: asin,
    ScientificFunction.ACOS: acos,
    ScientificFunction.ATAN: atan,
    ScientificFunction.LOG10: log10,
    ScientificFunction.LN: ln,
}


def evaluate_binary(operation: Operation, left: float, right: float) -> Outcome:
    """
    Apply a binary operation without raising.

    Any CalculatorError raised by the operation becomes an Undefined outcome.
    """
    try:
        return Success(BINARY_OPERATIONS[operation](left, right))
    except CalculatorError as e:
        return Undefined(str(e))


def evaluate_function(function: ScientificFunction, argument: float) -> Outcome:
    """Apply a single-value function without raising."""
    try:
        return Success(SCIENTIFIC_FUNCTIONS[function](argument))
    except CalculatorError as e:
        return Undefined(str(e))
