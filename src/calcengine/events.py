"""Input events accepted by the calculator engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from calcengine.exceptions import InvalidInputError


class Operation(Enum):
    """Binary operations, valued by their keypad symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    @property
    def symbol(self) -> str:
        return self.value


class ScientificFunction(Enum):
    """Single-value functions applied immediately to the display."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    LOG10 = "log10"
    LN = "ln"


class MathConstant(Enum):
    E = "e"
    PI = "pi"


@dataclass(frozen=True)
class Digit:
    """A single decimal digit key."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1 or self.char not in "0123456789":
            raise InvalidInputError(self.char, "Digit must be a single character 0-9")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class BinaryOp:
    operation: Operation

    def __post_init__(self) -> None:
        if not isinstance(self.operation, Operation):
            raise InvalidInputError(self.operation, "Expected an Operation")


@dataclass(frozen=True)
class Equals:
    pass


@dataclass(frozen=True)
class Function:
    function: ScientificFunction

    def __post_init__(self) -> None:
        if not isinstance(self.function, ScientificFunction):
            raise InvalidInputError(self.function, "Expected a ScientificFunction")


@dataclass(frozen=True)
class Constant:
    constant: MathConstant

    def __post_init__(self) -> None:
        if not isinstance(self.constant, MathConstant):
            raise InvalidInputError(self.constant, "Expected a MathConstant")


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class MemoryAdd:
    pass


@dataclass(frozen=True)
class MemorySubtract:
    pass


@dataclass(frozen=True)
class MemoryRecall:
    pass


@dataclass(frozen=True)
class MemoryClear:
    pass


InputEvent = Union[
    Digit,
    DecimalPoint,
    BinaryOp,
    Equals,
    Function,
    Constant,
    Clear,
    MemoryAdd,
    MemorySubtract,
    MemoryRecall,
    MemoryClear,
]
