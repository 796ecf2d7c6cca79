"""Keypad labels and their input events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from calcengine.events import (
    BinaryOp,
    Clear,
    Constant,
    DecimalPoint,
    Digit,
    Equals,
    Function,
    MathConstant,
    MemoryAdd,
    MemoryClear,
    MemoryRecall,
    MemorySubtract,
    Operation,
    ScientificFunction,
)
from calcengine.exceptions import UnknownKeyError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from calcengine.events import InputEvent

# Button grid of the keypad, top row first.
KEYPAD: tuple[tuple[str, ...], ...] = (
    ("MC", "M+", "M-", "MR"),
    ("C", "sin", "cos", "tan"),
    ("sin⁻¹", "cos⁻¹", "tan⁻¹", "log"),
    ("ln", "e", "π", "^"),
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", ".", "=", "+"),
)

_EVENTS: dict[str, InputEvent] = {
    ".": DecimalPoint(),
    "=": Equals(),
    "c": Clear(),
    "ac": Clear(),
    "mc": MemoryClear(),
    "m+": MemoryAdd(),
    "m-": MemorySubtract(),
    "mr": MemoryRecall(),
    "e": Constant(MathConstant.E),
    "π": Constant(MathConstant.PI),
    "pi": Constant(MathConstant.PI),
    "sin⁻¹": Function(ScientificFunction.ASIN),
    "cos⁻¹": Function(ScientificFunction.ACOS),
    "tan⁻¹": Function(ScientificFunction.ATAN),
    "log": Function(ScientificFunction.LOG10),
    "x": BinaryOp(Operation.MULTIPLY),
    "×": BinaryOp(Operation.MULTIPLY),
    "÷": BinaryOp(Operation.DIVIDE),
    "**": BinaryOp(Operation.POWER),
}
_EVENTS.update({str(d): Digit(str(d)) for d in range(10)})
_EVENTS.update({op.symbol: BinaryOp(op) for op in Operation})
_EVENTS.update({fn.value: Function(fn) for fn in ScientificFunction})


def event_for_key(label: str) -> InputEvent:
    """
    Translate a keypad label into an input event.

    Word labels are case-insensitive ("MR", "mr", "Sin").

    Raises:
        UnknownKeyError: If the label names no key
    """
    try:
        return _EVENTS[label.strip().lower()]
    except (AttributeError, KeyError):
        raise UnknownKeyError(label) from None


def events_for_keys(labels: Iterable[str]) -> list[InputEvent]:
    """Translate a sequence of labels, failing on the first unknown one."""
    return [event_for_key(label) for label in labels]
