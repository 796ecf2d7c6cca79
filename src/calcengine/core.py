"""Calculator engine: the input-driven evaluation state machine."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
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
)
from calcengine.formatting import ERROR_MARKER, ZERO_DISPLAY, format_number, parse_display
from calcengine.operations import Success, evaluate_binary, evaluate_function

if TYPE_CHECKING:
    from collections.abc import Callable

    from calcengine.events import InputEvent

logger = logging.getLogger(__name__)

CONSTANT_VALUES = {
    MathConstant.E: math.e,
    MathConstant.PI: math.pi,
}


@dataclass(frozen=True)
class HistoryEntry:
    """One completed binary evaluation."""

    expression: str
    result: str

    def __str__(self) -> str:
        return f"{self.expression} = {self.result}"


@dataclass(frozen=True)
class Snapshot:
    """Evaluation state captured before an input event, restored by undo."""

    display: str
    pending_operand: float | None
    pending_operation: Operation | None


class Calculator:
    """
    A keypad calculator evaluating strictly left to right.

    State changes only through ``handle_input``. Undefined results (division
    by zero, logarithm of a non-positive number, overflow) never raise; they
    show ``ERROR_MARKER`` on the display instead.

    Example:
        >>> from calcengine.events import BinaryOp, Digit, Equals, Operation
        >>> calc = Calculator()
        >>> for event in (Digit("5"), BinaryOp(Operation.ADD), Digit("3"), Equals()):
        ...     calc.handle_input(event)
        >>> calc.display
        '8'
        >>> str(calc.history[-1])
        '5 + 3 = 8'
    """

    def __init__(self) -> None:
        self._display = ZERO_DISPLAY
        self._pending_operand: float | None = None
        self._pending_operation: Operation | None = None
        self._accumulating = False
        self._memory = 0.0
        self._history: list[HistoryEntry] = []
        self._undo_stack: list[Snapshot] = []
        self._handlers: dict[type, Callable[[InputEvent], None]] = {
            Digit: self._on_digit,
            DecimalPoint: self._on_decimal_point,
            BinaryOp: self._on_binary_op,
            Equals: self._on_equals,
            Function: self._on_function,
            Constant: self._on_constant,
            Clear: self._on_clear,
            MemoryAdd: self._on_memory_add,
            MemorySubtract: self._on_memory_subtract,
            MemoryRecall: self._on_memory_recall,
            MemoryClear: self._on_memory_clear,
        }

    @property
    def display(self) -> str:
        """Current display string."""
        return self._display

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Completed binary evaluations, oldest first."""
        return tuple(self._history)

    @property
    def memory(self) -> float:
        """Current memory register value."""
        return self._memory

    @property
    def pending_operand(self) -> float | None:
        return self._pending_operand

    @property
    def pending_operation(self) -> Operation | None:
        return self._pending_operation

    @property
    def is_accumulating(self) -> bool:
        return self._accumulating

    @property
    def is_error(self) -> bool:
        return self._display == ERROR_MARKER

    def current_display(self) -> str:
        return self.display

    def current_history(self) -> tuple[HistoryEntry, ...]:
        return self.history

    def current_memory(self) -> float:
        return self.memory

    def handle_input(self, event: InputEvent) -> None:
        """
        Process one input event.

        The current display and pending state are pushed onto the undo stack
        before the event is applied.

        Raises:
            TypeError: If event is not one of the input event types
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported input event: {event!r}")

        self._undo_stack.append(
            Snapshot(self._display, self._pending_operand, self._pending_operation)
        )
        logger.debug("Handling %r (display=%r)", event, self._display)
        handler(event)

    def undo(self) -> None:
        """Restore the state captured before the most recent input event."""
        if not self._undo_stack:
            logger.debug("Nothing to undo")
            return

        snapshot = self._undo_stack.pop()
        self._display = snapshot.display
        self._pending_operand = snapshot.pending_operand
        self._pending_operation = snapshot.pending_operation
        self._accumulating = self._display not in (ZERO_DISPLAY, ERROR_MARKER)
        logger.debug("Undo restored display=%r", self._display)

    def _on_digit(self, event: Digit) -> None:
        if self._accumulating:
            self._display += event.char
        else:
            self._display = event.char
            self._accumulating = True

    def _on_decimal_point(self, event: DecimalPoint) -> None:
        if not self._accumulating:
            self._display = "0."
        elif "." not in self._display:
            self._display += "."
        self._accumulating = True

    def _on_binary_op(self, event: BinaryOp) -> None:
        if self._pending_operation is not None and self._pending_operand is not None:
            self._resolve()
        self._pending_operand = parse_display(self._display)
        self._pending_operation = event.operation
        self._accumulating = False

    def _on_equals(self, event: Equals) -> None:
        self._resolve()

    def _on_function(self, event: Function) -> None:
        argument = parse_display(self._display)
        outcome = evaluate_function(event.function, argument)
        if isinstance(outcome, Success):
            self._display = format_number(outcome.value)
        else:
            logger.warning("%s(%s) is undefined: %s", event.function.value, argument, outcome.reason)
            self._display = ERROR_MARKER
        self._accumulating = False

    def _on_constant(self, event: Constant) -> None:
        self._display = repr(CONSTANT_VALUES[event.constant])
        self._accumulating = False

    def _on_clear(self, event: Clear) -> None:
        self._display = ZERO_DISPLAY
        self._pending_operand = None
        self._pending_operation = None
        self._accumulating = False
        self._undo_stack.clear()

    # M+ and M- end the current entry so the next digit starts a new number.
    def _on_memory_add(self, event: MemoryAdd) -> None:
        self._update_memory(self._memory + parse_display(self._display))
        self._accumulating = False

    def _on_memory_subtract(self, event: MemorySubtract) -> None:
        self._update_memory(self._memory - parse_display(self._display))
        self._accumulating = False

    # Digits after a recall append to the recalled text as typed, even in
    # exponent form ("1e+20" then "5" reads "1e+205").
    def _on_memory_recall(self, event: MemoryRecall) -> None:
        self._display = format_number(self._memory)
        self._accumulating = True

    def _on_memory_clear(self, event: MemoryClear) -> None:
        self._memory = 0.0

    def _update_memory(self, value: float) -> None:
        if not math.isfinite(value):
            logger.warning("Memory update to %s rejected", value)
            return
        self._memory = value

    def _resolve(self) -> None:
        """Evaluate the pending operation with the display as right operand."""
        right = parse_display(self._display)
        left = self._pending_operand
        operation = self._pending_operation
        if left is None or operation is None:
            return

        outcome = evaluate_binary(operation, left, right)
        if isinstance(outcome, Success):
            self._display = format_number(outcome.value)
            entry = HistoryEntry(
                f"{format_number(left)} {operation.symbol} {format_number(right)}",
                self._display,
            )
            self._history.append(entry)
            logger.info("Evaluated %s", entry)
        else:
            logger.warning(
                "%s %s %s is undefined: %s",
                format_number(left),
                operation.symbol,
                format_number(right),
                outcome.reason,
            )
            self._display = ERROR_MARKER

        self._pending_operand = None
        self._pending_operation = None
        self._accumulating = False

    def __repr__(self) -> str:
        return (
            f"Calculator(display={self._display!r}, "
            f"pending={self._pending_operation}, history_len={len(self._history)})"
        )
