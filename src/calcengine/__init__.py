"""
Keypad calculator engine.

Raw key presses accumulate into operands, binary operations resolve strictly
left to right, single-value scientific functions apply immediately, and
undefined results surface as an error marker on the display rather than as
exceptions.
"""

from calcengine.core import Calculator, HistoryEntry, Snapshot
from calcengine.events import (
    BinaryOp,
    Clear,
    Constant,
    DecimalPoint,
    Digit,
    Equals,
    Function,
    InputEvent,
    MathConstant,
    MemoryAdd,
    MemoryClear,
    MemoryRecall,
    MemorySubtract,
    Operation,
    ScientificFunction,
)
from calcengine.exceptions import (
    ArithmeticOverflowError,
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    InvalidInputError,
    OutOfRangeError,
    UnknownKeyError,
)
from calcengine.formatting import ERROR_MARKER, format_number, parse_display
from calcengine.keys import KEYPAD, event_for_key, events_for_keys
from calcengine.operations import (
    Outcome,
    Success,
    Undefined,
    acos,
    add,
    asin,
    atan,
    cos,
    divide,
    evaluate_binary,
    evaluate_function,
    ln,
    log10,
    multiply,
    power,
    sin,
    subtract,
    tan,
)
from calcengine.validators import validate_number, validate_positive, validate_range

__all__ = [
    "ERROR_MARKER",
    "KEYPAD",
    "ArithmeticOverflowError",
    "BinaryOp",
    "Calculator",
    "CalculatorError",
    "Clear",
    "Constant",
    "DecimalPoint",
    "Digit",
    "DivisionByZeroError",
    "DomainError",
    "Equals",
    "Function",
    "HistoryEntry",
    "InputEvent",
    "InvalidInputError",
    "MathConstant",
    "MemoryAdd",
    "MemoryClear",
    "MemoryRecall",
    "MemorySubtract",
    "Operation",
    "OutOfRangeError",
    "Outcome",
    "ScientificFunction",
    "Snapshot",
    "Success",
    "Undefined",
    "UnknownKeyError",
    "acos",
    "add",
    "asin",
    "atan",
    "cos",
    "divide",
    "evaluate_binary",
    "evaluate_function",
    "event_for_key",
    "events_for_keys",
    "format_number",
    "ln",
    "log10",
    "multiply",
    "parse_display",
    "power",
    "sin",
    "subtract",
    "tan",
    "validate_number",
    "validate_positive",
    "validate_range",
]

__version__ = "0.1.0"
