"""Conversion between display strings and numbers."""

import math

ERROR_MARKER = "Error"
ZERO_DISPLAY = "0"

# Integral values at or above this magnitude keep the float repr ("1e+16").
_INTEGRAL_DISPLAY_LIMIT = 1e16


def parse_display(text: str) -> float:
    """Interpret display text as a number, treating anything unparseable as 0."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


def format_number(value: float) -> str:
    """
    Render a finite number the way the display shows it.

    Integral values drop the trailing ``.0``; everything else uses the
    shortest representation that round-trips. No rounding is applied.

    Examples:
        >>> format_number(8.0)
        '8'
        >>> format_number(0.1 + 0.2)
        '0.30000000000000004'
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGRAL_DISPLAY_LIMIT:
        return str(int(value))
    return repr(value)
