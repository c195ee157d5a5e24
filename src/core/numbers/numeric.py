"""
Numeric: Number Classification for Text Helpers

Text helpers accept values that are either numbers or their textual form
(for example `5`, `5.0` and `"5"`). This module decides which values count
as numbers and how they turn back into text:

- is_number: finite int/float, or a string spelling a finite decimal number
- to_number: numeric value of an accepted input
- format_number: canonical text form of a number (no ".0", no exponent for
  everyday magnitudes)
- clamp: bound a value to a range

INVARIANTS:
1. bool is never a number
2. NaN/Inf are never numbers
3. No function here raises for non-numeric input except to_number
"""

import math
import re
from decimal import Decimal
from typing import Final, Union

Numeric = Union[int, float]

# Decimal literal with optional sign, fraction and exponent ("12", "-3.5", ".5", "1e3")
NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)

INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")

# Floats with magnitude in [POSITIONAL_LOWER_BOUND, EXPONENT_THRESHOLD) are written without exponent
POSITIONAL_LOWER_BOUND: Final[float] = 1e-6

EXPONENT_THRESHOLD: Final[float] = 1e21


# =============================================================================
# CLASSIFICATION
# =============================================================================


def is_number(value: object) -> bool:
    """
    Check whether a value represents a valid finite number.

    Args:
        value: Any value (number, string, None, ...)

    Returns:
        True for finite int/float (bool excluded) and for strings that spell
        a finite decimal number once surrounding whitespace is removed

    Examples:
        >>> is_number(10)
        True
        >>> is_number(" 3.5 ")
        True
        >>> is_number("12px")
        False
        >>> is_number(float("nan"))
        False
        >>> is_number(True)
        False
    """
    if isinstance(value, bool):
        return False

    if isinstance(value, int):
        return True

    if isinstance(value, float):
        return math.isfinite(value)

    if isinstance(value, str):
        candidate = value.strip()
        if not NUMBER_PATTERN.fullmatch(candidate):
            return False
        return math.isfinite(float(candidate))

    return False


def to_number(value: Union[str, Numeric]) -> Numeric:
    """
    Convert a value accepted by is_number to int or float.

    Integer-form strings become int so that large values keep every digit.

    Raises:
        ValueError: If value is not a number
    """
    if not is_number(value):
        raise ValueError(f"value must be a finite number, got {value!r}")

    if isinstance(value, str):
        candidate = value.strip()
        if INTEGER_PATTERN.fullmatch(candidate):
            return int(candidate)
        return float(candidate)

    return value


def format_number(value: Union[str, Numeric]) -> str:
    """
    Text form of a number.

    Strings are returned as-is. Floats with POSITIONAL_LOWER_BOUND <=
    |value| < EXPONENT_THRESHOLD are written without an exponent
    (1.5e-05 -> "0.000015"), integral ones without a trailing ".0"
    (5.0 -> "5"). Outside that range the exponent form is kept.

    Examples:
        >>> format_number(5.0)
        '5'
        >>> format_number(1234.5)
        '1234.5'
        >>> format_number(0.000015)
        '0.000015'
        >>> format_number("007")
        '007'
    """
    if isinstance(value, str):
        return value

    if not isinstance(value, float) or not math.isfinite(value):
        return str(value)

    if value == 0:
        return "0"

    if not POSITIONAL_LOWER_BOUND <= abs(value) < EXPONENT_THRESHOLD:
        return str(value)

    if value.is_integer():
        return str(int(value))

    # repr is the shortest round-trip form; Decimal only moves the point
    return format(Decimal(repr(value)), "f")


# =============================================================================
# UTILITIES
# =============================================================================


def clamp(
    value: Numeric,
    min_value: Numeric | None = None,
    max_value: Numeric | None = None,
) -> Numeric:
    """
    Bound an offset to [min_value, max_value], e.g. an insertion index to
    the valid positions of a string.

    Args:
        value: Offset to bound
        min_value: Lowest allowed offset (optional)
        max_value: Highest allowed offset (optional)

    Examples:
        >>> clamp(3, 0, len("abcdef"))
        3
        >>> clamp(-5, 0, len("abc"))
        0
        >>> clamp(99, 0, len("abc"))
        3
    """
    if min_value is not None and value < min_value:
        return min_value
    if max_value is not None and value > max_value:
        return max_value
    return value
