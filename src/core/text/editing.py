"""
Editing: Positional Insertion and Padding

- insert: insert text at a clamped code-point offset
- pad_start / pad_end: pad to an exact length with a (possibly
  multi-character) unit, cutting the surplus on the padded side

Invalid input is returned unchanged instead of raising:
- insert with a non-numeric index returns the source text
- padding a value that is neither str nor number returns the value
"""

import math
from typing import Union

from src.core.numbers.numeric import clamp, format_number, is_number, to_number


# =============================================================================
# INSERT
# =============================================================================


def insert(text: str, index: Union[int, float, str], add_text: str) -> str:
    """
    Insert `add_text` into `text` at offset `index`.

    The index is clamped to [0, len(text)]; fractional indexes are
    truncated toward zero.

    Args:
        text: Source string
        index: Insertion offset (number or numeric string)
        add_text: String to insert

    Returns:
        Combined string, or `text` unchanged if index is not a number

    Examples:
        >>> insert("abcdef", 3, "-")
        'abc-def'
        >>> insert("abc", -5, "X")
        'Xabc'
        >>> insert("abc", 99, "X")
        'abcX'
    """
    if not is_number(index):
        return text

    safe_index = int(clamp(to_number(index), 0, len(text)))
    head = text[:safe_index]
    tail = text[safe_index:]
    return f"{head}{add_text}{tail}"


# =============================================================================
# PADDING
# =============================================================================


def _is_paddable(value: object) -> bool:
    # bool is an int subclass but never padded
    return isinstance(value, str) or (
        isinstance(value, (int, float)) and not isinstance(value, bool)
    )


def _padding(source: str, add_text: str, expect_count: int) -> str:
    missing = expect_count - len(source)
    if missing <= 0 or not add_text:
        return ""
    return add_text * math.ceil(missing / len(add_text))


def pad_start(
    text: Union[str, int, float],
    add_text: str,
    expect_count: int = 1,
) -> str:
    """
    Prepend `add_text` until the result is exactly `expect_count` long.

    When the padded (or original) string is longer than `expect_count`, the
    surplus is cut from the left so the end of `text` stays anchored.

    Args:
        text: Source string or number
        add_text: Padding unit (may be several characters)
        expect_count: Final length (default: 1)

    Returns:
        Padded string; non-str/non-number input is returned unchanged

    Examples:
        >>> pad_start(5, "0", 3)
        '005'
        >>> pad_start("12345", "0", 3)
        '345'
    """
    if not _is_paddable(text):
        return text

    source = format_number(text)
    if expect_count <= 0:
        return ""

    refine = f"{_padding(source, add_text, expect_count)}{source}"
    if expect_count < len(refine):
        refine = refine[len(refine) - expect_count:]
    return refine


def pad_end(
    text: Union[str, int, float],
    add_text: str,
    expect_count: int = 1,
) -> str:
    """
    Append `add_text` until the result is exactly `expect_count` long.

    Surplus characters are cut from the right.

    Examples:
        >>> pad_end("ab", "-", 5)
        'ab---'
        >>> pad_end("abcdef", "-", 3)
        'abc'
    """
    if not _is_paddable(text):
        return text

    source = format_number(text)
    if expect_count <= 0:
        return ""

    refine = f"{source}{_padding(source, add_text, expect_count)}"
    if expect_count < len(refine):
        refine = refine[:expect_count]
    return refine
