"""
Ellipsis: Length-Bounded Truncation

Empty input is handled differently by the two helpers:
to_ellipsis_middle returns it unchanged, to_ellipsis_end returns None.
"""

from typing import Final, Optional

DEFAULT_ELLIPSIS_MAX: Final[int] = 50

DEFAULT_ELLIPSIS_ALTERNATIVE: Final[str] = "..."


def to_ellipsis_middle(
    text: str,
    max: int = DEFAULT_ELLIPSIS_MAX,
    alternative: str = DEFAULT_ELLIPSIS_ALTERNATIVE,
) -> str:
    """
    Cut the middle out of a string longer than `max`.

    Keeps floor(max / 2) characters from each end and joins them with
    `alternative`.

    Args:
        text: Source string
        max: Length threshold (default: 50)
        alternative: Inserted between head and tail (default: "...")

    Examples:
        >>> to_ellipsis_middle("abcdefghij", 4)
        'ab...ij'
        >>> to_ellipsis_middle("abc", 4)
        'abc'
    """
    if not text:
        return text

    length = len(text)
    if max < length:
        half = max // 2 if max > 0 else 0
        head = text[:half]
        tail = text[length - half:]
        return f"{head}{alternative}{tail}"
    return text


def to_ellipsis_end(
    text: str,
    max: int = DEFAULT_ELLIPSIS_MAX,
    alternative: str = DEFAULT_ELLIPSIS_ALTERNATIVE,
) -> Optional[str]:
    """
    Cut a string longer than `max` and append `alternative`
    (abcdefghijklmn -> abcd...).

    Returns None for empty input.

    Examples:
        >>> to_ellipsis_end("abcdefghij", 4)
        'abcd...'
    """
    if not text:
        return None

    if max < len(text):
        head = text[:max] if max > 0 else ""
        return f"{head}{alternative}"
    return text
