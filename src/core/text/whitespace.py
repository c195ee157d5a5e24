"""
Whitespace: Trimming and Blank Line Collapsing

Besides ordinary whitespace, the trimming helpers treat the Braille
pattern blank (U+2800) and its decimal reference "&#10240;" as spaces.
Editors and chat clients use U+2800 as a space that survives their own
whitespace collapsing.

Ordinary whitespace is the Unicode set matched by `\\s` (same as
str.isspace()): \\x1c-\\x1f are included, U+FEFF is not.
"""

import re
from typing import Final

BRAILLE_BLANK: Final[str] = "\u2800"

BRAILLE_BLANK_ENTITY: Final[str] = "&#10240;"

DEFAULT_COLLAPSE_ALLOW: Final[int] = 2

_BLANK_RUN: Final[str] = rf"(?:{BRAILLE_BLANK}|{BRAILLE_BLANK_ENTITY}|\s)+"

LEADING_BLANK_PATTERN: Final[re.Pattern[str]] = re.compile(rf"\A{_BLANK_RUN}")
TRAILING_BLANK_PATTERN: Final[re.Pattern[str]] = re.compile(rf"{_BLANK_RUN}\Z")
BRAILLE_BLANK_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"{BRAILLE_BLANK}|{BRAILLE_BLANK_ENTITY}"
)
NON_WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S")


def trim_start(text: str) -> str:
    """
    Remove leading whitespace, U+2800 and "&#10240;".

    Examples:
        >>> trim_start("\\u2800&#10240; \\tabc ")
        'abc '
    """
    return LEADING_BLANK_PATTERN.sub("", text)


def trim_end(text: str) -> str:
    """Remove trailing whitespace, U+2800 and "&#10240;"."""
    return TRAILING_BLANK_PATTERN.sub("", text)


def refine_whitespace(text: str) -> str:
    """Replace U+2800 and "&#10240;" with an ordinary space."""
    return BRAILLE_BLANK_PATTERN.sub(" ", text)


def collapse_multiline(text: str, allow: int = DEFAULT_COLLAPSE_ALLOW) -> str:
    """
    Limit runs of consecutive blank lines.

    A line is blank when it has no non-whitespace character. Within a run
    of blank lines only the first `allow - 1` are kept; a non-blank line
    starts a new run.

    Args:
        text: Source string
        allow: Line break count that starts collapsing (default: 2)

    Returns:
        Text rejoined with "\\n"

    Examples:
        >>> collapse_multiline("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    refine: list[str] = []
    blank_count = 0

    for line in text.split("\n"):
        if NON_WHITESPACE_PATTERN.search(line):
            refine.append(line)
            blank_count = 0
            continue

        blank_count += 1
        if blank_count < allow:
            refine.append(line)

    return "\n".join(refine)
