"""Case transforms: capitalized head, snake_case and kebab-case to camelCase."""

import re
from typing import Final

# Separator followed by a lowercase ASCII letter ("_1" and "_A" never match)
SNAKE_PATTERN: Final[re.Pattern[str]] = re.compile(r"_([a-z])")
KEBAB_PATTERN: Final[re.Pattern[str]] = re.compile(r"-([a-z])")


def _upper_group(match: re.Match[str]) -> str:
    return match.group(1).upper()


def to_upper_case_head(text: str) -> str:
    """
    Uppercase the first character, keep the rest unchanged.

    Examples:
        >>> to_upper_case_head("hello world")
        'Hello world'
        >>> to_upper_case_head("")
        ''
    """
    head = text[:1].upper()
    tail = text[1:]
    return f"{head}{tail}"


def to_camel_from_snake(text: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        >>> to_camel_from_snake("foo_bar_baz")
        'fooBarBaz'
        >>> to_camel_from_snake("foo_1")
        'foo_1'
    """
    return SNAKE_PATTERN.sub(_upper_group, text)


def to_camel_from_kebab(text: str) -> str:
    """
    Convert kebab-case to camelCase.

    Examples:
        >>> to_camel_from_kebab("foo-bar-baz")
        'fooBarBaz'
    """
    return KEBAB_PATTERN.sub(_upper_group, text)
