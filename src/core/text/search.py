"""
Search: Literal Replacement and Tag Stripping

- replace_all: replace every literal occurrence of a substring
- remove_tag: strip `<...>` tags (and tabs) from markup-like text

remove_tag is pattern based, not a markup parser: `<` without a closing
`>` is left alone and nested brackets are not understood.
"""

import re
from typing import Final

# Angle-bracket delimited tag, no nested brackets
TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"<[^>]+>")

TAB: Final[str] = "\t"


def replace_all(text: str, find: str, replace: str = "") -> str:
    """
    Replace every non-overlapping occurrence of `find` in `text`.

    Empty `text` or empty `find` returns `text` unchanged, so an empty
    search term never matches between characters.

    Args:
        text: Source string
        find: Literal substring to search for
        replace: Replacement string (default: "")

    Returns:
        String with all occurrences replaced

    Examples:
        >>> replace_all("a-b-c", "-")
        'abc'
        >>> replace_all("a-b-c", "-", "+")
        'a+b+c'
        >>> replace_all("abc", "")
        'abc'
    """
    if not text:
        return text
    if not find:
        return text
    return replace.join(text.split(find))


def remove_tag(tag_text: str, remove_tab_space: bool = True) -> str:
    """
    Remove all `<...>` tags from a string.

    Args:
        tag_text: Source string
        remove_tab_space: Also remove tab characters (default: True)

    Returns:
        String without tags

    Examples:
        >>> remove_tag("<b>hello</b>\\tworld")
        'helloworld'
        >>> remove_tag("<b>hello</b>\\tworld", remove_tab_space=False)
        'hello\\tworld'
    """
    refine = TAG_PATTERN.sub("", tag_text)
    if remove_tab_space:
        refine = replace_all(refine, TAB, "")
    return refine
