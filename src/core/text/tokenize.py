"""
Tokenize: Whitespace Word Splitting

to_word_array walks the string with an explicit cursor. Every iteration
either skips at least one whitespace character or consumes one word, so
the scan always terminates, including on empty and all-whitespace input.

Whitespace is whatever str.isspace() accepts: the separators
\\x1c-\\x1f count, the byte order mark U+FEFF does not.
"""


def to_word_array(text: str) -> list[str]:
    """
    Split a string into whitespace-delimited words.

    Args:
        text: Source string

    Returns:
        Words in left-to-right order, without empty tokens

    Examples:
        >>> to_word_array("  hello   world  ")
        ['hello', 'world']
        >>> to_word_array("   ")
        []
    """
    words: list[str] = []
    cursor = 0
    length = len(text)

    while cursor < length:
        if text[cursor].isspace():
            cursor += 1
            continue

        start = cursor
        while cursor < length and not text[cursor].isspace():
            cursor += 1
        words.append(text[start:cursor])

    return words
