"""
Text helpers for textkit

Stateless string transforms. Every function can be called on its own;
invalid input shapes are returned unchanged rather than raising.
"""

# Search / tag stripping
from src.core.text.search import remove_tag, replace_all

# Case transforms
from src.core.text.case import (
    to_camel_from_kebab,
    to_camel_from_snake,
    to_upper_case_head,
)

# Tokenization
from src.core.text.tokenize import to_word_array

# Positional editing
from src.core.text.editing import insert, pad_end, pad_start

# Formatting
from src.core.text.formatting import (
    DEFAULT_FIXED,
    DEFAULT_REPLACE_CHAR,
    CurrencyPriceOption,
    leading_time,
    to_currency_format,
)

# Truncation
from src.core.text.ellipsis import (
    DEFAULT_ELLIPSIS_ALTERNATIVE,
    DEFAULT_ELLIPSIS_MAX,
    to_ellipsis_end,
    to_ellipsis_middle,
)

# Markup
from src.core.text.markup import (
    BeautifulSoupMarkupParser,
    MarkupParser,
    escape,
    get_markup_parser,
    refine_safe_html_text,
    set_markup_parser,
)

# Whitespace
from src.core.text.whitespace import (
    BRAILLE_BLANK,
    BRAILLE_BLANK_ENTITY,
    DEFAULT_COLLAPSE_ALLOW,
    collapse_multiline,
    refine_whitespace,
    trim_end,
    trim_start,
)

__all__ = [
    # Search
    "remove_tag",
    "replace_all",
    # Case
    "to_camel_from_kebab",
    "to_camel_from_snake",
    "to_upper_case_head",
    # Tokenization
    "to_word_array",
    # Editing
    "insert",
    "pad_end",
    "pad_start",
    # Formatting: Constants
    "DEFAULT_FIXED",
    "DEFAULT_REPLACE_CHAR",
    # Formatting: Types
    "CurrencyPriceOption",
    # Formatting: Functions
    "leading_time",
    "to_currency_format",
    # Truncation: Constants
    "DEFAULT_ELLIPSIS_ALTERNATIVE",
    "DEFAULT_ELLIPSIS_MAX",
    # Truncation: Functions
    "to_ellipsis_end",
    "to_ellipsis_middle",
    # Markup: Types
    "BeautifulSoupMarkupParser",
    "MarkupParser",
    # Markup: Functions
    "escape",
    "get_markup_parser",
    "refine_safe_html_text",
    "set_markup_parser",
    # Whitespace: Constants
    "BRAILLE_BLANK",
    "BRAILLE_BLANK_ENTITY",
    "DEFAULT_COLLAPSE_ALLOW",
    # Whitespace: Functions
    "collapse_multiline",
    "refine_whitespace",
    "trim_end",
    "trim_start",
]
