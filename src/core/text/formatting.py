"""
Formatting: Time and Currency Rendering

- leading_time: zero-pad single digit times ("5" -> "05")
- to_currency_format: thousands separators and fixed fraction digits
- CurrencyPriceOption: immutable option bag for to_currency_format

Non-numeric input is never an error: leading_time returns it unchanged,
to_currency_format returns its str() form.
"""

import re
from typing import Any, Final, Mapping, Union

from pydantic import BaseModel, Field

from src.core.numbers.numeric import format_number, is_number, to_number


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_FIXED: Final[int] = 0

DEFAULT_REPLACE_CHAR: Final[str] = ","

DECIMAL_POINT: Final[str] = "."

# Times below this value get a leading zero
LEADING_TIME_LIMIT: Final[int] = 10

# Digit followed by whole groups of three digits up to the end of the integer part
THOUSANDS_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d(?=(?:\d{3})+$)")


# =============================================================================
# OPTIONS
# =============================================================================


class CurrencyPriceOption(BaseModel):
    """
    Options for to_currency_format.

    Accepts both snake_case field names and the camelCase alias
    (`replaceChar`) so option bags coming from JSON payloads validate as-is.
    """

    fixed: int = Field(
        DEFAULT_FIXED,
        ge=0,
        description="Fraction digits to show (1 -> 99.0, 2 -> 99.00); 0 keeps the input fraction",
    )
    replace_char: str = Field(
        DEFAULT_REPLACE_CHAR,
        alias="replaceChar",
        description="Thousands separator inserted every 3 integer digits",
    )

    model_config = {"frozen": True, "populate_by_name": True}


def _resolve_options(
    options: Union[CurrencyPriceOption, Mapping[str, Any], None],
    overrides: Mapping[str, Any],
) -> CurrencyPriceOption:
    if options is None:
        base: dict[str, Any] = {}
    elif isinstance(options, CurrencyPriceOption):
        base = options.model_dump()
    else:
        base = dict(options)
    return CurrencyPriceOption.model_validate({**base, **overrides})


# =============================================================================
# FORMATTERS
# =============================================================================


def leading_time(time: Union[str, int, float]) -> str:
    """
    Prefix a single digit time with "0" (2 -> "02", 9 -> "09", 10 -> "10").

    Args:
        time: Hour/minute/second as number or numeric string

    Returns:
        Zero-padded text for values in [0, 10), the text form otherwise;
        non-numeric input is returned unchanged
    """
    if not is_number(time):
        return time

    value = to_number(time)
    if 0 <= value < LEADING_TIME_LIMIT:
        return f"0{format_number(value)}"
    return format_number(time)


def _group_thousands(integer_text: str, replace_char: str) -> str:
    integer = 0
    if integer_text.strip() not in ("", "+", "-"):
        integer = int(to_number(integer_text))

    digits = THOUSANDS_PATTERN.sub(
        lambda match: f"{match.group(0)}{replace_char}", str(abs(integer))
    )
    return f"-{digits}" if integer < 0 else digits


def to_currency_format(
    price: Union[str, int, float],
    options: Union[CurrencyPriceOption, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> str:
    """
    Format a number (or numeric string) as a price (1000 -> "1,000").

    The integer part gets `replace_char` every three digits from the right.
    With `fixed > 0` the fraction is padded with zeros or truncated to
    exactly `fixed` digits. With `fixed == 0` the fraction is kept as given,
    and only if the input had a decimal point.

    Args:
        price: Price as number or numeric string
        options: CurrencyPriceOption or a mapping of its fields
        **overrides: Field overrides applied on top of `options`

    Returns:
        Formatted price, or str(price) if price is not numeric

    Raises:
        pydantic.ValidationError: If the options are invalid (e.g. fixed < 0)

    Examples:
        >>> to_currency_format(1234.5, fixed=2)
        '1,234.50'
        >>> to_currency_format(1000)
        '1,000'
        >>> to_currency_format("1234567", {"replaceChar": " "})
        '1 234 567'
    """
    if not is_number(price):
        return str(price)

    option = _resolve_options(options, overrides)
    safe_str = format_number(price).strip()

    splits = safe_str.split(DECIMAL_POINT)
    normal = _group_thousands(splits[0], option.replace_char)

    has_point = DECIMAL_POINT in safe_str
    decimal = splits[1] if has_point else ""

    if option.fixed > 0:
        decimal = decimal.ljust(option.fixed, "0")[: option.fixed]
        return f"{normal}.{decimal}"

    return f"{normal}.{decimal}" if has_point else normal
