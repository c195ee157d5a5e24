"""
Number helpers for textkit

Classification and text rendering of numeric-or-text values.
"""

from src.core.numbers.numeric import (
    EXPONENT_THRESHOLD,
    POSITIONAL_LOWER_BOUND,
    Numeric,
    clamp,
    format_number,
    is_number,
    to_number,
)

__all__ = [
    "EXPONENT_THRESHOLD",
    "POSITIONAL_LOWER_BOUND",
    "Numeric",
    "clamp",
    "format_number",
    "is_number",
    "to_number",
]
