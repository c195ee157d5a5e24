"""
Tests for the Numeric module

Covers:
1. is_number classification (numbers, numeric strings, rejects)
2. to_number conversion
3. format_number text form
4. clamp
"""

import pytest

from src.core.numbers.numeric import clamp, format_number, is_number, to_number


# =============================================================================
# CLASSIFICATION
# =============================================================================


class TestIsNumber:
    """Tests for is_number"""

    @pytest.mark.parametrize("value", [0, 10, -3, 1.5, -0.25, 1e300])
    def test_finite_numbers(self, value) -> None:
        """Finite int/float values are numbers"""
        assert is_number(value) is True

    @pytest.mark.parametrize("value", ["12", "-3.5", "+7", ".5", "5.", "1e3", " 42 ", "2.5E-3"])
    def test_numeric_strings(self, value) -> None:
        """Strings spelling a decimal number are numbers"""
        assert is_number(value) is True

    @pytest.mark.parametrize("value", ["", "   ", "12px", "abc", "1_000", "1,000", ".", "-", "nan", "inf"])
    def test_non_numeric_strings(self, value) -> None:
        """Other strings are not numbers"""
        assert is_number(value) is False

    def test_nan_and_inf_rejected(self) -> None:
        """NaN/Inf are never numbers"""
        assert is_number(float("nan")) is False
        assert is_number(float("inf")) is False
        assert is_number(float("-inf")) is False
        assert is_number("1e999") is False

    def test_bool_and_none_rejected(self) -> None:
        """bool, None and containers are not numbers"""
        assert is_number(True) is False
        assert is_number(False) is False
        assert is_number(None) is False
        assert is_number([1]) is False


class TestToNumber:
    """Tests for to_number"""

    def test_integer_string_becomes_int(self) -> None:
        """Integer-form strings keep every digit"""
        assert to_number("12345678901234567890") == 12345678901234567890
        assert isinstance(to_number(" 7 "), int)

    def test_decimal_string_becomes_float(self) -> None:
        """Fractional strings become float"""
        assert to_number("3.5") == 3.5
        assert to_number("1e3") == 1000.0

    def test_numbers_pass_through(self) -> None:
        """int/float are returned as-is"""
        assert to_number(5) == 5
        assert to_number(2.5) == 2.5

    def test_invalid_raises(self) -> None:
        """Non-numeric value raises"""
        with pytest.raises(ValueError, match="must be a finite number"):
            to_number("abc")


# =============================================================================
# TEXT FORM
# =============================================================================


class TestFormatNumber:
    """Tests for format_number"""

    def test_integral_float_drops_fraction(self) -> None:
        """5.0 renders as 5"""
        assert format_number(5.0) == "5"
        assert format_number(-12.0) == "-12"

    def test_fractional_float(self) -> None:
        """Fractional floats keep their digits"""
        assert format_number(1234.5) == "1234.5"

    def test_small_float_positional(self) -> None:
        """Small floats are written without exponent"""
        assert format_number(0.000015) == "0.000015"
        assert format_number(1e-05) == "0.00001"
        assert format_number(-0.00025) == "-0.00025"
        assert format_number(1e-06) == "0.000001"

    def test_zero(self) -> None:
        """Zero renders as 0, whatever its sign"""
        assert format_number(0.0) == "0"
        assert format_number(-0.0) == "0"

    def test_exponent_outside_range(self) -> None:
        """Very small and very large floats keep the exponent form"""
        assert format_number(1e-07) == "1e-07"
        assert format_number(1e21) == "1e+21"

    def test_int_and_string(self) -> None:
        """int renders with str, strings are returned untouched"""
        assert format_number(1000) == "1000"
        assert format_number("007") == "007"


class TestClamp:
    """Tests for clamp"""

    def test_within_range(self) -> None:
        """Value inside the range is unchanged"""
        assert clamp(5, 0, 10) == 5
        assert clamp(1.5, 0, 3) == 1.5

    def test_index_bound_to_text(self) -> None:
        """Offsets are bound to the positions of a string"""
        text = "abc"
        assert clamp(-5, 0, len(text)) == 0
        assert clamp(99, 0, len(text)) == len(text)
        assert clamp(len(text), 0, len(text)) == len(text)

    def test_bounds(self) -> None:
        """Values outside are clamped to the bounds"""
        assert clamp(-1, 0, 10) == 0
        assert clamp(15, 0, 10) == 10

    def test_open_bounds(self) -> None:
        """None disables a bound"""
        assert clamp(-100, None, 10) == -100
        assert clamp(100, 0, None) == 100
