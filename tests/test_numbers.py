"""
Unit Tests for parse_unsigned
"""

import pytest

from person_lab.errors import IntErrorKind, IntegerParseError
from person_lab.numbers import USIZE_MAX, parse_unsigned


class TestParseUnsigned:

    @pytest.mark.parametrize("text,expected", [("0", 0), ("007", 7), ("+5", 5), (str(USIZE_MAX), USIZE_MAX)])
    def test_parse_when_plain_digits_then_returns_value(self, text, expected):
        assert parse_unsigned(text) == expected

    def test_parse_when_empty_then_raises_empty(self):
        with pytest.raises(IntegerParseError, match="empty string") as exc:
            parse_unsigned("")
        assert exc.value.kind is IntErrorKind.EMPTY

    @pytest.mark.parametrize("text", ["+", "-0", " 1", "1 ", "1_000", "٣", "1.0", "0x10"])
    def test_parse_when_not_ascii_digits_then_raises_invalid_digit(self, text):
        with pytest.raises(IntegerParseError, match="invalid digit") as exc:
            parse_unsigned(text)
        assert exc.value.kind is IntErrorKind.INVALID_DIGIT
        assert exc.value.text == text

    def test_parse_when_above_max_then_raises_pos_overflow(self):
        with pytest.raises(IntegerParseError, match="too large") as exc:
            parse_unsigned("256", max_value=255)
        assert exc.value.kind is IntErrorKind.POS_OVERFLOW

    def test_integer_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_unsigned("x")

    def test_parse_when_many_leading_zeros_then_returns_value(self):
        assert parse_unsigned("0" * 5000 + "7") == 7

    def test_parse_when_only_zeros_then_returns_zero(self):
        assert parse_unsigned("0" * 5000) == 0

    def test_parse_when_thousands_of_digits_then_raises_pos_overflow(self):
        with pytest.raises(IntegerParseError) as exc:
            parse_unsigned("9" * 5000)
        assert exc.value.kind is IntErrorKind.POS_OVERFLOW
