"""Strict non-negative integer parsing.

int() is lenient: it strips whitespace and accepts "_" separators and
non-ASCII digits. Fields here must be plain ASCII digits with at most a
leading "+", and must fit a 64-bit unsigned integer.
"""

from __future__ import annotations

from .errors import IntErrorKind, IntegerParseError


USIZE_MAX = 2**64 - 1

_DIGITS = frozenset("0123456789")


def parse_unsigned(text: str, max_value: int = USIZE_MAX) -> int:
    """Parse `text` as a non-negative integer no larger than `max_value`.

    Raises:
        IntegerParseError: with kind EMPTY, INVALID_DIGIT or POS_OVERFLOW.
    """
    if not text:
        raise IntegerParseError(IntErrorKind.EMPTY, text)

    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        raise IntegerParseError(IntErrorKind.INVALID_DIGIT, text)

    # Bound the length before int(), which rejects very long strings.
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(max_value)):
        raise IntegerParseError(IntErrorKind.POS_OVERFLOW, text)

    value = int(digits)
    if value > max_value:
        raise IntegerParseError(IntErrorKind.POS_OVERFLOW, text)
    return value
