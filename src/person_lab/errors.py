"""Errors raised while parsing person records."""

from __future__ import annotations
from enum import Enum
from typing import Optional


class IntErrorKind(str, Enum):
    """Why a numeric field was rejected."""
    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"


class ParseErrorKind(str, Enum):
    """Which validation step rejected the input."""
    EMPTY_INPUT = "empty_input"
    WRONG_FIELD_COUNT = "wrong_field_count"
    INVALID_AGE = "invalid_age"


class PersonLabError(Exception):
    """Base error for this package."""


class IntegerParseError(PersonLabError, ValueError):
    """Raised when text is not a valid non-negative integer."""

    _messages = {
        IntErrorKind.EMPTY: "cannot parse integer from empty string",
        IntErrorKind.INVALID_DIGIT: "invalid digit found in string",
        IntErrorKind.POS_OVERFLOW: "number too large to fit in target type",
    }

    def __init__(self, kind: IntErrorKind, text: str) -> None:
        super().__init__(self._messages[kind])
        self.kind = kind
        self.text = text


class PersonParseError(PersonLabError):
    """Raised when a string cannot be parsed into a Person.

    Subclasses pin `kind`, so callers can either catch a subclass or
    compare `err.kind` against ParseErrorKind.
    """
    kind: ParseErrorKind


class EmptyInputError(PersonParseError):
    kind = ParseErrorKind.EMPTY_INPUT

    def __init__(self, field: Optional[str] = None) -> None:
        # The empty-name case keeps this kind; `field` tells the two apart.
        super().__init__("Empty input string")
        self.field = field


class WrongFieldCountError(PersonParseError):
    kind = ParseErrorKind.WRONG_FIELD_COUNT

    def __init__(self, field_count: int) -> None:
        super().__init__("Should exist 2 params")
        self.field_count = field_count


class InvalidAgeError(PersonParseError):
    kind = ParseErrorKind.INVALID_AGE

    def __init__(self, text: str, cause: IntegerParseError) -> None:
        super().__init__(f"Invalid age {text!r}: {cause}")
        self.text = text
        self.cause = cause
