"""Person record parsing.

A person is a single string with a tiny schema:
    <name>,<age>

Example:
    Mark,20

Design notes:
- Strict: no whitespace trimming, exactly one comma.
- An empty name is reported as EmptyInputError, same as an empty string.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .errors import EmptyInputError, IntegerParseError, InvalidAgeError, WrongFieldCountError
from .numbers import USIZE_MAX, parse_unsigned

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Person name must be a non-empty string")
        if not isinstance(self.age, int) or isinstance(self.age, bool):
            raise ValueError(f"Person age must be an integer: {self.age!r}")
        if not 0 <= self.age <= USIZE_MAX:
            raise ValueError(f"Person age out of range: {self.age}")

    @classmethod
    def from_str(cls, text: str) -> "Person":
        return parse_person(text)


def parse_person(text: str) -> Person:
    """Parse a "<name>,<age>" string into a Person.

    Raises:
        EmptyInputError: if the string or the name field is empty.
        WrongFieldCountError: if splitting on "," does not give two fields.
        InvalidAgeError: if the age field is not a non-negative integer.
    """
    if len(text) == 0:
        logger.debug("Rejected empty input")
        raise EmptyInputError()

    parts = text.split(",")
    if len(parts) != 2:
        logger.debug(f"Rejected {text!r}: expected 2 fields, got {len(parts)}")
        raise WrongFieldCountError(len(parts))

    name, age_text = parts
    if len(name) == 0:
        logger.debug(f"Rejected {text!r}: empty name")
        raise EmptyInputError(field="name")

    try:
        age = parse_unsigned(age_text)
    except IntegerParseError as e:
        logger.debug(f"Rejected {text!r}: {e}")
        raise InvalidAgeError(age_text, e) from e

    return Person(name=name, age=age)


def render_person(p: Person) -> str:
    """Render a Person back to its string form."""
    return f"{p.name},{p.age}"
