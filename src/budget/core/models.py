"""
Core data model for the ledger.

An Entry is one balance observation: a raw date string and a raw amount
string, kept exactly as entered so the file can be reproduced byte for byte.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .parser import (
    FIELD_DELIMITER,
    is_valid_amount,
    is_valid_date,
    parse_amount,
    parse_date,
    split_line,
)


class InputError(ValueError):
    """Raised for malformed user input."""


class DateParseError(InputError):
    """Raised when an entry date is not in YYYY-MM-DD form."""

    def __init__(self, date_string: str) -> None:
        self.date_string = date_string
        super().__init__(f"Invalid Date {date_string}; must format as yyyy-mm-dd")


class AmountParseError(InputError):
    """Raised when an entry amount is not a decimal number."""

    def __init__(self, amount_string: str) -> None:
        self.amount_string = amount_string
        super().__init__(f"Invalid Amount {amount_string}; must be a float")


class Validation(Enum):
    """Outcome of validating an entry."""

    VALID = "valid"
    DATE_PARSE_ERROR = "date_parse_error"
    AMOUNT_PARSE_ERROR = "amount_parse_error"


@dataclass(frozen=True)
class Entry:
    """A single dated balance entry."""

    date_string: str
    amount_string: str

    @classmethod
    def from_line(cls, line: str) -> "Entry":
        """Build an entry from one ledger line (``date|amount``)."""
        date_string, amount_string = split_line(line)
        return cls(date_string, amount_string)

    def validate(self) -> Validation:
        """Check the date first, then the amount."""
        if not is_valid_date(self.date_string):
            return Validation.DATE_PARSE_ERROR
        if not is_valid_amount(self.amount_string):
            return Validation.AMOUNT_PARSE_ERROR
        return Validation.VALID

    @property
    def is_valid(self) -> bool:
        return self.validate() is Validation.VALID

    def ensure_valid(self) -> "Entry":
        """Return the entry unchanged, or raise the matching InputError."""
        result = self.validate()
        if result is Validation.DATE_PARSE_ERROR:
            raise DateParseError(self.date_string)
        if result is Validation.AMOUNT_PARSE_ERROR:
            raise AmountParseError(self.amount_string)
        return self

    def date(self) -> date:
        """Parsed calendar date. Only meaningful on a validated entry."""
        return parse_date(self.date_string)

    def amount(self) -> float:
        """Parsed amount. Only meaningful on a validated entry."""
        return parse_amount(self.amount_string)

    def serialize(self) -> str:
        """Render the on-disk form: ``date|amount`` plus a newline."""
        return f"{self.date_string}{FIELD_DELIMITER}{self.amount_string}\n"

    def __str__(self) -> str:
        return self.serialize()


def parse_line(line: str) -> Entry:
    """Parse a ledger line into an Entry."""
    return Entry.from_line(line)
