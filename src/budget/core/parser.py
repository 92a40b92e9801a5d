"""
Line and field parsing for ledger entries.

This module handles the syntax of the two raw fields of an entry and the
pipe-delimited line format used by the ledger file.
"""

import math
import re
from datetime import date, datetime
from typing import Tuple

DATE_FORMAT = "%Y-%m-%d"
FIELD_DELIMITER = "|"

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class FormatError(ValueError):
    """Raised when a ledger line cannot be split into date and amount fields."""


def is_valid_date(date_str: str) -> bool:
    """Return True if the string is a real calendar day in YYYY-MM-DD form."""
    if not DATE_PATTERN.fullmatch(date_str):
        return False
    try:
        datetime.strptime(date_str, DATE_FORMAT)
    except ValueError:
        return False
    return True


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    return datetime.strptime(date_str, DATE_FORMAT).date()


def is_valid_amount(amount_str: str) -> bool:
    """Return True if the string is a plain, finite decimal literal."""
    if AMOUNT_PATTERN.fullmatch(amount_str) is None:
        return False
    return math.isfinite(float(amount_str))


def parse_amount(amount_str: str) -> float:
    return float(amount_str)


def split_line(line: str) -> Tuple[str, str]:
    """
    Split a ledger line into its raw date and amount fields.

    The trailing line terminator, if any, is dropped first. Anything other
    than exactly two fields raises FormatError.
    """
    text = line.rstrip("\r\n")
    fields = text.split(FIELD_DELIMITER)
    if len(fields) != 2:
        raise FormatError(f"Invalid ledger line: {text!r}; expected date|amount")
    return fields[0], fields[1]
