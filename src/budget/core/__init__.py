"""Core data models and parsing functionality."""

from .models import (
    AmountParseError,
    DateParseError,
    Entry,
    InputError,
    Validation,
    parse_line,
)
from .parser import FormatError

__all__ = [
    "AmountParseError",
    "DateParseError",
    "Entry",
    "FormatError",
    "InputError",
    "Validation",
    "parse_line",
]
