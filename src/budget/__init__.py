"""
Budget - single-account balance ledger.

Appends dated balance entries to a flat text file and reports the change
between consecutive entries.
"""

__version__ = "0.1.0"

from .core.models import (
    AmountParseError,
    DateParseError,
    Entry,
    InputError,
    Validation,
    parse_line,
)
from .core.parser import FormatError
from .persistence.storage import ReadError, WriteError, append, read_all, resolve_ledger_path
from .services.deltas import Delta, delta_by_line, filter_entries
from .services.selection import AllSelection, CountSelection, SinceSelection, build_selection

__all__ = [
    "AllSelection",
    "AmountParseError",
    "CountSelection",
    "DateParseError",
    "Delta",
    "Entry",
    "FormatError",
    "InputError",
    "ReadError",
    "SinceSelection",
    "Validation",
    "WriteError",
    "append",
    "build_selection",
    "delta_by_line",
    "filter_entries",
    "parse_line",
    "read_all",
    "resolve_ledger_path",
]
