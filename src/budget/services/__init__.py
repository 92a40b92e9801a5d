"""Services for filtering entries and reporting deltas."""

from .deltas import Delta, delta_by_line, filter_entries
from .display import build_delta_table, format_amount, format_delta_line
from .json_serializer import build_show_payload, serialize_delta, serialize_entry
from .selection import (
    AllSelection,
    CountSelection,
    Selection,
    SinceSelection,
    build_selection,
)

__all__ = [
    "AllSelection",
    "CountSelection",
    "Delta",
    "Selection",
    "SinceSelection",
    "build_delta_table",
    "build_selection",
    "build_show_payload",
    "delta_by_line",
    "filter_entries",
    "format_amount",
    "format_delta_line",
    "serialize_delta",
    "serialize_entry",
]
