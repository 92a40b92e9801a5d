"""JSON serialization utilities for ledger reports."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.models import Entry
from .deltas import Delta


def serialize_entry(entry: Entry) -> Dict[str, Any]:
    """Serialize an entry, keeping the amount exactly as recorded."""
    return {
        "date": entry.date_string,
        "amount": entry.amount_string,
    }


def serialize_delta(delta: Delta) -> Dict[str, Any]:
    return {
        "start": serialize_entry(delta.start),
        "end": serialize_entry(delta.end),
        "delta": delta.delta,
    }


def build_show_payload(deltas: Sequence[Delta]) -> Dict[str, Any]:
    """Build the payload printed by ``show --format json``."""
    return {"deltas": [serialize_delta(delta) for delta in deltas]}
