"""
Display formatting services for the budget CLI.

This module renders deltas as plain text lines or as a rich table.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Sequence

from rich.table import Table

if TYPE_CHECKING:
    from .deltas import Delta


def format_amount(value: float) -> str:
    """
    Format a float the way a plain numeric display shows it.

    Uses the shortest round-trip digits, drops a trailing ``.0``
    (``1000.0`` -> ``1000``) and never uses scientific notation.
    """
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    return text.removesuffix(".0")


def format_delta_line(delta: "Delta") -> str:
    """Format one delta as ``start -> end: from -> to | change``."""
    return (
        f"{delta.start.date_string} -> {delta.end.date_string}: "
        f"{delta.start.amount_string} -> {delta.end.amount_string} | "
        f"{format_amount(delta.delta)}"
    )


def build_delta_table(deltas: Sequence["Delta"]) -> Table:
    """Create the Rich table used by ``show --format table``."""
    table = Table(title="Balance Changes")

    table.add_column("From", style="cyan", no_wrap=True)
    table.add_column("To", style="cyan", no_wrap=True)
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Change", justify="right")

    for delta in deltas:
        change = delta.delta
        style = "green" if change > 0 else "red" if change < 0 else "yellow"
        table.add_row(
            delta.start.date_string,
            delta.end.date_string,
            delta.start.amount_string,
            delta.end.amount_string,
            f"[{style}]{format_amount(change)}[/{style}]",
        )

    return table
