"""
Add command for the budget CLI.

Validates a date and amount and appends them to the ledger.
"""

from __future__ import annotations

import click

from ..core.models import Entry, InputError
from ..persistence.storage import WriteError, append
from .utils import InputFailure, LedgerContext


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("date_string", metavar="DATE")
@click.argument("amount_string", metavar="AMOUNT")
@click.pass_obj
def add(ledger: LedgerContext, date_string: str, amount_string: str) -> None:
    """Add an entry: DATE as yyyy-mm-dd, AMOUNT as a decimal number."""
    ledger_path = ledger.path
    entry = Entry(date_string, amount_string)
    try:
        entry.ensure_valid()
    except InputError as exc:
        raise InputFailure(str(exc)) from exc

    try:
        append(entry, ledger_path)
    except WriteError as exc:
        raise InputFailure(str(exc)) from exc

    click.echo(f"Added {entry.date_string} {entry.amount_string}")
