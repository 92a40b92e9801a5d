"""
Show command for the budget CLI.

Reads the ledger, selects a trailing window of entries and prints the change
between each pair of consecutive entries.
"""

from __future__ import annotations

import json
from typing import Optional

import click
from rich.console import Console

from ..core.models import InputError
from ..core.parser import FormatError
from ..persistence.storage import ReadError, read_all
from ..services.deltas import delta_by_line, filter_entries
from ..services.display import build_delta_table, format_delta_line
from ..services.json_serializer import build_show_payload
from ..services.selection import build_selection
from .utils import InputFailure, LedgerContext, LedgerReadFailure

FormatChoice = click.Choice(["text", "table", "json"], case_sensitive=False)


@click.command()
@click.option("--number", "-n", help="Number of recent entries to compare.")
@click.option("--date", "-d", "since", help="Start date for entries (yyyy-mm-dd).")
@click.option(
    "--lenient",
    is_flag=True,
    help="Fall back to the whole ledger when a filter does not apply.",
)
@click.option(
    "--strict-ledger",
    is_flag=True,
    help="Fail on malformed ledger lines instead of skipping them.",
)
@click.option(
    "--format",
    "output_format",
    type=FormatChoice,
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_obj
def show(
    ledger: LedgerContext,
    number: Optional[str],
    since: Optional[str],
    lenient: bool,
    strict_ledger: bool,
    output_format: str,
) -> None:
    """Show differences between consecutive entries."""
    ledger_path = ledger.path
    try:
        selection = build_selection(number, since, lenient=lenient)
    except InputError as exc:
        raise InputFailure(str(exc)) from exc

    try:
        entries = read_all(ledger_path, strict=strict_ledger)
    except ReadError as exc:
        raise LedgerReadFailure(str(exc)) from exc
    except FormatError as exc:
        raise LedgerReadFailure(f"Malformed ledger {ledger_path}: {exc}") from exc

    try:
        window = filter_entries(entries, selection, lenient=lenient)
    except InputError as exc:
        raise InputFailure(str(exc)) from exc

    deltas = delta_by_line(window)

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(json.dumps(build_show_payload(deltas), indent=2))
        return

    if output_format == "table":
        console = Console(width=120, force_terminal=False)
        if not deltas:
            console.print("[yellow]Not enough entries to compare.[/yellow]")
            return
        console.print(build_delta_table(deltas))
        return

    for delta in deltas:
        click.echo(format_delta_line(delta))
