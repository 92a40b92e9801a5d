"""
Windowed delta computation over ledger entries.

Entries are assumed to be in chronological (append) order; nothing here
sorts them or checks that they are sorted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.models import Entry, InputError
from .display import format_delta_line
from .selection import AllSelection, CountSelection, Selection, SinceSelection


@dataclass(frozen=True)
class Delta:
    """Change in balance between two adjacent entries."""

    start: Entry
    end: Entry

    @property
    def delta(self) -> float:
        return self.end.amount() - self.start.amount()

    def __str__(self) -> str:
        return format_delta_line(self)


def filter_entries(
    entries: Sequence[Entry],
    selection: Selection,
    *,
    lenient: bool = False,
) -> Sequence[Entry]:
    """
    Return the trailing window of ``entries`` picked by ``selection``.

    A count larger than the ledger, or a cutoff date after every entry,
    raises InputError; with ``lenient`` the full sequence is returned instead.
    """
    if isinstance(selection, CountSelection):
        return _last_n(entries, selection.n, lenient=lenient)
    if isinstance(selection, SinceSelection):
        return _since(entries, selection, lenient=lenient)
    if isinstance(selection, AllSelection):
        return entries
    raise TypeError(f"Unsupported selection: {selection!r}")


def _last_n(entries: Sequence[Entry], n: int, *, lenient: bool) -> Sequence[Entry]:
    if n > len(entries):
        if lenient:
            return entries
        raise InputError(f"Requested {n} entries but the ledger has only {len(entries)}")
    return entries[len(entries) - n :]


def _since(entries: Sequence[Entry], selection: SinceSelection, *, lenient: bool) -> Sequence[Entry]:
    for index, entry in enumerate(entries):
        if entry.date() >= selection.cutoff:
            return entries[index:]
    if lenient:
        return entries
    raise InputError(f"No entries on or after {selection.cutoff.isoformat()}")


def delta_by_line(entries: Sequence[Entry]) -> List[Delta]:
    """Pair each entry with the next one; ``k`` entries give ``k - 1`` deltas."""
    return [Delta(start, end) for start, end in zip(entries, entries[1:])]
