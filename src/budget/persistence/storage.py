"""Flat-file persistence for the ledger."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..core.models import Entry
from ..core.parser import FormatError

logger = logging.getLogger(__name__)

DEFAULT_LEDGER_NAME = ".budget"
LEDGER_ENV_VAR = "BUDGET_FILE"
LEDGER_ENCODING = "utf-8"

PathLike = Union[str, Path]


class ReadError(RuntimeError):
    """Raised when the ledger file cannot be opened or read."""

    def __init__(self, path: PathLike, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not read ledger {self.path}: {reason}")


class WriteError(RuntimeError):
    """Raised when an entry cannot be written to the ledger file."""

    def __init__(self, path: PathLike, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not write ledger {self.path}: {reason}")


def resolve_ledger_path(
    file_override: Optional[PathLike], home_dir: Optional[Path]
) -> Optional[Path]:
    """Pick the ledger path: explicit override, else ``<home>/.budget``."""
    if file_override:
        return Path(file_override).expanduser()
    if home_dir is None:
        return None
    return Path(home_dir) / DEFAULT_LEDGER_NAME


def append(entry: Entry, path: PathLike) -> None:
    """
    Append one entry to the ledger, creating the file if needed.

    The data is flushed and fsynced before returning, so a normal return
    means the entry reached storage as far as the platform allows.
    """
    payload = entry.serialize().encode(LEDGER_ENCODING)
    try:
        with open(path, "ab") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc
    logger.debug("Appended %s|%s to %s", entry.date_string, entry.amount_string, path)


def read_all(path: PathLike, *, strict: bool = False) -> List[Entry]:
    """
    Read every entry from the ledger in file order.

    Blank lines are ignored. A line that is not valid UTF-8, cannot be split
    into two fields or whose fields do not validate is skipped, unless
    ``strict`` is set, in which case FormatError is raised for the first
    such line.
    """
    entries: List[Entry] = []
    try:
        with open(path, "rb") as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                line = _decode_ledger_line(raw_line, line_number, strict=strict)
                if line is None or not line.strip():
                    continue
                entry = _parse_ledger_line(line, line_number, strict=strict)
                if entry is not None:
                    entries.append(entry)
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc

    logger.debug("Read %d entries from %s", len(entries), path)
    return entries


def _decode_ledger_line(raw_line: bytes, line_number: int, *, strict: bool) -> Optional[str]:
    try:
        return raw_line.decode(LEDGER_ENCODING)
    except UnicodeDecodeError as exc:
        if strict:
            raise FormatError(f"Line {line_number}: not valid {LEDGER_ENCODING}") from exc
        logger.debug("Skipping undecodable line %d: %r", line_number, raw_line)
        return None


def _parse_ledger_line(line: str, line_number: int, *, strict: bool) -> Optional[Entry]:
    try:
        entry = Entry.from_line(line)
    except FormatError as exc:
        if strict:
            raise FormatError(f"Line {line_number}: {exc}") from exc
        logger.debug("Skipping malformed line %d: %r", line_number, line)
        return None

    if not entry.is_valid:
        if strict:
            raise FormatError(
                f"Line {line_number}: invalid entry {entry.date_string}|{entry.amount_string}"
            )
        logger.debug("Skipping invalid entry on line %d: %r", line_number, line)
        return None
    return entry
