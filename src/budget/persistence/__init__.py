"""Persistence utilities for the ledger file."""

from .storage import (
    DEFAULT_LEDGER_NAME,
    LEDGER_ENV_VAR,
    ReadError,
    WriteError,
    append,
    read_all,
    resolve_ledger_path,
)

__all__ = [
    "DEFAULT_LEDGER_NAME",
    "LEDGER_ENV_VAR",
    "ReadError",
    "WriteError",
    "append",
    "read_all",
    "resolve_ledger_path",
]
