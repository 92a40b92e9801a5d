"""Shared helpers for budget CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from ..persistence.storage import resolve_ledger_path

logger = logging.getLogger(__name__)

INPUT_FAILURE_EXIT_CODE = 1
READ_FAILURE_EXIT_CODE = 2


class InputFailure(click.ClickException):
    """Bad user input or a failed write; exits with status 1."""

    exit_code = INPUT_FAILURE_EXIT_CODE


class LedgerReadFailure(click.ClickException):
    """The ledger could not be read; exits with status 2."""

    exit_code = READ_FAILURE_EXIT_CODE


@dataclass(frozen=True)
class LedgerContext:
    """
    Per-invocation state handed from the command group to subcommands.

    The ledger path is resolved when a subcommand first asks for it, so
    ``--help`` on a subcommand works without a home directory.
    """

    ledger_file: Optional[str]
    home_dir: Optional[Path]

    @property
    def path(self) -> Path:
        ledger_path = resolve_ledger_path(self.ledger_file, self.home_dir)
        if ledger_path is None:
            raise InputFailure("Could not find file path")
        logger.debug("Using ledger %s", ledger_path)
        return ledger_path
