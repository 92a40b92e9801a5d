"""
Command-line interface for budget.

Provides the CLI command group, resolves the ledger path and registers the
individual subcommands.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..persistence.storage import LEDGER_ENV_VAR
from .add import add
from .show import show
from .utils import LedgerContext

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _home_directory() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


@click.group()
@click.version_option(version=__version__, prog_name="budget")
@click.option(
    "--file",
    "-f",
    "ledger_file",
    type=click.Path(dir_okay=False),
    envvar=LEDGER_ENV_VAR,
    help="Alternate ledger file (default: ~/.budget).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def main(ctx: click.Context, ledger_file: Optional[str], verbose: bool) -> None:
    """Budget - tracks the value of a single account."""
    configure_logging(verbose)
    ctx.obj = LedgerContext(ledger_file=ledger_file, home_dir=_home_directory())


# Register CLI subcommands
main.add_command(add)
main.add_command(show)


if __name__ == "__main__":
    main()
