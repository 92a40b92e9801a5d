"""Command-line interface for budget."""

from .commands import main

__all__ = ["main"]
