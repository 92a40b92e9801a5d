"""
Entry selection policies for the show command.

The CLI turns its raw ``--number``/``--date`` strings into one of these
models exactly once; the delta engine only ever sees the parsed variant.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.models import InputError
from ..core.parser import is_valid_date, parse_date

logger = logging.getLogger(__name__)


class AllSelection(BaseModel):
    """Select every entry."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["all"] = "all"


class CountSelection(BaseModel):
    """Select the trailing ``n`` entries."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["count"] = "count"
    n: int = Field(..., ge=0, description="Number of most recent entries")

    @field_validator("n", mode="before")
    @classmethod
    def validate_n(cls, v):
        if isinstance(v, str):
            text = v.strip()
            if not text.isdecimal():
                raise ValueError(f"Invalid number {v}; must be a non-negative integer")
            return int(text)
        return v


class SinceSelection(BaseModel):
    """Select entries dated on or after ``cutoff``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["since"] = "since"
    cutoff: date = Field(..., description="First date to include (YYYY-MM-DD)")

    @field_validator("cutoff", mode="before")
    @classmethod
    def validate_cutoff(cls, v):
        if isinstance(v, str):
            if not is_valid_date(v):
                raise ValueError(f"Invalid Date {v}; must format as yyyy-mm-dd")
            return parse_date(v)
        return v


Selection = Union[AllSelection, CountSelection, SinceSelection]


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = errors[0].get("msg", str(exc))
    # pydantic prefixes custom ValueError messages
    return message.removeprefix("Value error, ")


def build_selection(
    number: Optional[str] = None,
    since: Optional[str] = None,
    *,
    lenient: bool = False,
) -> Selection:
    """
    Turn raw CLI option values into a selection.

    ``number`` wins when both are supplied. An unparseable value raises
    InputError, or selects everything when ``lenient`` is set.
    """
    try:
        if number is not None:
            return CountSelection(n=number)
        if since is not None:
            return SinceSelection(cutoff=since)
    except ValidationError as exc:
        message = _first_error_message(exc)
        if not lenient:
            raise InputError(message) from exc
        logger.debug("Ignoring filter argument: %s", message)
    return AllSelection()
