"""Boundary conversion between caller-supplied values and calendar dates.

The engine only ever works on ``datetime.date``.  Values arriving from a
store or a form are converted here, once, and rejected outright when they
cannot be read as a calendar date.  Nothing here guesses a year or a month
from free text.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Iterable, Union

from cyclecast.prediction.base import InvalidDateError

logger = logging.getLogger("cyclecast.prediction.dates")

DateLike = Union[date, datetime, str]

# YYYY-MM-DD, optionally followed by a time of day and UTC offset, which are ignored.
_ISO_DATE_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


def parse_logged_date(value: DateLike) -> date:
    """Convert a single value into a calendar date.

    Accepts ``date``, ``datetime`` (time of day is dropped) and ISO-8601
    strings (``YYYY-MM-DD``, optionally with a time part).

    Raises:
        InvalidDateError: If the value is empty, malformed or of another type.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError("Empty date string")
        match = _ISO_DATE_RE.match(text)
        if match is None:
            raise InvalidDateError(f"Unparsable date: {value!r}")
        try:
            return datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError as exc:
            raise InvalidDateError(f"Unparsable date: {value!r}") from exc
    raise InvalidDateError(
        f"Expected a date or ISO-8601 string, got {type(value).__name__}"
    )


def parse_logged_dates(values: Iterable[DateLike]) -> list[date]:
    """Convert every value; the first invalid one aborts the whole batch."""
    parsed = [parse_logged_date(v) for v in values]
    logger.debug("Parsed %d logged dates", len(parsed))
    return parsed


def format_display_date(d: date) -> str:
    """Render a date the way the calendar shows it, e.g. ``1/29/2024``."""
    return f"{d.month}/{d.day}/{d.year}"
