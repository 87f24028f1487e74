"""
Coercion of raw request fields into typed values.

Request bodies arrive either as JSON or as form fields, so every value
may be a string, a number, or missing altogether.  The helpers here are
deliberately lenient: they return ``None`` for input they cannot make
sense of and leave it to the caller to decide whether that is a
validation error or a degenerate value.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional


# Largest value an SQLite INTEGER column or parameter can hold.
SQLITE_MAX_INT = 2**63 - 1

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_ISO_DATE = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")

# Tried in order after the ISO forms.
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%a %b %d %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_int_prefix(value: Any) -> Optional[int]:
    """Parse the leading integer of ``value``.

    Strings may carry leading whitespace, a sign and trailing garbage
    (``" 30min"`` -> 30, ``"3.7"`` -> 3).  Numbers are truncated toward
    zero.  Returns ``None`` when no integer can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # Beyond the interpreter's integer string conversion limit.
                return None
    return None


def parse_duration(value: Any) -> Optional[int]:
    """Duration in minutes, or ``None`` if it is not a number.

    Values outside the 64-bit range SQLite can store count as not a
    number.
    """
    duration = parse_int_prefix(value)
    if duration is None or abs(duration) > SQLITE_MAX_INT:
        return None
    return duration


def parse_limit(value: Any) -> Optional[int]:
    """Row cap for a log query.

    ``None`` means "no cap": absent, empty, non-numeric and zero values
    all fall into that bucket.  Negative values cap at their magnitude,
    and anything beyond SQLite's integer range is clamped to it.
    """
    limit = parse_int_prefix(value)
    if not limit:
        return None
    return min(abs(limit), SQLITE_MAX_INT)


def parse_date(value: Any) -> Optional[date]:
    """Parse ``value`` into a calendar date.

    Accepts ISO dates and date-times (aware values are converted to UTC
    before the date is taken), a handful of common written forms and
    JSON numbers holding epoch milliseconds.  Returns ``None`` for
    anything else, including empty strings.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).date()
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return _datetime_to_date(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = match.groups()
        try:
            return date(int(year), int(month or 1), int(day or 1))
        except ValueError:
            return None

    try:
        return _datetime_to_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def _datetime_to_date(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()
