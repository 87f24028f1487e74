"""
Business logic for exercise logs.

``build_log_filter`` composes the optional ``from``/``to``/``limit``
query parameters into a single ``LogFilter``; the database gateway
renders it with ``LogFilter.where``.  Both date bounds are inclusive
and independent of each other.  A limit of zero, or one that is
missing or not a number, means "no cap" rather than "no rows".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional, Tuple

from ..core.db import Database
from ..core.errors import not_found, validation_error
from ..schemas.log import LogEntry, LogRead
from ..utils.coercion import parse_date, parse_limit
from ..utils.formatting import to_date_string


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFilter:
    """Criteria for one user's exercise lookup."""

    user_id: str
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    limit: Optional[int] = None

    def where(self) -> Tuple[str, List[Any]]:
        """Return the SQL ``WHERE`` body and its parameters.

        Dates are stored as ISO strings, so string comparison is
        chronological comparison.
        """
        clauses = ["user_id = ?"]
        params: List[Any] = [self.user_id]
        if self.date_from is not None:
            clauses.append("date >= ?")
            params.append(self.date_from.isoformat())
        if self.date_to is not None:
            clauses.append("date <= ?")
            params.append(self.date_to.isoformat())
        return " AND ".join(clauses), params


def _parse_bound(name: str, value: Optional[str]) -> Optional[date]:
    if value is None or not value.strip():
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise validation_error(f"Invalid `{name}` date: {value!r}")
    return parsed


def build_log_filter(
    user_id: str,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: Optional[str] = None,
) -> LogFilter:
    """Compose the raw query parameters into a ``LogFilter``."""
    return LogFilter(
        user_id=user_id,
        date_from=_parse_bound("from", date_from),
        date_to=_parse_bound("to", date_to),
        limit=parse_limit(limit),
    )


class LogService:
    """Service for reading a user's exercise log."""

    @classmethod
    async def get_log(
        cls,
        db: Database,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> LogRead:
        """Return the user's exercises matching the optional filters.

        Raises ``NOT_FOUND`` if the user does not exist, before any
        filter parameter is looked at.
        """
        user = await db.get_user(user_id)
        if user is None:
            raise not_found()

        log_filter = build_log_filter(user.id, date_from, date_to, limit)
        logger.debug("Log query %s", log_filter)
        exercises = await db.find_exercises(log_filter)

        log = [
            LogEntry(
                description=exercise.description,
                duration=exercise.duration,
                date=to_date_string(exercise.date),
            )
            for exercise in exercises
        ]
        return LogRead(username=user.username, count=len(log), user_id=user.id, log=log)
