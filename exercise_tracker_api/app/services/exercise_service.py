"""
Business logic for logging exercises.

Creating an exercise is a two-step operation: the exercise is stored
first and the owning user is looked up afterwards to build the
response.  The two steps are not atomic; an unknown user id leaves the
stored exercise in place and is reported as ``NOT_FOUND``.

Input coercion follows ``utils.coercion``.  In permissive mode (the
default) a duration that is not a number is stored as ``null`` and an
unreadable date falls back to today; with ``strict`` both are rejected.
"""

import logging
from typing import Any

from ..core.db import Database
from ..core.errors import not_found, validation_error
from ..schemas.exercise import ExerciseCreate, ExerciseRead
from ..utils.coercion import parse_date, parse_duration, today
from ..utils.formatting import to_date_string


logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ExerciseService:
    """Service for adding exercises to a user's log."""

    @classmethod
    async def create_exercise(
        cls,
        db: Database,
        user_id: str,
        data: ExerciseCreate,
        strict: bool = False,
    ) -> ExerciseRead:
        """Store an exercise for ``user_id`` and return the public shape.

        The returned ``_id`` is the user's id.
        """
        if _is_blank(data.description):
            raise validation_error("Path `description` is required.")
        if _is_blank(data.duration):
            raise validation_error("Path `duration` is required.")

        duration = parse_duration(data.duration)
        if duration is None:
            if strict:
                raise validation_error(f"Cast to Number failed for value {data.duration!r} at path `duration`")
            logger.warning("Duration %r is not a number; storing null", data.duration)

        if _is_blank(data.date):
            on = today()
        else:
            on = parse_date(data.date)
            if on is None:
                if strict:
                    raise validation_error(f"Cast to date failed for value {data.date!r} at path `date`")
                logger.warning("Date %r could not be parsed; using today", data.date)
                on = today()

        exercise = await db.insert_exercise(user_id, data.description, duration, on)
        logger.info("Logged exercise %s for user %s on %s", exercise.id, user_id, on.isoformat())

        user = await db.get_user(exercise.user_id)
        if user is None:
            raise not_found()

        return ExerciseRead(
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=to_date_string(exercise.date),
            user_id=exercise.user_id,
        )
