"""
Exercise endpoints.

``POST /api/users/{user_id}/exercises`` logs an exercise for a user.
The response carries the user's id under ``_id``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from ...core.config import Settings
from ...core.db import Database, get_db
from ...core.errors import validation_error
from ...schemas.exercise import ExerciseCreate, ExerciseRead
from ...services.exercise_service import ExerciseService
from ..deps import get_settings, read_body


router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def create_exercise(
    user_id: str,
    body: Dict[str, Any] = Depends(read_body),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ExerciseRead:
    """Add an exercise to the user's log.

    ``duration`` is read as an integer and ``date`` defaults to today.
    Returns 404 if the user does not exist.
    """
    try:
        data = ExerciseCreate.model_validate(body)
    except ValidationError as e:
        raise validation_error(f"Invalid exercise payload: {e.errors()[0]['msg']}") from e
    return await ExerciseService.create_exercise(db, user_id, data, strict=settings.strict_input)
