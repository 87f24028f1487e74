"""
User endpoints.

Register users and list them.  Usernames are trimmed and must be
unique; a taken username is answered with ``409`` and the
``duplicate_key`` error kind.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from ...core.db import Database, get_db
from ...core.errors import validation_error
from ...schemas.user import UserCreate, UserRead
from ...services.user_service import UserService
from ..deps import read_body


router = APIRouter()


@router.post("", response_model=UserRead)
async def create_user(
    body: Dict[str, Any] = Depends(read_body),
    db: Database = Depends(get_db),
) -> UserRead:
    """Register a new user and return ``{username, id}``."""
    try:
        data = UserCreate.model_validate(body)
    except ValidationError as e:
        raise validation_error(f"Invalid user payload: {e.errors()[0]['msg']}") from e
    return await UserService.create_user(db, data)


@router.get("", response_model=List[UserRead])
async def list_users(db: Database = Depends(get_db)) -> List[UserRead]:
    """List every registered user in registration order."""
    return await UserService.list_users(db)
