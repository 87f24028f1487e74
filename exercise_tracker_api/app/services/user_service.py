"""
Business logic for users.

Users are created once and never updated or deleted by this service.
Uniqueness of usernames is enforced by the database; the gateway turns
a violation into a ``DUPLICATE_KEY`` service error.
"""

import logging
from typing import List

from ..core.db import Database
from ..core.errors import validation_error
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


class UserService:
    """Service for registering and listing users."""

    @classmethod
    async def create_user(cls, db: Database, data: UserCreate) -> UserRead:
        """Register a user under the trimmed username.

        Raises a validation error if the username is missing or blank,
        and a duplicate key error if it is already taken.
        """
        username = (data.username or "").strip()
        if not username:
            raise validation_error("Path `username` is required.")
        user = await db.insert_user(username)
        logger.info("Registered user %s (%s)", user.username, user.id)
        return UserRead(username=user.username, id=user.id)

    @classmethod
    async def list_users(cls, db: Database) -> List[UserRead]:
        """Return every user in registration order."""
        return [UserRead(username=u.username, id=u.id) for u in await db.list_users()]
