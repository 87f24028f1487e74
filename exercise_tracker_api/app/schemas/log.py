"""Pydantic models for a user's exercise log."""

from typing import List, Optional

from pydantic import BaseModel, Field


class LogEntry(BaseModel):
    description: str
    duration: Optional[int]
    date: str


class LogRead(BaseModel):
    """A user's filtered exercise log.

    ``count`` is the number of entries in ``log`` after filtering and
    capping, not the total number of exercises the user has.
    """

    username: str
    count: int
    user_id: str = Field(..., alias="_id")
    log: List[LogEntry]

    model_config = {
        "populate_by_name": True,
    }
