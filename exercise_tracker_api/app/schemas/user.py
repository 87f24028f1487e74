"""
Pydantic models for user data.

``UserCreate`` accepts the raw registration payload; the username is
optional at this level so that a missing value is reported by the
service as a validation error in the service's error shape.
``UserRead`` is the public representation returned by the API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: Optional[str] = Field(None, examples=["fcc_test"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    username: str
    id: str

    model_config = {
        "from_attributes": True,
    }
