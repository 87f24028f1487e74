"""
Pydantic models for exercise data.

Request fields are loosely typed on purpose: ``duration`` and ``date``
may arrive as strings (form posts) or numbers (JSON) and are coerced
by the service layer, see ``utils.coercion``.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ExerciseCreate(BaseModel):
    """Schema for logging an exercise for a user."""

    description: Optional[str] = Field(None, examples=["run"])
    duration: Any = Field(None, examples=["30"])
    date: Any = Field(None, examples=["2023-01-15"])

    @field_validator("description", mode="before")
    @classmethod
    def number_description_to_str(cls, value: Any) -> Any:
        # Older clients send numeric descriptions; store them as text.
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ExerciseRead(BaseModel):
    """Schema returned after an exercise has been logged.

    ``_id`` is the id of the user the exercise belongs to, not the id
    of the exercise itself.  Existing clients rely on this.
    """

    username: str
    description: str
    duration: Optional[int]
    date: str
    user_id: str = Field(..., alias="_id")

    model_config = {
        "populate_by_name": True,
    }
