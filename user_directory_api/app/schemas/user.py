"""
Pydantic models for user data.

The read endpoint answers in plain text; these schemas describe the
JSON body accepted and returned when saving a user.
"""

from pydantic import BaseModel, Field


class UserSave(BaseModel):
    """Schema for saving a user's display name."""

    name: str = Field(..., examples=["Guest User"])


class UserRead(BaseModel):
    """Schema for a stored user."""

    id: str = Field(..., examples=["guest"])
    name: str = Field(..., examples=["Guest User"])
