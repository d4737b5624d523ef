"""
User schemas.

This module contains Pydantic schemas for user registration.
"""

from pydantic import BaseModel

from zipweather.schemas.base import BaseSchema


class UserRegistrationRequest(BaseModel):
    """Body of a registration request.

    ``email`` is a plain string; its format is checked by the router so the
    client gets a 400 with a readable message instead of a 422.
    """
    email: str


class UserCreate(BaseSchema):
    """Schema for creating a new user."""
    email: str
    is_active: bool = True
