"""
User database model.

This module contains the User model for registered API consumers.
"""

from sqlalchemy import Boolean, Column, String

from zipweather.models.base import BaseModel


class User(BaseModel):
    """
    A registered consumer of the weather endpoints.

    Identified by a unique email; only active users may query weather.
    """

    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r}, is_active={self.is_active})>"
