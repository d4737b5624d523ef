"""
User CRUD operations.

This module contains CRUD operations specific to user management.
"""

from typing import Optional
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from zipweather.crud.base import CRUDBase
from zipweather.models.user import User
from zipweather.schemas.user import UserCreate


class CRUDUser(CRUDBase[User, UserCreate]):
    """
    CRUD operations for User model.
    """

    async def create_if_absent(self, db: AsyncSession, *, obj_in: UserCreate) -> Optional[User]:
        """
        Insert a new user unless the email is already taken.

        Relies on the unique index on ``users.email`` so that concurrent
        registrations of the same address cannot both succeed.

        Args:
            db: Database session
            obj_in: User creation data

        Returns:
            Created user instance, or None if the email already exists
        """
        db_obj = User(email=obj_in.email, is_active=obj_in.is_active)
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            return None
        await db.refresh(db_obj)
        return db_obj

    async def get_by_email(self, db: AsyncSession, *, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            db: Database session
            email: User email address (exact, case-sensitive match)

        Returns:
            User instance or None if not found
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalars().first()

    async def set_active(self, db: AsyncSession, *, email: str, is_active: bool) -> bool:
        """
        Set the active flag for the user with the given email.

        Issued as a single UPDATE statement; the write happens even when the
        flag already has the requested value.

        Returns:
            True if a user matched, False otherwise
        """
        result = await db.execute(
            update(User)
            .where(User.email == email)
            .values(is_active=is_active)
            .execution_options(synchronize_session=False)
        )
        await db.commit()
        return result.rowcount > 0


# Create instance of CRUDUser
user = CRUDUser(User)
