"""
User directory.

Registration and active/inactive status of API users, keyed by email.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from zipweather.crud.user import user as user_crud
from zipweather.exceptions import AlreadyRegistered, UserNotFound
from zipweather.models.user import User
from zipweather.schemas.user import UserCreate
from zipweather.utils.logging_config import get_logger

logger = get_logger(__name__)


class UserDirectory:
    """
    Manages registered users.

    Every call goes to the database through the session it was built with;
    nothing is cached between calls.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, email: str) -> User:
        """
        Register a new, active user.

        Raises:
            AlreadyRegistered: If a user with this email exists
        """
        new_user = await user_crud.create_if_absent(
            self.db, obj_in=UserCreate(email=email, is_active=True)
        )
        if new_user is None:
            logger.info(f"Registration rejected, email already registered: {email}")
            raise AlreadyRegistered("Already user registered")

        logger.info(f"Registered user {new_user.id}: {email}")
        return new_user

    async def find_by_email(self, email: str) -> Optional[User]:
        return await user_crud.get_by_email(self.db, email=email)

    async def activate(self, email: str) -> None:
        await self._set_active(email, True)

    async def deactivate(self, email: str) -> None:
        await self._set_active(email, False)

    async def _set_active(self, email: str, is_active: bool) -> None:
        found = await user_crud.set_active(self.db, email=email, is_active=is_active)
        if not found:
            logger.warning(f"Cannot change status, user not found: {email}")
            raise UserNotFound("User not found")
        logger.info(f"User {email} is_active={is_active}")
