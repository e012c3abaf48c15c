"""
User repository for account lookup and registration.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate
from typing import Optional, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for users."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: Union[UserCreate, Dict[str, Any]]) -> User:
        """
        Create a new user.

        Args:
            user_data: UserCreate or a mapping with name, email and password

        Returns:
            Created user instance

        Raises:
            pydantic.ValidationError: If a required field is missing or invalid
            Exception: If database operation fails
        """
        if not isinstance(user_data, UserCreate):
            user_data = UserCreate.model_validate(user_data)

        created_user = await self.create(user_data.model_dump())
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address, ignoring case.

        Args:
            email: Email address to search for

        Returns:
            First matching user, None if there is none
        """
        try:
            normalized_email = email.lower()

            query = (
                select(User)
                .where(func.lower(User.email) == normalized_email)
                .order_by(User.id)
                .limit(1)
            )

            result = await self.db.execute(query)
            user = result.scalars().first()

            if user:
                logger.debug(f"Retrieved user by email: {normalized_email}")
            else:
                logger.debug(f"User with email {normalized_email} not found")

            return user
        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {e}")
            raise
