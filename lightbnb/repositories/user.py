"""
User repository for looking up and registering users.
"""

from lightbnb.repositories.base import BaseRepository, as_id
from lightbnb.schemas.user import UserCreate
from typing import Any, Dict, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Repository for the users table."""

    async def get_user_with_email(self, email: Optional[str]) -> Optional[Dict[str, Any]]:
        """
        Get a single user by email address.

        Args:
            email: Email address, matched case-insensitively

        Returns:
            User row if found, None otherwise (also when email is None)
        """
        if email is None:
            logger.debug("User lookup without email, returning no match")
            return None

        user = await self.fetch_one(
            "get_user_with_email",
            "SELECT * FROM users WHERE email = :p1;",
            [email.lower()],
        )

        if user:
            logger.debug(f"Retrieved user by email: {email}")
        else:
            logger.debug(f"User with email {email} not found")
        return user

    async def get_user_with_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """
        Get a single user by id.

        Args:
            user_id: User id, as int or numeric string

        Returns:
            User row if found, None otherwise

        Raises:
            ValueError: If user_id is not an integer id
        """
        return await self.fetch_one(
            "get_user_with_id",
            "SELECT * FROM users WHERE id = :p1;",
            [as_id(user_id, "user_id")],
        )

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Add a new user.

        Args:
            user: name, password (already hashed) and email

        Returns:
            The inserted row including its generated id

        Raises:
            pydantic.ValidationError: If the user data is incomplete
            QueryFailed: If the insert fails, e.g. on a duplicate email
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(user)

        created = await self.fetch_one(
            "add_user",
            "INSERT INTO users (name, password, email) VALUES (:p1, :p2, :p3) RETURNING *;",
            [user.name, user.password, user.email],
        )
        logger.info(f"Created user: {user.email} (ID: {created['id'] if created else None})")
        return created
