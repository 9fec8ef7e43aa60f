"""User domain service."""

import hashlib
from datetime import datetime
from urllib.parse import urlencode
from uuid import uuid4

import logfire

from connector.domain.error import NotFoundError, UserAlreadyExistsError
from connector.domain.model.user import User
from connector.domain.repository import UserRepository
from connector.domain.value import Email, UserId

from .base import Service


def gravatar_url(email: Email) -> str:
    """Build the Gravatar URL used as a new user's avatar."""
    digest = hashlib.md5(email.root.encode("utf-8")).hexdigest()
    params = urlencode({"s": "200", "r": "pg", "d": "mm"})
    return f"https://www.gravatar.com/avatar/{digest}?{params}"


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_email(self, email: Email) -> User | None:
        """Find a user by email, or None."""
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email)

    async def register(self, name: str, email: Email, password_hash: str) -> User:
        """Create a new user.

        Args:
            name: Display name
            email: Unique email address
            password_hash: Already-hashed password

        Returns:
            Saved user

        Raises:
            UserAlreadyExistsError: If the email is taken
        """
        with logfire.span("user_service.register"):
            if await self.user_repository.find_by_email(email) is not None:
                logfire.warn("Registration rejected - email taken")
                raise UserAlreadyExistsError()

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                password_hash=password_hash,
                avatar=gravatar_url(email),
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Returns:
            True if a user was removed
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id), deleted=deleted)
            return deleted
