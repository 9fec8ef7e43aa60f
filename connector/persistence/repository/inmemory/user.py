"""In-memory user repository for testing."""

from typing import Optional

from connector.domain.model.user import User
from connector.domain.repository.user import UserRepository
from connector.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None
