"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.model import User
from connector.domain.repository import UserRepository
from connector.domain.value import Email, UserId
from connector.persistence.mappers import row_to_user, user_to_dict
from connector.persistence.tables import users_table

from .errors import storage_operation


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        async with storage_operation("user_repository.find_by_id"):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        async with storage_operation("user_repository.find_by_email"):
            stmt = select(users_table).where(users_table.c.email == email.root)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        async with storage_operation("user_repository.save"):
            values = user_to_dict(user)
            stmt = insert(users_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={key: value for key, value in values.items() if key != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        async with storage_operation("user_repository.delete"):
            stmt = delete(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
