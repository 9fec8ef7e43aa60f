"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.model import Profile
from connector.domain.repository import ProfileRepository
from connector.domain.value import UserId
from connector.persistence.mappers import profile_to_dict, row_to_profile
from connector.persistence.tables import profiles_table

from .errors import storage_operation


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user."""
        async with storage_operation("profile_repository.find_by_user"):
            stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_profile(dict(row)) if row else None

    async def find_all(self) -> List[Profile]:
        """Find all profiles."""
        async with storage_operation("profile_repository.find_all"):
            stmt = select(profiles_table).order_by(profiles_table.c.date)
            result = await self.session.execute(stmt)
            return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile, replacing its nested lists as a whole."""
        async with storage_operation("profile_repository.save"):
            values = profile_to_dict(profile)
            stmt = insert(profiles_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[profiles_table.c.user_id],
                set_={
                    key: value
                    for key, value in values.items()
                    if key not in ("id", "user_id")
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user."""
        async with storage_operation("profile_repository.delete_by_user"):
            stmt = delete(profiles_table).where(profiles_table.c.user_id == user_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
