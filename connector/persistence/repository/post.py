"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from connector.domain.model import Post
from connector.domain.repository import PostRepository
from connector.domain.value import PostId, UserId
from connector.persistence.mappers import post_to_dict, row_to_post
from connector.persistence.tables import posts_table

from .errors import storage_operation


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Likes and comments live in JSONB columns and are rewritten on every save.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        async with storage_operation("post_repository.find_by_id"):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_post(dict(row)) if row else None

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        async with storage_operation("post_repository.find_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.date))
            result = await self.session.execute(stmt)
            return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        """Save a post, replacing its nested lists as a whole."""
        async with storage_operation("post_repository.save"):
            values = post_to_dict(post)
            stmt = insert(posts_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={key: value for key, value in values.items() if key != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        async with storage_operation("post_repository.delete"):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user."""
        async with storage_operation("post_repository.delete_by_user"):
            stmt = delete(posts_table).where(posts_table.c.user_id == user_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount
