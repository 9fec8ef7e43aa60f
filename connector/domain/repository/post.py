"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from connector.domain.model.post import Post
from connector.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Posts are stored as whole documents: likes and comments are written
    together with the post on every save.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first.

        Returns:
            List of posts sorted by date descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or replace).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was removed
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user.

        Args:
            user_id: The owner's user ID

        Returns:
            Number of posts removed
        """
        pass
