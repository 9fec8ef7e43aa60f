"""In-memory post repository for testing."""

from typing import Optional

from connector.domain.model.post import Post
from connector.domain.repository.post import PostRepository
from connector.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.date, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save or replace a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user."""
        owned = [post_id for post_id, p in self._posts.items() if p.user_id == user_id]
        for post_id in owned:
            del self._posts[post_id]
        return len(owned)
