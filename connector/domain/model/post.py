"""Post aggregate root.

A post owns its likes and comments. Both lists are ordered newest first and
only change by saving the whole post.
"""

from datetime import datetime

from pydantic import Field

from connector.domain.model.common import DomainModel
from connector.domain.value import CommentId, PostId, UserId


class Like(DomainModel):
    """A user's like on a post, keyed by the user rather than its own id."""

    user_id: UserId


class Comment(DomainModel):
    """Comment entry on a post.

    Author name and avatar are copied from the user at creation time.
    """

    id: CommentId
    user_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    name: str
    avatar: str | None = None
    date: datetime = Field(default_factory=datetime.now)


class Post(DomainModel):
    """Post aggregate root.

    Invariant: a user appears at most once in ``likes``.
    """

    id: PostId
    user_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    name: str
    avatar: str | None = None
    likes: tuple[Like, ...] = ()
    comments: tuple[Comment, ...] = ()
    date: datetime = Field(default_factory=datetime.now)

    def has_like_from(self, user_id: UserId) -> bool:
        """Check whether ``user_id`` already likes this post."""
        return any(like.user_id == user_id for like in self.likes)
