"""Domain model entities."""

from connector.domain.model.post import Comment, Like, Post
from connector.domain.model.profile import Education, Experience, Profile
from connector.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Like",
    "Comment",
    "Profile",
    "Experience",
    "Education",
]
