"""Builders for domain objects used across tests."""

from datetime import datetime
from uuid import uuid4

from connector.domain.model import Post, Profile, User
from connector.domain.value import Email, PostId, ProfileId, UserId


def make_user(name: str = "Alice", email: str | None = None) -> User:
    """Build a user with a throwaway password hash."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=Email(email or f"{name.lower()}-{user_id.hex[:8]}@example.com"),
        password_hash="not-a-real-hash",
        avatar=f"https://www.gravatar.com/avatar/{user_id.hex}",
        created_at=datetime.now(),
    )


def make_post(author: User, text: str = "Hello world") -> Post:
    """Build an empty post written by ``author``."""
    return Post(
        id=PostId(uuid4()),
        user_id=author.id,
        text=text,
        name=author.name,
        avatar=author.avatar,
        date=datetime.now(),
    )


def make_profile(owner: User, status: str = "Developer") -> Profile:
    """Build a profile without experience or education."""
    return Profile(
        id=ProfileId(uuid4()),
        user_id=owner.id,
        status=status,
        skills=("python", "sql"),
        date=datetime.now(),
    )
