"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Nested entries are
dumped to JSON-compatible dicts for the JSONB columns and validated back
into domain models on load.
"""

from typing import Any, Dict
from uuid import UUID

from connector.domain.model import (
    Comment,
    Education,
    Experience,
    Like,
    Post,
    Profile,
    User,
)
from connector.domain.value import Email, PostId, ProfileId, SocialLinks, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        avatar=row.get("avatar"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "avatar": user.avatar,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model with likes and comments in stored order
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        text=row["text"],
        name=row["name"],
        avatar=row.get("avatar"),
        likes=tuple(Like.model_validate(item) for item in row.get("likes") or []),
        comments=tuple(
            Comment.model_validate(item) for item in row.get("comments") or []
        ),
        date=row["date"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return {
        "id": post.id,
        "user_id": post.user_id,
        "text": post.text,
        "name": post.name,
        "avatar": post.avatar,
        "likes": [like.model_dump(mode="json") for like in post.likes],
        "comments": [comment.model_dump(mode="json") for comment in post.comments],
        "date": post.date,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        status=row["status"],
        skills=tuple(row["skills"]),
        company=row.get("company"),
        website=row.get("website"),
        location=row.get("location"),
        bio=row.get("bio"),
        githubusername=row.get("githubusername"),
        social=SocialLinks.model_validate(row.get("social") or {}),
        experience=tuple(
            Experience.model_validate(item) for item in row.get("experience") or []
        ),
        education=tuple(
            Education.model_validate(item) for item in row.get("education") or []
        ),
        date=row["date"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return {
        "id": profile.id,
        "user_id": profile.user_id,
        "status": profile.status,
        "skills": list(profile.skills),
        "company": profile.company,
        "website": profile.website,
        "location": profile.location,
        "bio": profile.bio,
        "githubusername": profile.githubusername,
        "social": profile.social.model_dump(mode="json"),
        "experience": [entry.model_dump(mode="json") for entry in profile.experience],
        "education": [entry.model_dump(mode="json") for entry in profile.education],
        "date": profile.date,
    }
