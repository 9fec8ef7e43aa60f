"""Domain value objects."""

from connector.domain.value.identifiers import (
    CommentId,
    EducationId,
    ExperienceId,
    PostId,
    ProfileId,
    UserId,
    parse_identifier,
)
from connector.domain.value.types import Email, Skills, SocialLinks

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "ProfileId",
    "CommentId",
    "ExperienceId",
    "EducationId",
    "parse_identifier",
    # Types
    "Email",
    "Skills",
    "SocialLinks",
]
