"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from connector.domain.error import NotFoundError

# Aggregate identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
ProfileId = NewType("ProfileId", UUID)

# Nested entry identifiers
CommentId = NewType("CommentId", UUID)
ExperienceId = NewType("ExperienceId", UUID)
EducationId = NewType("EducationId", UUID)


def parse_identifier(value: str, resource: str) -> UUID:
    """Parse an identifier received from a caller.

    A malformed identifier cannot match any stored entity, so it is reported
    the same way as an unknown one.

    Args:
        value: Identifier string
        resource: Resource name used in the error

    Returns:
        Parsed UUID

    Raises:
        NotFoundError: If the value is not a valid UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise NotFoundError(resource, str(value))
