"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from connector.domain.repository.post import PostRepository
from connector.domain.repository.profile import ProfileRepository
from connector.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "ProfileRepository",
]
