"""In-memory profile repository for testing."""

from typing import Optional

from connector.domain.model.profile import Profile
from connector.domain.repository.profile import ProfileRepository
from connector.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Profiles are keyed by owner, mirroring the unique ``user_id`` column.
    """

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user."""
        return self._profiles.get(user_id)

    async def find_all(self) -> list[Profile]:
        """Find all profiles."""
        return sorted(self._profiles.values(), key=lambda p: p.date)

    async def save(self, profile: Profile) -> Profile:
        """Save or replace a profile."""
        self._profiles[profile.user_id] = profile
        return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user."""
        return self._profiles.pop(user_id, None) is not None
