"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from connector.domain.model.profile import Profile
from connector.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    A profile is keyed by its owner: each user has at most one.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user.

        Args:
            user_id: The owner's user ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """Find all profiles.

        Returns:
            List of all profiles
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or replace).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user.

        Args:
            user_id: The owner's user ID

        Returns:
            True if a profile was removed
        """
        pass
