"""Profile domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from connector.domain.error import NotFoundError
from connector.domain.model.profile import Education, Experience, Profile
from connector.domain.repository import ProfileRepository
from connector.domain.value import (
    EducationId,
    ExperienceId,
    ProfileId,
    SocialLinks,
    UserId,
)

from .base import Service
from .mutator import NestedListMutator


def _profile_not_found(user_id: UserId) -> NotFoundError:
    return NotFoundError("Profile", str(user_id))


class ProfileService(Service):
    """Domain service for profiles and their experience and education."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository
        self.experience: NestedListMutator[Profile, Experience] = NestedListMutator(
            resource="profile",
            entry="experience",
            field="experience",
            load=profile_repository.find_by_user,
            save=profile_repository.save,
            missing_parent=_profile_not_found,
        )
        self.education: NestedListMutator[Profile, Education] = NestedListMutator(
            resource="profile",
            entry="education",
            field="education",
            load=profile_repository.find_by_user,
            save=profile_repository.save,
            missing_parent=_profile_not_found,
        )

    async def get_profile_by_user(self, user_id: UserId) -> Profile:
        """Get the profile owned by a user.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span("profile_service.get_profile_by_user", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user(user_id)
            if profile is None:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise _profile_not_found(user_id)
            return profile

    async def list_profiles(self) -> list[Profile]:
        """List all profiles."""
        with logfire.span("profile_service.list_profiles"):
            profiles = await self.profile_repository.find_all()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def upsert_profile(
        self,
        user_id: UserId,
        status: str,
        skills: tuple[str, ...],
        company: str | None = None,
        website: str | None = None,
        location: str | None = None,
        bio: str | None = None,
        githubusername: str | None = None,
        social: SocialLinks | None = None,
    ) -> Profile:
        """Create the user's profile, or update its top-level fields.

        Experience and education entries are kept on update.

        Args:
            user_id: Owner (always the authenticated caller)
            status: Professional status
            skills: Parsed skills list
            company: Company name
            website: Personal website
            location: Location
            bio: Short biography
            githubusername: GitHub username for the repository lookup
            social: Social network links

        Returns:
            Saved profile
        """
        with logfire.span("profile_service.upsert_profile", user_id=str(user_id)):
            fields = {
                "status": status,
                "skills": skills,
                "company": company,
                "website": website,
                "location": location,
                "bio": bio,
                "githubusername": githubusername,
                "social": social or SocialLinks(),
            }

            existing = await self.profile_repository.find_by_user(user_id)
            if existing is not None:
                profile = existing.model_copy(update=fields)
                logfire.info("Updating profile", profile_id=str(existing.id))
            else:
                profile = Profile(
                    id=ProfileId(uuid4()),
                    user_id=user_id,
                    date=datetime.now(),
                    **fields,
                )
                logfire.info("Creating profile", profile_id=str(profile.id))

            return await self.profile_repository.save(profile)

    async def delete_profile(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user.

        Returns:
            True if a profile was removed
        """
        with logfire.span("profile_service.delete_profile", user_id=str(user_id)):
            deleted = await self.profile_repository.delete_by_user(user_id)
            logfire.info("Profile deleted", user_id=str(user_id), deleted=deleted)
            return deleted

    async def add_experience(
        self, caller_id: UserId, experience: Experience
    ) -> Profile:
        """Prepend an experience entry to the caller's profile.

        Raises:
            NotFoundError: If the caller has no profile
        """
        return await self.experience.insert(caller_id, experience)

    async def delete_experience(
        self, caller_id: UserId, experience_id: ExperienceId
    ) -> Profile:
        """Delete an experience entry from the caller's profile.

        Raises:
            NotFoundError: If the caller has no profile
            EntryNotFoundError: If the entry does not exist
        """
        return await self.experience.remove(
            caller_id,
            caller_id,
            match=lambda entry: entry.id == experience_id,
            owner_of=lambda profile, _entry: profile.user_id,
            entry_id=str(experience_id),
        )

    async def add_education(self, caller_id: UserId, education: Education) -> Profile:
        """Prepend an education entry to the caller's profile.

        Raises:
            NotFoundError: If the caller has no profile
        """
        return await self.education.insert(caller_id, education)

    async def delete_education(
        self, caller_id: UserId, education_id: EducationId
    ) -> Profile:
        """Delete an education entry from the caller's profile.

        Raises:
            NotFoundError: If the caller has no profile
            EntryNotFoundError: If the entry does not exist
        """
        return await self.education.remove(
            caller_id,
            caller_id,
            match=lambda entry: entry.id == education_id,
            owner_of=lambda profile, _entry: profile.user_id,
            entry_id=str(education_id),
        )
