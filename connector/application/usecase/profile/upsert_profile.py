"""Create or update profile use case."""

import logfire
from pydantic import BaseModel

from connector.application.usecase.common import ProfileView
from connector.domain.error import ValidationError
from connector.domain.service import ProfileService, UserService
from connector.domain.value import Skills, SocialLinks, UserId, parse_identifier


class UpsertProfileRequest(BaseModel):
    """Create or update profile request.

    ``skills`` is a comma-separated list, e.g. ``"python, sql"``.
    """

    user_id: str  # From the authenticated caller
    status: str
    skills: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class UpsertProfileUseCase:
    """Use case for creating or updating the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize upsert profile use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: UpsertProfileRequest) -> ProfileView:
        """Create or update the caller's profile.

        Raises:
            ValidationError: If status or skills are empty
        """
        if not request.status.strip():
            raise ValidationError("Status is required")

        skills = Skills.parse(request.skills)
        if not skills.root:
            raise ValidationError("Skills is required")

        user_id = UserId(parse_identifier(request.user_id, "User"))
        social = SocialLinks(
            youtube=request.youtube,
            twitter=request.twitter,
            facebook=request.facebook,
            linkedin=request.linkedin,
            instagram=request.instagram,
        )

        profile = await self.profile_service.upsert_profile(
            user_id=user_id,
            status=request.status,
            skills=skills.root,
            company=request.company,
            website=request.website,
            location=request.location,
            bio=request.bio,
            githubusername=request.githubusername,
            social=social,
        )
        logfire.info("Profile saved", user_id=str(user_id), skills=len(skills.root))

        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)
