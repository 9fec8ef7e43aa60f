"""Profile read use cases."""

from pydantic import BaseModel, RootModel

from connector.application.usecase.common import ProfileView
from connector.domain.error import NotFoundError
from connector.domain.model import Profile, User
from connector.domain.service import ProfileService, UserService
from connector.domain.value import UserId, parse_identifier


async def _owner_of(user_service: UserService, profile: Profile) -> User | None:
    try:
        return await user_service.get_by_id(profile.user_id)
    except NotFoundError:
        return None


class GetMyProfileRequest(BaseModel):
    """Get the caller's profile."""

    user_id: str  # From the authenticated caller


class GetMyProfileUseCase:
    """Use case for reading the caller's own profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetMyProfileRequest) -> ProfileView:
        """Get the caller's profile with their name and avatar.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))
        profile = await self.profile_service.get_profile_by_user(user_id)
        owner = await _owner_of(self.user_service, profile)
        return ProfileView.from_domain(profile, owner)


class GetProfileByUserRequest(BaseModel):
    """Get a profile by its owner's user ID."""

    user_id: str


class GetProfileByUserUseCase:
    """Use case for reading any user's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetProfileByUserRequest) -> ProfileView:
        """Get a user's profile.

        Raises:
            NotFoundError: If the user has no profile or the ID is malformed
        """
        user_id = UserId(parse_identifier(request.user_id, "Profile"))
        profile = await self.profile_service.get_profile_by_user(user_id)
        owner = await _owner_of(self.user_service, profile)
        return ProfileView.from_domain(profile, owner)


class ListProfilesRequest(BaseModel):
    """List profiles request."""


class ListProfilesResponse(RootModel[list[ProfileView]]):
    """All profiles."""


class ListProfilesUseCase:
    """Use case for listing every profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        """List all profiles with owner name and avatar."""
        profiles = await self.profile_service.list_profiles()
        views = []
        for profile in profiles:
            owner = await _owner_of(self.user_service, profile)
            views.append(ProfileView.from_domain(profile, owner))
        return ListProfilesResponse(views)
