"""Experience entry use cases."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from connector.application.usecase.common import ProfileView
from connector.domain.error import EntryNotFoundError, NotFoundError
from connector.domain.model import Experience
from connector.domain.service import ProfileService, UserService
from connector.domain.value import ExperienceId, UserId, parse_identifier


class AddExperienceRequest(BaseModel):
    """Add experience request."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str  # From the authenticated caller
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class AddExperienceUseCase:
    """Use case for adding an experience entry to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddExperienceRequest) -> ProfileView:
        """Prepend a new experience entry.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))
        entry = Experience(
            id=ExperienceId(uuid4()),
            title=request.title,
            company=request.company,
            location=request.location,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        profile = await self.profile_service.add_experience(user_id, entry)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)


class DeleteExperienceRequest(BaseModel):
    """Delete experience request."""

    user_id: str  # From the authenticated caller
    experience_id: str


class DeleteExperienceUseCase:
    """Use case for removing an experience entry from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: DeleteExperienceRequest) -> ProfileView:
        """Delete an experience entry.

        Raises:
            NotFoundError: If the caller has no profile
            EntryNotFoundError: If the entry does not exist
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))
        try:
            experience_id = ExperienceId(
                parse_identifier(request.experience_id, "Experience")
            )
        except NotFoundError:
            raise EntryNotFoundError("Experience", request.experience_id)

        profile = await self.profile_service.delete_experience(user_id, experience_id)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)
