"""Education entry use cases."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from connector.application.usecase.common import ProfileView
from connector.domain.error import EntryNotFoundError, NotFoundError
from connector.domain.model import Education
from connector.domain.service import ProfileService, UserService
from connector.domain.value import EducationId, UserId, parse_identifier


class AddEducationRequest(BaseModel):
    """Add education request."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str  # From the authenticated caller
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class AddEducationUseCase:
    """Use case for adding an education entry to the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddEducationRequest) -> ProfileView:
        """Prepend a new education entry.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))
        entry = Education(
            id=EducationId(uuid4()),
            school=request.school,
            degree=request.degree,
            fieldofstudy=request.fieldofstudy,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        profile = await self.profile_service.add_education(user_id, entry)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)


class DeleteEducationRequest(BaseModel):
    """Delete education request."""

    user_id: str  # From the authenticated caller
    education_id: str


class DeleteEducationUseCase:
    """Use case for removing an education entry from the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: DeleteEducationRequest) -> ProfileView:
        """Delete an education entry.

        Raises:
            NotFoundError: If the caller has no profile
            EntryNotFoundError: If the entry does not exist
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))
        try:
            education_id = EducationId(
                parse_identifier(request.education_id, "Education")
            )
        except NotFoundError:
            raise EntryNotFoundError("Education", request.education_id)

        profile = await self.profile_service.delete_education(user_id, education_id)
        owner = await self.user_service.get_by_id(user_id)
        return ProfileView.from_domain(profile, owner)
