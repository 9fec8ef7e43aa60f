"""Profile routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from connector.application.usecase.common import MessageResponse, ProfileView
from connector.application.usecase.github import (
    GetRepositoriesRequest,
    GetRepositoriesResponse,
    GetRepositoriesUseCase,
)
from connector.application.usecase.profile import (
    AddEducationRequest,
    AddEducationUseCase,
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    DeleteEducationRequest,
    DeleteEducationUseCase,
    DeleteExperienceRequest,
    DeleteExperienceUseCase,
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from connector.config import AuthSettings
from connector.domain.service import AuthGate

from .security import authenticate

router = APIRouter(prefix="/api/profile", tags=["profile"], route_class=DishkaRoute)


class ProfileAPIRequest(BaseModel):
    """API request for creating or updating a profile."""

    status: str = Field(min_length=1)
    skills: str = Field(min_length=1)  # Comma-separated
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


class ExperienceAPIRequest(BaseModel):
    """API request for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class EducationAPIRequest(BaseModel):
    """API request for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    fieldofstudy: str = Field(min_length=1)
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


@router.get("/me", response_model=ProfileView)
async def get_my_profile(
    request: Request,
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileView:
    """Get the caller's profile.

    Requires authentication.
    """
    caller = authenticate(request, auth_gate, auth_settings)
    return await get_my_profile_use_case.execute(
        GetMyProfileRequest(user_id=str(caller.user_id))
    )


@router.post("", response_model=ProfileView)
async def upsert_profile(
    body: ProfileAPIRequest,
    request: Request,
    upsert_profile_use_case: FromDishka[UpsertProfileUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileView:
    """Create or update the caller's profile.

    Requires authentication.
    """
    caller = authenticate(request, auth_gate, auth_settings)
    return await upsert_profile_use_case.execute(
        UpsertProfileRequest(user_id=str(caller.user_id), **body.model_dump())
    )


@router.get("", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
) -> ListProfilesResponse:
    """List all profiles."""
    return await list_profiles_use_case.execute(ListProfilesRequest())


@router.get("/user/{user_id}", response_model=ProfileView)
async def get_profile_by_user(
    user_id: str,
    get_profile_by_user_use_case: FromDishka[GetProfileByUserUseCase],
) -> ProfileView:
    """Get a user's profile."""
    return await get_profile_by_user_use_case.execute(
        GetProfileByUserRequest(user_id=user_id)
    )


@router.delete("", response_model=MessageResponse)
async def delete_account(
    request: Request,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Delete the caller's posts, profile and user.

    Requires authentication.
    """
    caller = authenticate(request, auth_gate, auth_settings)
    return await delete_account_use_case.execute(
        DeleteAccountRequest(user_id=str(caller.user_id))
    )


@router.put("/experience", response_model=ProfileView)
async def add_experience(
    body: ExperienceAPIRequest,
    request: Request,
    add_experience_use_case: FromDishka[AddExperienceUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileView:
    """Add an experience entry at the head of the caller's list."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await add_experience_use_case.execute(
        AddExperienceRequest(user_id=str(caller.user_id), **body.model_dump())
    )


@router.delete("/experience/{exp_id}", response_model=ProfileView)
async def delete_experience(
    exp_id: str,
    request: Request,
    delete_experience_use_case: FromDishka[DeleteExperienceUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileView:
    """Delete an experience entry from the caller's profile."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await delete_experience_use_case.execute(
        DeleteExperienceRequest(user_id=str(caller.user_id), experience_id=exp_id)
    )


@router.put("/education", response_model=ProfileView)
async def add_education(
    body: EducationAPIRequest,
    request: Request,
    add_education_use_case: FromDishka[AddEducationUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileView:
    """Add an education entry at the head of the caller's list."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await add_education_use_case.execute(
        AddEducationRequest(user_id=str(caller.user_id), **body.model_dump())
    )


@router.delete("/education/{edu_id}", response_model=ProfileView)
async def delete_education(
    edu_id: str,
    request: Request,
    delete_education_use_case: FromDishka[DeleteEducationUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ProfileView:
    """Delete an education entry from the caller's profile."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await delete_education_use_case.execute(
        DeleteEducationRequest(user_id=str(caller.user_id), education_id=edu_id)
    )


@router.get("/github/{username}", response_model=GetRepositoriesResponse)
async def get_github_repositories(
    username: str,
    get_repositories_use_case: FromDishka[GetRepositoriesUseCase],
) -> GetRepositoriesResponse:
    """List a GitHub user's five most recently created repositories."""
    return await get_repositories_use_case.execute(
        GetRepositoriesRequest(username=username)
    )
