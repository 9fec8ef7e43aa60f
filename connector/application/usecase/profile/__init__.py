"""Profile use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .education import (
    AddEducationRequest,
    AddEducationUseCase,
    DeleteEducationRequest,
    DeleteEducationUseCase,
)
from .experience import (
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteExperienceRequest,
    DeleteExperienceUseCase,
)
from .get_profile import (
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
)
from .upsert_profile import UpsertProfileRequest, UpsertProfileUseCase

__all__ = [
    "AddEducationRequest",
    "AddEducationUseCase",
    "AddExperienceRequest",
    "AddExperienceUseCase",
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "DeleteEducationRequest",
    "DeleteEducationUseCase",
    "DeleteExperienceRequest",
    "DeleteExperienceUseCase",
    "GetMyProfileRequest",
    "GetMyProfileUseCase",
    "GetProfileByUserRequest",
    "GetProfileByUserUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "UpsertProfileRequest",
    "UpsertProfileUseCase",
]
