"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from connector.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from connector.config import AuthSettings
from connector.domain.service import AuthGate
from connector.domain.value import Email

from .security import authenticate

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: Email
    password: str = Field(min_length=1)


@router.get("", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> GetCurrentUserResponse:
    """Get the authenticated user without the password hash.

    Requires authentication.
    """
    caller = authenticate(request, auth_gate, auth_settings)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=str(caller.user_id))
    )


@router.post("", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Log in with email and password.

    Args:
        request: Credentials
        login_use_case: Login use case from DI

    Returns:
        Session token
    """
    return await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
