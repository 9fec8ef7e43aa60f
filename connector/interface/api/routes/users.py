"""User registration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from connector.application.usecase.auth import (
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from connector.domain.value import Email

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering a user."""

    name: str = Field(min_length=1, max_length=255)
    email: Email
    password: str = Field(min_length=6)


@router.post(
    "", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register_user(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Register a user and return a session token.

    Args:
        request: Name, email and password
        register_use_case: Register use case from DI

    Returns:
        Session token for the new user
    """
    return await register_use_case.execute(
        RegisterRequest(
            name=request.name, email=request.email, password=request.password
        )
    )
