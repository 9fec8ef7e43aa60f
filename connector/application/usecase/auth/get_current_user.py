"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from connector.domain.service import UserService
from connector.domain.value import UserId, parse_identifier


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the authenticated caller


class GetCurrentUserResponse(BaseModel):
    """Current user without credentials."""

    id: str
    name: str
    email: str
    avatar: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the caller's user record.

        Raises:
            NotFoundError: If the user was deleted after the token was issued
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))
        user = await self.user_service.get_by_id(user_id)
        return GetCurrentUserResponse(
            id=str(user.id),
            name=user.name,
            email=user.email.root,
            avatar=user.avatar,
            created_at=user.created_at,
        )
