"""Login use case."""

import logfire
from pydantic import BaseModel

from connector.domain.error import InvalidCredentialsError
from connector.domain.service import CredentialService, JWTService, UserService
from connector.domain.value import Email


class LoginRequest(BaseModel):
    """Login request."""

    email: Email
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            credential_service: Password verification
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        An unknown email and a wrong password produce the same error.

        Args:
            request: Login request with credentials

        Returns:
            Login response with a session token

        Raises:
            InvalidCredentialsError: If the credentials do not match a user
            TokenSigningError: If the token cannot be issued
        """
        with logfire.span("login_user"):
            user = await self.user_service.find_by_email(request.email)
            if user is None:
                logfire.info("Login rejected - unknown email")
                raise InvalidCredentialsError()

            if not self.credential_service.verify(request.password, user.password_hash):
                logfire.info("Login rejected - wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(user.id)
            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(token=token)
