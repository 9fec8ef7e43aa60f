"""Register use case."""

import logfire
from pydantic import BaseModel

from connector.domain.service import CredentialService, JWTService, UserService
from connector.domain.value import Email


class RegisterRequest(BaseModel):
    """Register request."""

    name: str
    email: Email
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    token: str


class RegisterUseCase:
    """Use case for creating an account and signing the new user in."""

    def __init__(
        self,
        user_service: UserService,
        credential_service: CredentialService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            credential_service: Password hashing
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.credential_service = credential_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            Register response with a session token for the new user

        Raises:
            UserAlreadyExistsError: If the email is taken
            TokenSigningError: If the token cannot be issued
        """
        with logfire.span("register_user"):
            password_hash = self.credential_service.hash(request.password)
            user = await self.user_service.register(
                name=request.name,
                email=request.email,
                password_hash=password_hash,
            )
            token = self.jwt_service.create_token(user.id)
            return RegisterResponse(token=token)
