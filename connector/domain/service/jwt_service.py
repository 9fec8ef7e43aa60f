"""JWT token domain service."""

from uuid import UUID

import logfire

from connector.config import AuthSettings
from connector.domain.error import TokenSigningError
from connector.domain.value import UserId
from connector.util.jwt import (
    JWTError,
    JWTSigningError,
    TokenPayload,
    create_token,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string

        Raises:
            TokenSigningError: If the token cannot be signed
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            try:
                token = create_token(str(user_id), self.auth_settings)
            except JWTSigningError as e:
                logfire.error(
                    "JWT token signing failed",
                    user_id=str(user_id),
                    error_type=type(e.__cause__).__name__,
                )
                raise TokenSigningError() from e
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid, expired or has a malformed subject
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                UUID(payload.sub)
            except ValueError:
                logfire.warn("JWT subject is not a user id")
                raise JWTError("Invalid token")
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", user_id=payload.sub)
            return payload

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None
        return UserId(UUID(payload.sub))
