"""Request authentication gate."""

import logfire

from connector.domain.error import UnauthorizedError
from connector.domain.value import UserId
from connector.domain.value.common import ValueObject

from .base import Service
from .jwt_service import JWTService


class Caller(ValueObject):
    """Authenticated identity bound to a single request."""

    user_id: UserId


class AuthGate(Service):
    """Turns a raw session token into an authenticated caller.

    The gate never touches storage: a valid token for a user that has since
    been deleted still authenticates, and downstream lookups report the
    missing user.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize auth gate.

        Args:
            jwt_service: Token verification service
        """
        self.jwt_service = jwt_service

    def authenticate(self, token: str | None) -> Caller:
        """Authenticate a request token.

        Args:
            token: Token from the request header (None if absent)

        Returns:
            The authenticated caller

        Raises:
            UnauthorizedError: If the token is missing, malformed, tampered
                with or expired
        """
        if not token:
            logfire.info("Request rejected - no token")
            raise UnauthorizedError()

        user_id = self.jwt_service.get_user_id_from_token(token)
        if user_id is None:
            logfire.info("Request rejected - invalid token")
            raise UnauthorizedError()

        return Caller(user_id=user_id)
