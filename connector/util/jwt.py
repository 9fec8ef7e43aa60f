"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from connector.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # User ID
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


class JWTSigningError(JWTError):
    """Raised when a token cannot be signed."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, now: datetime | None = None
) -> str:
    """Create a JWT token for the user.

    Args:
        user_id: User ID, stored as the ``sub`` claim
        settings: Authentication settings
        now: Issue time (defaults to the current UTC time)

    Returns:
        Encoded JWT token

    Raises:
        JWTSigningError: If the token cannot be signed
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": user_id,
        "exp": expiry,
    }

    try:
        return jwt.encode(
            payload, settings.jwt_secret, algorithm=settings.jwt_algorithm
        )
    except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
        raise JWTSigningError("Token signing failed") from e


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
