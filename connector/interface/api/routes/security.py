"""Session token extraction shared by the routes."""

from fastapi import Request

from connector.config import AuthSettings
from connector.domain.service import AuthGate, Caller


def authenticate(
    request: Request, auth_gate: AuthGate, auth_settings: AuthSettings
) -> Caller:
    """Run the auth gate on the configured token header.

    The caller is also bound to ``request.state.caller``.

    Args:
        request: Current request
        auth_gate: Auth gate from DI
        auth_settings: Names the header carrying the token

    Returns:
        The authenticated caller

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    token = request.headers.get(auth_settings.token_header)
    caller = auth_gate.authenticate(token)
    request.state.caller = caller
    return caller
