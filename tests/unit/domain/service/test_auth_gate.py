"""Unit tests for AuthGate."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from connector.config import AuthSettings
from connector.domain.error import UnauthorizedError
from connector.domain.service import AuthGate, JWTService
from connector.domain.value import UserId
from connector.util.jwt import create_token
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        # Arrange
        auth_gate = await unit_env.get(AuthGate)
        jwt_service = await unit_env.get(JWTService)
        user_id = UserId(uuid4())
        token = jwt_service.create_token(user_id)

        # Act
        caller = auth_gate.authenticate(token)

        # Assert
        assert caller.user_id == user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    async def test_missing_or_malformed_token(self, unit_env, token):
        auth_gate = await unit_env.get(AuthGate)

        with pytest.raises(UnauthorizedError, match="No valid token"):
            auth_gate.authenticate(token)

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        # Arrange
        auth_gate = await unit_env.get(AuthGate)
        settings = await unit_env.get(AuthSettings)
        issued = datetime.now(timezone.utc) - timedelta(
            hours=settings.jwt_expiry_hours + 1
        )
        token = create_token(str(uuid4()), settings, now=issued)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            auth_gate.authenticate(token)

    @pytest.mark.asyncio
    async def test_subject_that_is_not_a_user_id(self, unit_env):
        # Arrange
        auth_gate = await unit_env.get(AuthGate)
        settings = await unit_env.get(AuthSettings)
        token = create_token("not-a-uuid", settings)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            auth_gate.authenticate(token)
