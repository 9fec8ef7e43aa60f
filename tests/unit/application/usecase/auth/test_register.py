"""Unit tests for RegisterUseCase."""

import pytest
from dishka import AsyncContainer

from connector.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from connector.domain.error import UserAlreadyExistsError
from connector.domain.repository import UserRepository
from connector.domain.service import JWTService
from connector.domain.value import Email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_password(self, unit_env: AsyncContainer):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        await register.execute(
            RegisterRequest(
                name="Alice", email=Email("alice@example.com"), password="secret123"
            )
        )

        # Assert
        user = await user_repo.find_by_email(Email("alice@example.com"))
        assert user is not None
        assert user.password_hash != "secret123"
        assert user.password_hash.startswith("$2b$")

    @pytest.mark.asyncio
    async def test_token_identifies_new_user(self, unit_env: AsyncContainer):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)
        current_user = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await register.execute(
            RegisterRequest(
                name="Alice", email=Email("alice@example.com"), password="secret123"
            )
        )

        # Assert
        user_id = jwt_service.get_user_id_from_token(response.token)
        me = await current_user.execute(GetCurrentUserRequest(user_id=str(user_id)))
        assert me.name == "Alice"
        assert me.email == "alice@example.com"
        assert "password_hash" not in me.model_dump()

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env: AsyncContainer):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        request = RegisterRequest(
            name="Alice", email=Email("alice@example.com"), password="secret123"
        )
        await register.execute(request)

        # Act & Assert
        with pytest.raises(UserAlreadyExistsError):
            await register.execute(request)
