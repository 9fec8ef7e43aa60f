"""Unit tests for UserService."""

import hashlib
from uuid import uuid4

import pytest

from connector.domain.error import NotFoundError, UserAlreadyExistsError
from connector.domain.repository import UserRepository
from connector.domain.service import UserService
from connector.domain.service.user_service import gravatar_url
from connector.domain.value import Email, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def test_gravatar_url_uses_email_digest():
    email = Email("Alice@Example.com")

    url = gravatar_url(email)

    digest = hashlib.md5(b"alice@example.com").hexdigest()
    assert url == f"https://www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_saves_user_with_gravatar(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        email = Email("alice@example.com")

        # Act
        user = await user_service.register("Alice", email, "hash")

        # Assert
        assert user.avatar == gravatar_url(email)
        saved = await user_repo.find_by_email(email)
        assert saved is not None
        assert saved.id == user.id

    @pytest.mark.asyncio
    async def test_email_is_unique_ignoring_case(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register("Alice", Email("alice@example.com"), "hash")

        # Act & Assert
        with pytest.raises(UserAlreadyExistsError, match="User already exists"):
            await user_service.register("Other", Email("ALICE@example.com"), "hash")


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_then_lookup(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register("Alice", Email("a@example.com"), "hash")

        # Act
        deleted = await user_service.delete(user.id)

        # Assert
        assert deleted is True
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(user.id)
