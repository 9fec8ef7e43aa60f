"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from connector.application.usecase.post.delete_post import (
    DeletePostRequest,
    DeletePostUseCase,
)
from connector.domain.error import NotAuthorizedError, NotFoundError
from connector.domain.repository import PostRepository
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_post(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_repo.save(make_post(author))

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user_id=str(author.id))
        )

        # Assert
        assert response.msg == "Post removed"
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("Alice")))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_not_found(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                DeletePostRequest(post_id="not-an-id", user_id=str(uuid4()))
            )
