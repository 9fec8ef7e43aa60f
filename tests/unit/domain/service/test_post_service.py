"""Unit tests for PostService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from connector.domain.error import (
    AlreadyLikedError,
    EntryNotFoundError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from connector.domain.model.post import Like
from connector.domain.repository import PostRepository
from connector.domain.service import PostService
from connector.domain.value import CommentId, PostId
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_post_copies_author_name_and_avatar(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author = make_user("Alice")

        # Act
        post = await post_service.create_post(author, "First post")

        # Assert
        assert post.user_id == author.id
        assert post.name == "Alice"
        assert post.avatar == author.avatar
        assert post.likes == ()
        assert post.comments == ()

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        older = make_post(author, "older").model_copy(
            update={"date": datetime.now() - timedelta(days=1)}
        )
        newer = make_post(author, "newer")
        await post_repo.save(older)
        await post_repo.save(newer)

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.text for p in posts] == ["newer", "older"]


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_owner_can_delete(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_repo.save(make_post(author))

        # Act
        await post_service.delete_post(post.id, author.id)

        # Assert
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user("Alice")))
        intruder = make_user("Bob")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, intruder.id)
        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.delete_post(PostId(uuid4()), make_user().id)


class TestLikes:
    """Tests for like_post and unlike_post."""

    @pytest.mark.asyncio
    async def test_like_prepends_caller(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("Alice"), make_user("Bob")
        post = await post_repo.save(make_post(alice))

        # Act
        await post_service.like_post(post.id, alice.id)
        result = await post_service.like_post(post.id, bob.id)

        # Assert
        assert result.likes == (Like(user_id=bob.id), Like(user_id=alice.id))
        saved = await post_repo.find_by_id(post.id)
        assert saved.likes == result.likes

    @pytest.mark.asyncio
    async def test_second_like_is_rejected_without_saving(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice = make_user()
        post = await post_repo.save(make_post(alice))
        await post_service.like_post(post.id, alice.id)

        # Act & Assert
        with pytest.raises(AlreadyLikedError, match="Post already liked"):
            await post_service.like_post(post.id, alice.id)

        saved = await post_repo.find_by_id(post.id)
        assert len(saved.likes) == 1

    @pytest.mark.asyncio
    async def test_unlike_removes_only_caller(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("Alice"), make_user("Bob")
        post = await post_repo.save(make_post(alice))
        await post_service.like_post(post.id, alice.id)
        await post_service.like_post(post.id, bob.id)

        # Act
        result = await post_service.unlike_post(post.id, alice.id)

        # Assert
        assert result.likes == (Like(user_id=bob.id),)

    @pytest.mark.asyncio
    async def test_unlike_without_like(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user()))

        # Act & Assert
        with pytest.raises(NotLikedError, match="Post has not yet been liked"):
            await post_service.unlike_post(post.id, make_user("Bob").id)

    @pytest.mark.asyncio
    async def test_like_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.like_post(PostId(uuid4()), make_user().id)


class TestComments:
    """Tests for add_comment and delete_comment."""

    @pytest.mark.asyncio
    async def test_comment_goes_first_with_author_details(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("Alice"), make_user("Bob")
        post = await post_repo.save(make_post(alice))
        await post_service.add_comment(post.id, alice, "first")

        # Act
        result = await post_service.add_comment(post.id, bob, "second")

        # Assert
        assert [c.text for c in result.comments] == ["second", "first"]
        newest = result.comments[0]
        assert newest.user_id == bob.id
        assert newest.name == "Bob"
        assert newest.avatar == bob.avatar
        assert newest.id != result.comments[1].id

    @pytest.mark.asyncio
    async def test_author_deletes_own_comment(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice = make_user()
        post = await post_repo.save(make_post(alice))
        post = await post_service.add_comment(post.id, alice, "oops")
        comment_id = post.comments[0].id

        # Act
        result = await post_service.delete_comment(post.id, comment_id, alice.id)

        # Assert
        assert result.comments == ()

    @pytest.mark.asyncio
    async def test_post_owner_cannot_delete_others_comment(self, unit_env):
        """Only the comment's author may delete it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice, bob = make_user("Alice"), make_user("Bob")
        post = await post_repo.save(make_post(alice))
        post = await post_service.add_comment(post.id, bob, "nice")
        comment_id = post.comments[0].id

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_comment(post.id, comment_id, alice.id)

        saved = await post_repo.find_by_id(post.id)
        assert len(saved.comments) == 1

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        alice = make_user()
        post = await post_repo.save(make_post(alice))

        # Act & Assert
        with pytest.raises(EntryNotFoundError, match="Comment does not exist"):
            await post_service.delete_comment(post.id, CommentId(uuid4()), alice.id)
