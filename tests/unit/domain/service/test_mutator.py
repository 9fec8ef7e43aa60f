"""Unit tests for NestedListMutator."""

from uuid import uuid4

import pytest

from connector.domain.error import (
    DomainError,
    EntryNotFoundError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
)
from connector.domain.model.post import Like, Post
from connector.domain.service import NestedListMutator
from connector.domain.value import PostId
from connector.persistence.repository.inmemory import InMemoryPostRepository
from tests.factories import make_post, make_user


class FailingSaveRepository(InMemoryPostRepository):
    """Post repository whose saves fail after the initial seed."""

    def __init__(self) -> None:
        super().__init__()
        self.fail = False

    async def save(self, post: Post) -> Post:
        if self.fail:
            raise StorageError("save_post")
        return await super().save(post)


def _likes_mutator(repo: InMemoryPostRepository) -> NestedListMutator[Post, Like]:
    return NestedListMutator(
        resource="post",
        entry="like",
        field="likes",
        load=repo.find_by_id,
        save=repo.save,
        missing_parent=lambda post_id: NotFoundError("Post", str(post_id)),
    )


class TestInsert:
    """Tests for insert method."""

    @pytest.mark.asyncio
    async def test_missing_parent(self):
        mutator = _likes_mutator(InMemoryPostRepository())

        with pytest.raises(NotFoundError, match="Post not found"):
            await mutator.insert(PostId(uuid4()), Like(user_id=make_user().id))

    @pytest.mark.asyncio
    async def test_reject_vetoes_insert(self):
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(make_user()))
        mutator = _likes_mutator(repo)

        # Act & Assert
        with pytest.raises(DomainError, match="nope"):
            await mutator.insert(
                post.id,
                Like(user_id=make_user().id),
                reject=lambda _post: DomainError("nope"),
            )
        assert (await repo.find_by_id(post.id)).likes == ()

    @pytest.mark.asyncio
    async def test_storage_failure_leaves_aggregate_unchanged(self):
        # Arrange
        repo = FailingSaveRepository()
        post = await repo.save(make_post(make_user()))
        mutator = _likes_mutator(repo)
        repo.fail = True

        # Act & Assert
        with pytest.raises(StorageError):
            await mutator.insert(post.id, Like(user_id=make_user().id))
        assert (await repo.find_by_id(post.id)).likes == ()


class TestRemove:
    """Tests for remove method."""

    @pytest.mark.asyncio
    async def test_removes_first_match_only(self):
        # Arrange
        repo = InMemoryPostRepository()
        alice, bob = make_user("Alice"), make_user("Bob")
        duplicated = make_post(alice).model_copy(
            update={
                "likes": (
                    Like(user_id=bob.id),
                    Like(user_id=alice.id),
                    Like(user_id=alice.id),
                )
            }
        )
        await repo.save(duplicated)
        mutator = _likes_mutator(repo)

        # Act
        result = await mutator.remove(
            duplicated.id,
            alice.id,
            match=lambda like: like.user_id == alice.id,
            owner_of=lambda _post, like: like.user_id,
        )

        # Assert
        assert result.likes == (Like(user_id=bob.id), Like(user_id=alice.id))

    @pytest.mark.asyncio
    async def test_caller_must_own_entry(self):
        # Arrange
        repo = InMemoryPostRepository()
        alice, bob = make_user("Alice"), make_user("Bob")
        post = await repo.save(
            make_post(alice).model_copy(update={"likes": (Like(user_id=bob.id),)})
        )
        mutator = _likes_mutator(repo)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await mutator.remove(
                post.id,
                alice.id,
                match=lambda like: like.user_id == bob.id,
                owner_of=lambda _post, like: like.user_id,
            )
        assert len((await repo.find_by_id(post.id)).likes) == 1

    @pytest.mark.asyncio
    async def test_default_missing_entry_error(self):
        # Arrange
        repo = InMemoryPostRepository()
        alice = make_user()
        post = await repo.save(make_post(alice))
        mutator = _likes_mutator(repo)

        # Act & Assert
        with pytest.raises(EntryNotFoundError, match="Like does not exist"):
            await mutator.remove(
                post.id,
                alice.id,
                match=lambda like: like.user_id == alice.id,
                owner_of=lambda _post, like: like.user_id,
                entry_id=str(alice.id),
            )
