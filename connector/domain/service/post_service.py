"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from connector.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from connector.domain.model.post import Comment, Like, Post
from connector.domain.model.user import User
from connector.domain.repository import PostRepository
from connector.domain.value import CommentId, PostId, UserId

from .base import Service
from .mutator import NestedListMutator


class PostService(Service):
    """Domain service for posts and their likes and comments."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository
        self.likes: NestedListMutator[Post, Like] = NestedListMutator(
            resource="post",
            entry="like",
            field="likes",
            load=post_repository.find_by_id,
            save=post_repository.save,
            missing_parent=lambda post_id: NotFoundError("Post", str(post_id)),
        )
        self.comments: NestedListMutator[Post, Comment] = NestedListMutator(
            resource="post",
            entry="comment",
            field="comments",
            load=post_repository.find_by_id,
            save=post_repository.save,
            missing_parent=lambda post_id: NotFoundError("Post", str(post_id)),
        )

    async def create_post(self, author: User, text: str) -> Post:
        """Create a post attributed to ``author``.

        Args:
            author: Authenticated user writing the post
            text: Post body

        Returns:
            Saved post
        """
        with logfire.span("post_service.create_post", user_id=str(author.id)):
            post = Post(
                id=PostId(uuid4()),
                user_id=author.id,
                text=text,
                name=author.name,
                avatar=author.avatar,
                date=datetime.now(),
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId, caller_id: UserId) -> None:
        """Delete a post owned by the caller.

        Args:
            post_id: Post ID
            caller_id: Authenticated caller

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller does not own the post
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), caller_id=str(caller_id)
        ):
            post = await self.get_post_by_id(post_id)
            if post.user_id != caller_id:
                logfire.warn(
                    "Unauthorized post deletion attempt",
                    post_id=str(post_id),
                    caller_id=str(caller_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(caller_id))

            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def delete_posts_by_user(self, user_id: UserId) -> int:
        """Delete every post owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            Number of posts removed
        """
        with logfire.span("post_service.delete_posts_by_user", user_id=str(user_id)):
            count = await self.post_repository.delete_by_user(user_id)
            logfire.info("User posts deleted", user_id=str(user_id), count=count)
            return count

    async def like_post(self, post_id: PostId, caller_id: UserId) -> Post:
        """Like a post.

        Raises:
            NotFoundError: If the post does not exist
            AlreadyLikedError: If the caller already likes the post
        """

        def already_liked(post: Post) -> AlreadyLikedError | None:
            if post.has_like_from(caller_id):
                return AlreadyLikedError(str(post_id))
            return None

        return await self.likes.insert(
            post_id, Like(user_id=caller_id), reject=already_liked
        )

    async def unlike_post(self, post_id: PostId, caller_id: UserId) -> Post:
        """Remove the caller's like from a post.

        Raises:
            NotFoundError: If the post does not exist
            NotLikedError: If the caller has not liked the post
        """
        return await self.likes.remove(
            post_id,
            caller_id,
            match=lambda like: like.user_id == caller_id,
            owner_of=lambda _post, like: like.user_id,
            missing_entry=lambda: NotLikedError(str(post_id)),
            entry_id=str(caller_id),
        )

    async def add_comment(self, post_id: PostId, author: User, text: str) -> Post:
        """Add a comment at the head of a post's comments.

        Args:
            post_id: Post ID
            author: Authenticated user writing the comment
            text: Comment body

        Returns:
            Saved post

        Raises:
            NotFoundError: If the post does not exist
        """
        comment = Comment(
            id=CommentId(uuid4()),
            user_id=author.id,
            text=text,
            name=author.name,
            avatar=author.avatar,
            date=datetime.now(),
        )
        return await self.comments.insert(post_id, comment)

    async def delete_comment(
        self, post_id: PostId, comment_id: CommentId, caller_id: UserId
    ) -> Post:
        """Delete a comment written by the caller.

        Only the comment's author may delete it, not the post's owner.

        Raises:
            NotFoundError: If the post does not exist
            EntryNotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller did not write the comment
        """
        return await self.comments.remove(
            post_id,
            caller_id,
            match=lambda comment: comment.id == comment_id,
            owner_of=lambda _post, comment: comment.user_id,
            entry_id=str(comment_id),
        )
