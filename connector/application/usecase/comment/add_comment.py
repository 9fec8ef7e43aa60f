"""Add comment use case."""

from pydantic import BaseModel, RootModel

from connector.application.usecase.common import CommentView
from connector.domain.service import PostService, UserService
from connector.domain.value import PostId, UserId, parse_identifier


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    text: str
    author_id: str  # User ID from authenticated user


class CommentsResponse(RootModel[list[CommentView]]):
    """A post's comments, newest first."""


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentsResponse:
        """Add a comment attributed to the caller.

        Returns:
            The post's comments after the change, new comment first

        Raises:
            NotFoundError: If the author or the post does not exist
        """
        post_id = PostId(parse_identifier(request.post_id, "Post"))
        author_id = UserId(parse_identifier(request.author_id, "User"))
        author = await self.user_service.get_by_id(author_id)

        post = await self.post_service.add_comment(post_id, author, request.text)
        return CommentsResponse([CommentView.from_domain(c) for c in post.comments])
