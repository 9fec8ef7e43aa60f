"""Delete comment use case."""

from pydantic import BaseModel

from connector.application.usecase.common import CommentView
from connector.domain.error import EntryNotFoundError, NotFoundError
from connector.domain.service import PostService
from connector.domain.value import CommentId, PostId, UserId, parse_identifier

from .add_comment import CommentsResponse


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # From the authenticated caller


class DeleteCommentUseCase:
    """Use case for deleting a comment written by the caller."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeleteCommentRequest) -> CommentsResponse:
        """Delete a comment.

        Raises:
            NotFoundError: If the post does not exist
            EntryNotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller did not write the comment
        """
        post_id = PostId(parse_identifier(request.post_id, "Post"))
        user_id = UserId(parse_identifier(request.user_id, "User"))
        try:
            comment_id = CommentId(parse_identifier(request.comment_id, "Comment"))
        except NotFoundError:
            raise EntryNotFoundError("Comment", request.comment_id)

        post = await self.post_service.delete_comment(post_id, comment_id, user_id)
        return CommentsResponse([CommentView.from_domain(c) for c in post.comments])
