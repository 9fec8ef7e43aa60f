"""Delete post use case."""

from pydantic import BaseModel

from connector.application.usecase.common import MessageResponse
from connector.domain.service import PostService
from connector.domain.value import PostId, UserId, parse_identifier


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # From the authenticated caller


class DeletePostUseCase:
    """Use case for deleting a post owned by the caller."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Delete a post.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller does not own the post
        """
        post_id = PostId(parse_identifier(request.post_id, "Post"))
        user_id = UserId(parse_identifier(request.user_id, "User"))
        await self.post_service.delete_post(post_id, user_id)
        return MessageResponse(msg="Post removed")
