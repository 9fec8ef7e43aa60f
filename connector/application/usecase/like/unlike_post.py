"""Unlike post use case."""

from pydantic import BaseModel

from connector.application.usecase.common import LikeView
from connector.domain.service import PostService
from connector.domain.value import PostId, UserId, parse_identifier

from .like_post import LikesResponse


class UnlikePostRequest(BaseModel):
    """Unlike post request."""

    post_id: str
    user_id: str  # From the authenticated caller


class UnlikePostUseCase:
    """Use case for removing the caller's like from a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UnlikePostRequest) -> LikesResponse:
        """Remove the caller's like.

        Raises:
            NotFoundError: If the post does not exist
            NotLikedError: If the caller has not liked the post
        """
        post_id = PostId(parse_identifier(request.post_id, "Post"))
        user_id = UserId(parse_identifier(request.user_id, "User"))

        post = await self.post_service.unlike_post(post_id, user_id)
        return LikesResponse([LikeView.from_domain(like) for like in post.likes])
