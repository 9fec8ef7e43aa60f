"""Like post use case."""

from pydantic import BaseModel, RootModel

from connector.application.usecase.common import LikeView
from connector.domain.service import PostService
from connector.domain.value import PostId, UserId, parse_identifier


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: str
    user_id: str  # From the authenticated caller


class LikesResponse(RootModel[list[LikeView]]):
    """A post's likes, newest first."""


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikesResponse:
        """Like a post on behalf of the caller.

        Returns:
            The post's likes after the change

        Raises:
            NotFoundError: If the post does not exist
            AlreadyLikedError: If the caller already likes the post
        """
        post_id = PostId(parse_identifier(request.post_id, "Post"))
        user_id = UserId(parse_identifier(request.user_id, "User"))

        post = await self.post_service.like_post(post_id, user_id)
        return LikesResponse([LikeView.from_domain(like) for like in post.likes])
