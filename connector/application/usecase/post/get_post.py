"""Get post use case."""

from pydantic import BaseModel

from connector.application.usecase.common import PostView
from connector.domain.service import PostService
from connector.domain.value import PostId, parse_identifier


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist or the ID is malformed
        """
        post_id = PostId(parse_identifier(request.post_id, "Post"))
        post = await self.post_service.get_post_by_id(post_id)
        return PostView.from_domain(post)
