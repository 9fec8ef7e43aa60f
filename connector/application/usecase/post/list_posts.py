"""List posts use case."""

from pydantic import BaseModel, RootModel

from connector.application.usecase.common import PostView
from connector.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""


class ListPostsResponse(RootModel[list[PostView]]):
    """All posts, newest first."""


class ListPostsUseCase:
    """Use case for listing posts."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """List all posts, newest first."""
        posts = await self.post_service.list_posts()
        return ListPostsResponse([PostView.from_domain(p) for p in posts])
