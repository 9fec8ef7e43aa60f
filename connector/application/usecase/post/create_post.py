"""Create post use case."""

import logfire
from pydantic import BaseModel

from connector.application.usecase.common import PostView
from connector.domain.service import PostService, UserService
from connector.domain.value import UserId, parse_identifier


class CreatePostRequest(BaseModel):
    """Create post request."""

    text: str
    author_id: str  # User ID from authenticated user


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        The author's current name and avatar are copied onto the post.

        Raises:
            NotFoundError: If the author no longer exists
        """
        author_id = UserId(parse_identifier(request.author_id, "User"))
        author = await self.user_service.get_by_id(author_id)

        post = await self.post_service.create_post(author, request.text)
        logfire.info("Post created via use case", post_id=str(post.id))
        return PostView.from_domain(post)
