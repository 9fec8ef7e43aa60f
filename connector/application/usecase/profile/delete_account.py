"""Delete account use case."""

import logfire
from pydantic import BaseModel

from connector.application.usecase.common import MessageResponse
from connector.domain.service import PostService, ProfileService, UserService
from connector.domain.value import UserId, parse_identifier


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    user_id: str  # From the authenticated caller


class DeleteAccountUseCase:
    """Use case for deleting the caller's posts, profile and user."""

    def __init__(
        self,
        post_service: PostService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> None:
        """Initialize delete account use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> MessageResponse:
        """Delete everything the caller owns.

        Posts go first, then the profile, then the user. Likes and comments
        the caller left on other users' posts are kept.
        """
        user_id = UserId(parse_identifier(request.user_id, "User"))

        with logfire.span("delete_account", user_id=str(user_id)):
            posts = await self.post_service.delete_posts_by_user(user_id)
            profile = await self.profile_service.delete_profile(user_id)
            user = await self.user_service.delete(user_id)
            logfire.info(
                "Account deleted",
                user_id=str(user_id),
                posts_removed=posts,
                profile_removed=profile,
                user_removed=user,
            )
        return MessageResponse(msg="User deleted")
