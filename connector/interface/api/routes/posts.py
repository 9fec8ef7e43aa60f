"""Post, like and comment routes.

Every route requires the session token header.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from connector.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentsResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from connector.application.usecase.common import MessageResponse, PostView
from connector.application.usecase.like import (
    LikePostRequest,
    LikePostUseCase,
    LikesResponse,
    UnlikePostRequest,
    UnlikePostUseCase,
)
from connector.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from connector.config import AuthSettings
from connector.domain.service import AuthGate

from .security import authenticate

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class TextAPIRequest(BaseModel):
    """API request body for a post or a comment."""

    text: str = Field(min_length=1, max_length=10000)


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: TextAPIRequest,
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> PostView:
    """Create a post attributed to the caller."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await create_post_use_case.execute(
        CreatePostRequest(text=body.text, author_id=str(caller.user_id))
    )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    request: Request,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> ListPostsResponse:
    """List all posts, newest first."""
    authenticate(request, auth_gate, auth_settings)
    return await list_posts_use_case.execute(ListPostsRequest())


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    request: Request,
    get_post_use_case: FromDishka[GetPostUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> PostView:
    """Get a single post."""
    authenticate(request, auth_gate, auth_settings)
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> MessageResponse:
    """Delete a post owned by the caller."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=str(caller.user_id))
    )


@router.put("/like/{post_id}", response_model=LikesResponse)
async def like_post(
    post_id: str,
    request: Request,
    like_post_use_case: FromDishka[LikePostUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> LikesResponse:
    """Like a post; returns the post's likes."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await like_post_use_case.execute(
        LikePostRequest(post_id=post_id, user_id=str(caller.user_id))
    )


@router.put("/unlike/{post_id}", response_model=LikesResponse)
async def unlike_post(
    post_id: str,
    request: Request,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> LikesResponse:
    """Remove the caller's like; returns the post's likes."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await unlike_post_use_case.execute(
        UnlikePostRequest(post_id=post_id, user_id=str(caller.user_id))
    )


@router.post("/comment/{post_id}", response_model=CommentsResponse)
async def add_comment(
    post_id: str,
    body: TextAPIRequest,
    request: Request,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> CommentsResponse:
    """Comment on a post; returns the post's comments, newest first."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await add_comment_use_case.execute(
        AddCommentRequest(
            post_id=post_id, text=body.text, author_id=str(caller.user_id)
        )
    )


@router.delete("/comment/{post_id}/{comment_id}", response_model=CommentsResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    auth_gate: FromDishka[AuthGate],
    auth_settings: FromDishka[AuthSettings],
) -> CommentsResponse:
    """Delete a comment written by the caller; returns the remaining comments."""
    caller = authenticate(request, auth_gate, auth_settings)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            post_id=post_id, comment_id=comment_id, user_id=str(caller.user_id)
        )
    )
