"""Like use cases."""

from .like_post import LikePostRequest, LikePostUseCase, LikesResponse
from .unlike_post import UnlikePostRequest, UnlikePostUseCase

__all__ = [
    "LikePostRequest",
    "LikePostUseCase",
    "LikesResponse",
    "UnlikePostRequest",
    "UnlikePostUseCase",
]
