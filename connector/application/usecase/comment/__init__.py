"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentsResponse
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentsResponse",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
]
