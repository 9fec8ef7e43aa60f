"""GitHub use cases."""

from .get_repositories import (
    GetRepositoriesRequest,
    GetRepositoriesResponse,
    GetRepositoriesUseCase,
)

__all__ = [
    "GetRepositoriesRequest",
    "GetRepositoriesResponse",
    "GetRepositoriesUseCase",
]
