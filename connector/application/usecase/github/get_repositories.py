"""Get GitHub repositories use case."""

from typing import Any

from pydantic import BaseModel, RootModel

from connector.adapter.github import GithubClient


class GetRepositoriesRequest(BaseModel):
    """Get repositories request."""

    username: str


class GetRepositoriesResponse(RootModel[list[dict[str, Any]]]):
    """Repository objects exactly as GitHub returns them."""


class GetRepositoriesUseCase:
    """Use case for listing a GitHub user's latest repositories."""

    def __init__(self, github_client: GithubClient) -> None:
        self.github_client = github_client

    async def execute(self, request: GetRepositoriesRequest) -> GetRepositoriesResponse:
        """Fetch up to five repositories.

        Raises:
            NotFoundError: If GitHub has no such user
            ExternalServiceError: If GitHub cannot be reached
        """
        repositories = await self.github_client.get_repositories(request.username)
        return GetRepositoriesResponse(repositories)
