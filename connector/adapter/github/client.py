"""GitHub REST client for public repository lookups.

Profiles can name a GitHub user; the API exposes that user's most recently
created public repositories.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import logfire

from connector.config import GithubSettings
from connector.domain.error import ExternalServiceError, NotFoundError


class GithubClient(ABC):
    """Base class for GitHub clients.

    Provides type distinction for dependency injection.
    """

    @abstractmethod
    async def get_repositories(self, username: str) -> list[dict[str, Any]]:
        """Fetch the five most recently created public repositories.

        Args:
            username: GitHub username

        Returns:
            Repository objects as returned by the GitHub API

        Raises:
            NotFoundError: If GitHub does not answer with 200
            ExternalServiceError: If GitHub cannot be reached
        """
        pass


class RealGithubClient(GithubClient):
    """GitHub client backed by httpx."""

    def __init__(
        self,
        settings: GithubSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize GitHub client.

        Args:
            settings: API URL, OAuth app credentials and request timeout
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings
        self.transport = transport

    async def get_repositories(self, username: str) -> list[dict[str, Any]]:
        """Fetch the five most recently created public repositories."""
        url = f"{self.settings.api_url}/users/{username}/repos"
        params = {
            "per_page": "5",
            "sort": "created:asc",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
        }

        with logfire.span("github.get_repositories", username=username):
            try:
                async with httpx.AsyncClient(
                    timeout=self.settings.timeout, transport=self.transport
                ) as client:
                    response = await client.get(
                        url, params=params, headers={"user-agent": "connector-api"}
                    )
            except httpx.HTTPError as e:
                logfire.error("GitHub request failed", username=username, error=str(e))
                raise ExternalServiceError("GitHub") from e

            if response.status_code != 200:
                logfire.warn(
                    "GitHub profile lookup failed",
                    username=username,
                    status_code=response.status_code,
                )
                raise NotFoundError("GitHub profile", username)

            repositories = response.json()
            logfire.info(
                "GitHub repositories fetched",
                username=username,
                count=len(repositories),
            )
            return repositories


class MockGithubClient(GithubClient):
    """Mock GitHub client for testing.

    Returns deterministic repositories for every user except ``missing``.
    """

    def __init__(self) -> None:
        self.requested: list[str] = []

    async def get_repositories(self, username: str) -> list[dict[str, Any]]:
        """Return mock repositories."""
        self.requested.append(username)
        if username == "missing":
            raise NotFoundError("GitHub profile", username)
        return [
            {
                "id": index,
                "name": f"{username}-repo-{index}",
                "html_url": f"https://github.com/{username}/{username}-repo-{index}",
                "description": None,
                "stargazers_count": 0,
                "watchers_count": 0,
                "forks_count": 0,
            }
            for index in range(1, 4)
        ]
