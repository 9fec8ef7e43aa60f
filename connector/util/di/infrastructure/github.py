"""GitHub infrastructure providers."""

from dishka import Scope, provide

from connector.adapter.github import GithubClient, RealGithubClient
from connector.config import GithubSettings
from connector.util.di.base import ProviderBase


class GithubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGithubProvider(GithubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_client(self, settings: GithubSettings) -> GithubClient:
        """Provide GitHub REST client."""
        return RealGithubClient(settings=settings)
