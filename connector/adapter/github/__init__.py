"""GitHub repository lookup adapter."""

from .client import GithubClient, MockGithubClient, RealGithubClient

__all__ = ["GithubClient", "RealGithubClient", "MockGithubClient"]
