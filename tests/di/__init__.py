"""Mock providers for testing."""

from .container import build_test_container
from .github import MockGithubProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockGithubProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
