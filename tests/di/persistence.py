"""Mock persistence providers for testing."""

from dishka import Scope, provide

from connector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from connector.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
    InMemoryUserRepository,
)
from connector.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that state survives across HTTP requests within one
    test; every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()
