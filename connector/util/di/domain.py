"""Domain layer DI providers."""

from dishka import Scope, provide

from connector.config import AuthSettings
from connector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from connector.domain.service import (
    AuthGate,
    CredentialService,
    JWTService,
    PostService,
    ProfileService,
    UserService,
)
from connector.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Storage-backed services are REQUEST-scoped to align with the
    repository/session lifecycle. Token and credential services only depend
    on the immutable auth settings.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_credential_service(self, auth_settings: AuthSettings) -> CredentialService:
        """Provide password hashing and verification."""
        return CredentialService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_auth_gate(self, jwt_service: JWTService) -> AuthGate:
        """Provide request authentication gate."""
        return AuthGate(jwt_service=jwt_service)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)
