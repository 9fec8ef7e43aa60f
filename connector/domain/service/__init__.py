"""Domain services."""

from .auth_gate import AuthGate, Caller
from .base import Service
from .credential_service import CredentialService
from .jwt_service import JWTService
from .mutator import NestedListMutator
from .post_service import PostService
from .profile_service import ProfileService
from .user_service import UserService

__all__ = [
    "AuthGate",
    "Caller",
    "CredentialService",
    "JWTService",
    "NestedListMutator",
    "PostService",
    "ProfileService",
    "Service",
    "UserService",
]
