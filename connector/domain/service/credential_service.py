"""Credential verification domain service."""

import logfire

from connector.config import AuthSettings
from connector.util.password import hash_password, verify_password

from .base import Service


class CredentialService(Service):
    """Domain service for password hashing and comparison."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize credential service.

        Args:
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.auth_settings = auth_settings

    def hash(self, plaintext: str) -> str:
        """Hash a password for storage.

        Args:
            plaintext: Password as typed by the user

        Returns:
            bcrypt hash
        """
        with logfire.span("credential_service.hash"):
            return hash_password(plaintext, rounds=self.auth_settings.bcrypt_rounds)

    def verify(self, plaintext: str, password_hash: str) -> bool:
        """Compare a password with a stored hash.

        Fails closed: any comparison error is reported as a mismatch.

        Args:
            plaintext: Password as typed by the user
            password_hash: Stored bcrypt hash

        Returns:
            True if the password matches
        """
        with logfire.span("credential_service.verify"):
            matched = verify_password(plaintext, password_hash)
            if not matched:
                logfire.info("Password mismatch")
            return matched
