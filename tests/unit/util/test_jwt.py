"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from connector.config import AuthSettings
from connector.util.jwt import JWTError, JWTSigningError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough-for-hs256")


class TestCreateToken:
    """Tests for create_token."""

    def test_token_carries_subject_and_expiry(self):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)

        token = create_token("user-1", SETTINGS, now=now)

        claims = pyjwt.decode(
            token,
            SETTINGS.jwt_secret,
            algorithms=[SETTINGS.jwt_algorithm],
            options={"verify_exp": False},
        )
        assert claims["sub"] == "user-1"
        assert claims["exp"] == int((now + timedelta(hours=100)).timestamp())

    def test_unsupported_algorithm_raises_signing_error(self):
        settings = AuthSettings(
            jwt_secret=SETTINGS.jwt_secret, jwt_algorithm="NOT-AN-ALGORITHM"
        )

        with pytest.raises(JWTSigningError):
            create_token("user-1", settings)


class TestVerifyToken:
    """Tests for verify_token."""

    def test_round_trip(self):
        payload = verify_token(create_token("user-1", SETTINGS), SETTINGS)

        assert payload.sub == "user-1"

    def test_expired_token(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=101)
        token = create_token("user-1", SETTINGS, now=issued)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_token_signed_with_other_secret(self):
        other = AuthSettings(jwt_secret="another-secret-that-is-also-long-enough-ok")
        token = create_token("user-1", other)

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    def test_tampered_token(self):
        token = create_token("user-1", SETTINGS)
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        with pytest.raises(JWTError):
            verify_token(tampered, SETTINGS)

    def test_garbage(self):
        with pytest.raises(JWTError, match="Invalid token"):
            verify_token("not.a.token", SETTINGS)

    def test_token_without_subject(self):
        token = pyjwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)
