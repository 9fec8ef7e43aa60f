"""Unit tests for password hashing."""

from connector.util.password import hash_password, verify_password


class TestHashPassword:
    """Tests for hash_password."""

    def test_hash_is_salted(self):
        """Hashing the same password twice yields different hashes."""
        first = hash_password("secret123", rounds=4)
        second = hash_password("secret123", rounds=4)

        assert first != second
        assert first.startswith("$2b$04$")

    def test_long_passwords_are_truncated_to_bcrypt_limit(self):
        """Bytes beyond the 72nd do not change the outcome."""
        base = "a" * 72
        password_hash = hash_password(base + "tail-one", rounds=4)

        assert verify_password(base + "tail-two", password_hash)


class TestVerifyPassword:
    """Tests for verify_password."""

    def test_matching_password(self):
        password_hash = hash_password("secret123", rounds=4)

        assert verify_password("secret123", password_hash) is True

    def test_wrong_password(self):
        password_hash = hash_password("secret123", rounds=4)

        assert verify_password("secret124", password_hash) is False

    def test_malformed_hash_fails_closed(self):
        """A hash bcrypt cannot parse counts as a mismatch, not a crash."""
        assert verify_password("secret123", "not-a-bcrypt-hash") is False

    def test_missing_hash_fails_closed(self):
        assert verify_password("secret123", None) is False  # type: ignore[arg-type]
