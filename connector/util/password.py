"""Password hashing utilities.

bcrypt salts every hash and is deliberately slow. Passwords are truncated to
72 bytes, the most bcrypt will read.
"""

import bcrypt
import logfire

BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt work factor

    Returns:
        Hash string starting with "$2b$"
    """
    pw_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash.

    Never raises: a hash that cannot be compared counts as a mismatch.

    Args:
        password: Plaintext password
        password_hash: Stored bcrypt hash

    Returns:
        True if the password matches the hash
    """
    try:
        pw_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        hash_bytes = password_hash.encode("utf-8")
        return bcrypt.checkpw(pw_bytes, hash_bytes)
    except (ValueError, TypeError, AttributeError) as e:
        logfire.warn("Password comparison failed", error_type=type(e).__name__)
        return False
