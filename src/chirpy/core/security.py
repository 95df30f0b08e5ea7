"""Password hashing utilities built on bcrypt."""
from __future__ import annotations

import bcrypt

from chirpy.core.settings import settings

MAX_PASSWORD_BYTES = 72


class PasswordTooLongError(ValueError):
    """Raised when a password exceeds what bcrypt can hash."""

    def __init__(self, length: int, limit: int = MAX_PASSWORD_BYTES) -> None:
        super().__init__(f"password is {length} bytes, the limit is {limit}")
        self.length = length
        self.limit = limit


def hash_password(password: str, rounds: int | None = None) -> bytes:
    """Hash a password with a freshly generated bcrypt salt.

    Args:
        password: Cleartext password supplied by the user.
        rounds: bcrypt cost factor; defaults to ``settings.bcrypt_rounds``.

    Returns:
        The bcrypt hash, salt and cost included, as raw bytes.

    Raises:
        PasswordTooLongError: If the UTF-8 password exceeds 72 bytes.
    """
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise PasswordTooLongError(len(encoded))
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(encoded, salt)


def verify_password(password: str, password_hash: bytes) -> bool:
    """Return True if `password` matches the stored bcrypt hash.

    The comparison is constant time. A mismatch or a malformed hash yields
    False rather than an exception.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash)
    except ValueError:
        return False
