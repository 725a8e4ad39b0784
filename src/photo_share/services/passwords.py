"""Salted password hashing."""

import hashlib
import hmac
import secrets
from functools import lru_cache

from photo_share.domain.users import PasswordEntry

DEFAULT_ITERATIONS = 200_000
SALT_BYTES = 16


def _pbkdf2_hash(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, iterations)


def make_password_entry(
    password: str, iterations: int = DEFAULT_ITERATIONS
) -> PasswordEntry:
    """Hash a cleartext password with a fresh random salt."""
    salt = secrets.token_bytes(SALT_BYTES)
    digest = _pbkdf2_hash(password, salt, iterations)
    return PasswordEntry(digest=digest.hex(), salt=salt.hex(), iterations=iterations)


def check_password(entry: PasswordEntry, password: str) -> bool:
    """Return true when the cleartext password matches the stored entry.

    The entry's own iteration count is used, so raising the configured count
    only affects passwords hashed afterwards.
    """
    try:
        salt = bytes.fromhex(entry.salt)
    except ValueError:
        return False
    candidate = _pbkdf2_hash(password, salt, entry.iterations).hex()
    return hmac.compare_digest(candidate, entry.digest)


@lru_cache(maxsize=4)
def decoy_password_entry(iterations: int) -> PasswordEntry:
    """Return an entry no password matches, for checks against unknown logins."""
    return make_password_entry(secrets.token_urlsafe(32), iterations)
