"""Domain models for users."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PasswordEntry:
    """Salted PBKDF2 digest with the iteration count it was made with.

    Digest and salt are hex encoded.
    """

    digest: str
    salt: str
    iterations: int


@dataclass(frozen=True)
class UserRecord:
    """Represents a registered user stored in the database."""

    id: UUID
    login_name: str
    first_name: str
    last_name: str
    password: PasswordEntry
    location: str = ""
    description: str = ""
    occupation: str = ""
